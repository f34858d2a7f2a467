import io

import pytest

from vmtranslator.lexer import LineSource, command_type, ARITHMETIC
from vmtranslator.lexer import (C_PUSH, C_POP, C_LABEL, C_GOTO, C_IF,
                                C_FUNCTION, C_CALL, C_RETURN, C_ARITHMETIC)


@pytest.mark.parametrize('text,typ', [
    ('push constant 7', C_PUSH),
    ('pop local 0', C_POP),
    ('label LOOP', C_LABEL),
    ('goto LOOP', C_GOTO),
    ('if-goto END', C_IF),
    ('function Main.main 2', C_FUNCTION),
    ('call Math.multiply 2', C_CALL),
    ('return', C_RETURN),
])
def test_keywords(text, typ):
    assert command_type(text) == typ


@pytest.mark.parametrize('op', ARITHMETIC)
def test_arithmetic(op):
    assert command_type(op) == C_ARITHMETIC


def test_prefix_match_is_loose():
    assert command_type('gotox') == C_GOTO
    assert command_type('popcorn 1 2') == C_POP


def test_blank_and_comments_only():
    source = LineSource(io.StringIO("\n   \n// a comment\n\t// another\n\n"))
    assert not source.has_more_lines()
    with pytest.raises(EOFError):
        source.advance()


def test_skips_blank_lines_and_tracks_line_numbers():
    source = LineSource(io.StringIO("// header\n\npush constant 7 // seven\n  add  \n"))
    assert source.has_more_lines()
    assert source.advance() == (3, 'push constant 7')
    assert source.has_more_lines()
    assert source.advance() == (4, 'add')
    assert not source.has_more_lines()


def test_comment_without_space():
    source = LineSource(io.StringIO("neg//negate\r\n"))
    assert source.advance() == (1, 'neg')


def test_form_feed_does_not_shift_line_numbers():
    source = LineSource(io.StringIO("\x0c\npush constant 7\n"))
    assert source.advance() == (2, 'push constant 7')
    assert not source.has_more_lines()


def test_vertical_tab_stays_inside_the_line():
    source = LineSource(io.StringIO("push\x0bconstant 7\n"))
    assert source.advance() == (1, 'push\x0bconstant 7')
    assert not source.has_more_lines()
