#!/usr/bin/python
# Copyright (c) 2020 Leandro Pereira <leandro@hardinfo.org>
# Licensed under GPLv2.

C_PUSH = 'C_PUSH'
C_POP = 'C_POP'
C_LABEL = 'C_LABEL'
C_GOTO = 'C_GOTO'
C_IF = 'C_IF'
C_FUNCTION = 'C_FUNCTION'
C_CALL = 'C_CALL'
C_RETURN = 'C_RETURN'
C_ARITHMETIC = 'C_ARITHMETIC'

# Order matters: first prefix that matches wins.
KEYWORDS = (
    ('push', C_PUSH),
    ('pop', C_POP),
    ('label', C_LABEL),
    ('goto', C_GOTO),
    ('if-goto', C_IF),
    ('function', C_FUNCTION),
    ('call', C_CALL),
    ('return', C_RETURN),
)

ARITHMETIC = ('add', 'sub', 'neg', 'eq', 'gt', 'lt', 'and', 'or', 'not')


def command_type(text):
    """Classify a normalized command line.

    This is a prefix test, not a token test, so "gotox" is still a goto.
    Anything that doesn't start with a keyword is arithmetic.
    """
    for keyword, typ in KEYWORDS:
        if text.startswith(keyword):
            return typ
    return C_ARITHMETIC


def strip_line(raw):
    return raw.split('//', 1)[0].strip()


class LineSource:
    def __init__(self, fp):
        self.lines = fp.read().split('\n')
        self.pos = 0
        self.line = 0
        self.current = None

    def _skip_blank(self):
        while self.pos < len(self.lines) and not strip_line(self.lines[self.pos]):
            self.pos += 1

    def has_more_lines(self):
        self._skip_blank()
        return self.pos < len(self.lines)

    def advance(self):
        self._skip_blank()
        if self.pos >= len(self.lines):
            raise EOFError("No more commands in input")

        self.current = strip_line(self.lines[self.pos])
        self.pos += 1
        self.line = self.pos
        return self.line, self.current
