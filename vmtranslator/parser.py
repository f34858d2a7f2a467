#!/usr/bin/python
# Copyright (c) 2020 Leandro Pereira <leandro@hardinfo.org>
# Licensed under GPLv2.

from collections import namedtuple
import re

from .lexer import LineSource, command_type
from .lexer import C_PUSH, C_POP, C_FUNCTION, C_CALL, C_RETURN, C_ARITHMETIC


Command = namedtuple('Command', ['type', 'arg1', 'arg2', 'line', 'text'])
Malformed = namedtuple('Malformed', ['line', 'text', 'reason'])

WITH_INDEX = (C_PUSH, C_POP, C_FUNCTION, C_CALL)

WHITESPACE = re.compile(r'\s+')
NUMBER = re.compile(r'[+-]?\d+')


class MalformedCommand(SyntaxError):
    def __init__(self, msg, line=None, text=None):
        if line is not None:
            msg = "%s (line %d: %r)" % (msg, line, text)
        super().__init__(msg)
        self.line = line
        self.command_text = text


def extract(text, typ, line=None):
    """Split a normalized command into its arguments.

    Returns a Command, or a Malformed when the arguments the command type
    requires are missing or the index isn't a decimal integer.
    """
    if typ == C_ARITHMETIC:
        return Command(typ, text, None, line, text)
    if typ == C_RETURN:
        return Command(typ, None, None, line, text)

    tokens = WHITESPACE.split(text)
    if len(tokens) < 2:
        return Malformed(line, text, "Expecting an argument")

    if typ not in WITH_INDEX:
        return Command(typ, tokens[1], None, line, text)

    if len(tokens) < 3:
        return Malformed(line, text, "Expecting an index")
    if not NUMBER.fullmatch(tokens[2]):
        return Malformed(line, text, "Index is not a number: %s" % tokens[2])

    return Command(typ, tokens[1], int(tokens[2], 10), line, text)


class Parser:
    """Sequential cursor over the commands of a single .vm stream.

    There is no current command until advance() is called; every call to
    advance() replaces it with a fresh Command (or Malformed) value.
    """

    def __init__(self, fp):
        self.source = LineSource(fp)
        self.current = None

    def has_more_lines(self):
        return self.source.has_more_lines()

    def advance(self):
        line, text = self.source.advance()
        self.current = extract(text, command_type(text), line)
        return self.current

    def commands(self):
        while self.has_more_lines():
            yield self.advance()

    def _command(self):
        if self.current is None:
            raise MalformedCommand("No current command, call advance() first")
        if isinstance(self.current, Malformed):
            raise MalformedCommand(self.current.reason,
                                   self.current.line, self.current.text)
        return self.current

    def command_type(self):
        return self._command().type

    def arg1(self):
        cmd = self._command()
        if cmd.type == C_RETURN:
            raise MalformedCommand("return has no arguments", cmd.line, cmd.text)
        return cmd.arg1

    def arg2(self):
        cmd = self._command()
        if cmd.type not in WITH_INDEX:
            raise MalformedCommand("%s has no index" % cmd.type, cmd.line, cmd.text)
        return cmd.arg2
