#!/usr/bin/python
# Copyright (c) 2020 Leandro Pereira <leandro@hardinfo.org>
# Licensed under GPLv2.


class Writer:
    """Code generation collaborator.

    write() is called once per parsed command, in parse order, and returns
    the output lines for that command (possibly none).
    """

    def write(self, command):
        raise NotImplementedError


class EchoWriter(Writer):
    """Writes back each command as it appeared, minus comments and padding."""

    def write(self, command):
        return [command.text]
