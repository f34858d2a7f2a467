#!/usr/bin/python
# Copyright (c) 2020 Leandro Pereira <leandro@hardinfo.org>
# Licensed under GPLv2.

import os
import sys
import tempfile
import traceback
from .parser import Parser, Malformed, MalformedCommand
from .writer import EchoWriter

VM_EXT = '.vm'
ASM_EXT = '.asm'
CRLF = '\r\n'


def translate(parser, writer):
    for command in parser.commands():
        if isinstance(command, Malformed):
            raise MalformedCommand(command.reason, command.line, command.text)
        yield from writer.write(command)


def check_input(argv):
    """Returns an error message for a bad command line, or None."""
    if len(argv) != 1:
        return "Invalid number of arguments"

    path = argv[0]
    if not os.path.exists(path):
        return "No such file or directory"

    base, ext = os.path.splitext(os.path.basename(path))
    if ext != VM_EXT:
        return "Invalid file extension"
    if not base[:1].isupper():
        return "First character in file name must be an uppercase letter"

    return None


def output_path(path):
    base = os.path.splitext(os.path.basename(path))[0]
    return os.path.join(os.path.dirname(os.path.abspath(path)), base + ASM_EXT)


def current_umask():
    mask = os.umask(0)
    os.umask(mask)
    return mask


def write_output(path, lines):
    fd, tmp = tempfile.mkstemp(suffix=ASM_EXT, dir=os.path.dirname(path))
    try:
        with os.fdopen(fd, 'w', newline='') as out:
            for line in lines:
                out.write(line + CRLF)
        # mkstemp creates 0600; give the result the mode open() would.
        os.chmod(tmp, 0o666 & ~current_umask())
        os.replace(tmp, path)
    except BaseException:
        os.unlink(tmp)
        raise


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]

    error = check_input(argv)
    if error is not None:
        print(error)
        return 0

    try:
        with open(argv[0]) as file:
            parser = Parser(file)
        write_output(output_path(argv[0]), translate(parser, EchoWriter()))
    except (SyntaxError, OSError, UnicodeDecodeError) as e:
        print("Exception: %s" % e)
        traceback.print_exc(file=sys.stdout)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
