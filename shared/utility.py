#!/usr/bin/env python3
import os
import sys
import argparse

from shared.errors import UsageError, InvalidArgError

# Input files are always read as UTF-8 text
ENCODING = 'utf-8'

def filepath_lines(filepath, encoding = ENCODING):
    """Generator function for reading lines from a filepath in a for loop.

    Params:
        filepath - file path to read from
        encoding - text encoding of the file

    Returns:
        The iterator for reading lines (without line terminators) from a file.
    """
    # Only '\n' ends a line, so no newline translation is done on read
    with open(filepath, 'r', encoding=encoding, newline='\n') as file:
        yield from file_lines(file)


def file_lines(file):
    """Generator function for reading lines from a text file object in a for loop.

    A trailing '\\n' or '\\r\\n' is removed from each line. A final line with
    no terminator is still produced.

    Params:
        file - text file object to read from

    Returns:
        The iterator for reading lines from a file.
    """
    for line in file:
        if line.endswith('\n'):
            line = line[:-1]

            if line.endswith('\r'):
                line = line[:-1]

        yield line


def file_size(filepath) -> int:
    """Return the size of the file on disk (in bytes).
    """
    return os.path.getsize(filepath)


def size_fmt(size: int, scale: int = 1024) -> str:
    """Format a size into a more human readable format.

    Params:
        size  - integer number to scale
        scale - the scaling factor between units

    Returns:
        The formatted size string.
    """
    for unit in ['', 'K', 'M', 'G', 'T', 'P', 'E', 'Z']:
        if abs(size) < scale:
            return '%3.1f %s' % (size, unit)

        size /= scale

    return '%.1f Y' % (size)


class ToolArgumentParser(argparse.ArgumentParser):
    """Argument parser that reports problems as tool errors instead of exiting.

    The parser expects a single optional positional argument named 'infile'.
    Every token starting with '-' must be one of the parser's own flags (or a
    group of its short flags, such as '-vv'); option prefixes are not expanded.
    """

    def __init__(self, *args, **kwargs):
        kwargs.setdefault('allow_abbrev', False)
        super().__init__(*args, **kwargs)

    def error(self, message):
        raise UsageError(f'{self.prog}: {message}')

    def is_known_flag(self, arg: str) -> bool:
        """Return whether a flag-like token names options of this parser.
        """
        if arg in self._option_string_actions:
            return True

        # Grouped short flags, e.g. '-lw'
        if len(arg) > 2 and arg[1] != '-':
            return all(f'-{c}' in self._option_string_actions for c in arg[1:])

        return False

    def parse_tool_args(self, args=None):
        """Parse the command line and validate the file path argument.

        Params:
            args - list of argument strings (defaults to sys.argv[1:])

        Returns:
            The parsed argument namespace.
        """
        if args is None:
            args = sys.argv[1:]

        # Report the first unknown flag before anything else, including '-' and '-5'
        for arg in args:
            if arg.startswith('-') and not self.is_known_flag(arg):
                raise InvalidArgError(arg)

        (namespace, extras) = self.parse_known_args(args)

        if extras:
            raise UsageError(f'{self.prog}: unexpected argument: {extras[0]}')

        if namespace.infile is None:
            raise UsageError('Usage: ' + self.usage % dict(prog=self.prog))

        return namespace
