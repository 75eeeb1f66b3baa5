#!/usr/bin/env python3
# Exit codes reported by the tool drivers
EXIT_IO = 1
EXIT_USAGE = 2
EXIT_PARSE = 3


class ToolError(Exception):
    """Base class for errors that abort a tool invocation.
    """
    exit_code = EXIT_IO


class UsageError(ToolError):
    """The command line is missing the file path or is otherwise malformed.
    """
    exit_code = EXIT_USAGE


class InvalidArgError(ToolError):
    """An unrecognised flag-like token was given on the command line.
    """
    exit_code = EXIT_USAGE

    def __init__(self, arg: str):
        super().__init__(f'Invalid arg: {arg}')
        self.arg = arg


class FileError(ToolError):
    """Opening, reading or inspecting the input file failed.

    Params:
        prefix - tool specific text placed before the system message
        error  - the underlying OSError or UnicodeDecodeError
    """
    exit_code = EXIT_IO

    def __init__(self, prefix: str, error: Exception):
        super().__init__(f'{prefix}: {error}')
        self.error = error


class ParseError(ToolError):
    """A run in run-length encoded input has no usable count.
    """
    exit_code = EXIT_PARSE

    def __init__(self, symbol: str, offset: int):
        super().__init__(f'Error parsing number: missing count for run {symbol!r} at offset {offset}')
        self.symbol = symbol
        self.offset = offset
