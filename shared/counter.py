#!/usr/bin/env python3
import sys
import time

from shared import utility as util
from shared.errors import ToolError, FileError

VERBOSITY = 0

def counter_main(counter_name, prog, counter, fields, argv=None):
    """Common handling and argument parsing for a counter interface (a one-way summary of a file).

    Each field is a (flag, long_flag, name, help) tuple. When none of the
    field flags are given on the command line all fields are counted.

    Params:
        counter_name - string of the counter being used
        prog         - program name shown in usage and error messages
        counter      - function taking a file path and one boolean keyword per
                       field name, returning the selected counts in field order
        fields       - list of selectable count fields
        argv         - list of argument strings (defaults to sys.argv[1:])

    Returns:
        The process exit code.
    """
    global VERBOSITY

    usage = '%(prog)s [-v] ' + ' '.join(f'[{flag}]' for (flag, _, _, _) in fields) + ' <file_path>'

    try:
        # Handle argument parsing
        parser = util.ToolArgumentParser(prog=prog, usage=usage)
        parser.add_argument('infile', metavar='FILE', nargs='?', default=None, help=f'file to compute the {counter_name} counts for')
        for (flag, long_flag, name, help_str) in fields:
            parser.add_argument(flag, long_flag, dest=name, action='store_true', default=False, help=help_str)
        parser.add_argument('-v', '--verbosity', action='count', default=0, help='increase output verbosity')
        args = parser.parse_tool_args(argv)

        VERBOSITY = args.verbosity
        inpath = args.infile

        # No field selected means every field is selected
        selected = {name: getattr(args, name) for (_, _, name, _) in fields}
        if not any(selected.values()):
            selected = dict.fromkeys(selected, True)

        timediff = time.perf_counter()

        try:
            counts = counter(inpath, **selected)
            size = util.file_size(inpath) if VERBOSITY > 0 else 0
        except (OSError, UnicodeDecodeError) as e:
            raise FileError('Error reading file', e) from e

        timediff = time.perf_counter() - timediff

    except ToolError as e:
        print(e, file=sys.stderr)
        return e.exit_code

    # Each count is followed by a space, with no trailing newline
    print(''.join(f'{count} ' for count in counts), end='')

    if VERBOSITY > 0:
        out_str = f'{inpath} {util.size_fmt(size)}B : <{counter_name}>'
        out_str += ' [%.2f s (%sB/s)]' % (timediff, util.size_fmt(size / max(timediff, 1e-9)))

        print(out_str, file=sys.stderr)

    return 0
