#!/usr/bin/env python3
import sys
import time
import contextlib

from shared import utility as util
from shared.errors import ToolError, FileError

VERBOSITY = 0

def codec_main(codec_name, prog, encoder, decoder, argv=None):
    """Common handling and argument parsing for a text codec interface.

    The encoder and decoder both take an iterable of input lines and return
    the transformed text, which is written to stdout on success.

    Params:
        codec_name - string of the codec being used
        prog       - program name shown in usage and error messages
        encoder    - function that will encode the lines of a file to a string
        decoder    - function that will decode the lines of a file to a string
        argv       - list of argument strings (defaults to sys.argv[1:])

    Returns:
        The process exit code.
    """
    global VERBOSITY

    try:
        # Handle argument parsing
        parser = util.ToolArgumentParser(prog=prog, usage='%(prog)s [-v] [-d] <file_path>')
        parser.add_argument('infile', metavar='FILE', nargs='?', default=None, help='file to encode or decode')
        parser.add_argument('-d', '--decode', action='store_true', default=False, help='decode the file instead of encoding it')
        parser.add_argument('-v', '--verbosity', action='count', default=0, help='increase output verbosity')
        args = parser.parse_tool_args(argv)

        VERBOSITY = args.verbosity
        inpath = args.infile
        transform = decoder if args.decode else encoder

        timediff = time.perf_counter()

        try:
            # Close the file even when the transform stops part way through
            with contextlib.closing(util.filepath_lines(inpath)) as lines:
                result = transform(lines)

            old_size = util.file_size(inpath) if VERBOSITY > 0 else 0
        except (OSError, UnicodeDecodeError) as e:
            raise FileError('io error', e) from e

        timediff = time.perf_counter() - timediff

    except ToolError as e:
        print(e, file=sys.stderr)
        return e.exit_code

    print(result)

    if VERBOSITY > 0:
        new_size = len(result.encode(util.ENCODING))
        out_str = f'{inpath} {old_size}B -> <{codec_name}> -> {new_size}B'

        if VERBOSITY > 1:
            if min(old_size, new_size) > 0:
                ratio = max(old_size, new_size) / min(old_size, new_size)

                out_str += ' (%.0f:1) [%.1f%% delta]' % (ratio, (1 - (1.0 / ratio)) * 100)

            rate = max(old_size, new_size) / max(timediff, 1e-9)
            out_str += ' [%.2f s (%sB/s)]' % (timediff, util.size_fmt(rate))

        print(out_str, file=sys.stderr)

    return 0
