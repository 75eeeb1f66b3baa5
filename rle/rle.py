#!/usr/bin/env python3
import sys

from shared import codec
from shared.errors import ParseError

def rle_encode(lines):
    """
    Encode text using the RLE codec.

    Lines are joined without a separator, so a run may continue across a
    line boundary. Each run is written as its character followed by the
    decimal length of the run.

    Params:
        lines - iterable of text lines (without line terminators)

    Returns:
        The encoded string.
    """
    out = []

    # Initialize sequence tracker and counter
    start = None
    count = 0

    # Scan input for sequences of repeated symbols
    for line in lines:
        for symbol in line:
            if symbol == start:
                count += 1
            else:
                # Output symbol sequence encoding
                if start is not None:
                    out.append(f'{start}{count}')

                # Reset sequence tracker and counter
                (start, count) = (symbol, 1)

    # Output final sequence encoding
    if start is not None:
        out.append(f'{start}{count}')

    return ''.join(out)


def rle_decode(lines):
    """
    Decode text using the RLE codec.

    Params:
        lines - iterable of encoded text lines (without line terminators)

    Returns:
        The decoded string.

    Raises:
        ParseError - a run in the input has no count
    """
    out = []

    # Initialize run symbol, digit buffer and stream position
    symbol = None
    digits = []
    offset = run_offset = 0

    # Scan input for (symbol, count) pairs
    for line in lines:
        for ch in line:
            if symbol is None:
                (symbol, run_offset) = (ch, offset)
            elif ch.isascii() and ch.isdigit():
                digits.append(ch)
            else:
                out.append(_expand(symbol, digits, run_offset))
                (symbol, run_offset) = (ch, offset)
                digits.clear()

            offset += 1

    # Output final run
    if symbol is not None:
        out.append(_expand(symbol, digits, run_offset))

    return ''.join(out)


def _expand(symbol, digits, offset):
    if not digits:
        raise ParseError(symbol, offset)

    return symbol * int(''.join(digits))


def main(argv=None):
    return codec.codec_main('RLE', 'rle', rle_encode, rle_decode, argv)


if __name__ == '__main__':
    sys.exit(main())
