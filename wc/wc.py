#!/usr/bin/env python3
import sys
import contextlib

from shared import counter
from shared import utility as util

# Selectable count fields, in output order
WC_FIELDS = [
    ('-l', '--lines', 'lines', 'print the line count'),
    ('-w', '--words', 'words', 'print the word count'),
    ('-c', '--bytes', 'size', 'print the byte count'),
]

def wc_count(inpath, lines=True, words=True, size=True):
    """Count the lines, words and bytes of a text file.

    The byte count is the size of the file on disk and is only looked up
    when requested. The whole file is always read.

    Params:
        inpath - path to input file to read and count
        lines  - include the number of lines
        words  - include the number of whitespace separated words
        size   - include the size of the file in bytes

    Returns:
        The requested counts in the order lines, words, bytes.
    """
    byte_count = util.file_size(inpath) if size else 0
    line_count = word_count = 0

    with contextlib.closing(util.filepath_lines(inpath)) as file_lines:
        for line in file_lines:
            line_count += 1
            word_count += len(line.split())

    counts = []

    if lines:
        counts.append(line_count)

    if words:
        counts.append(word_count)

    if size:
        counts.append(byte_count)

    return counts


def main(argv=None):
    return counter.counter_main('WC', 'wc', wc_count, WC_FIELDS, argv)


if __name__ == '__main__':
    sys.exit(main())
