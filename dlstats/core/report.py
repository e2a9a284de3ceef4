import sys
from typing import List, Sequence, TextIO, Tuple

from dlstats.utils import digit_width

COLUMN_GAP = '   '
BAR_GAP = '      '


def format_stats(ranked: Sequence[Tuple[int, int]]) -> List[str]:
    """Aligned "number   countx      ****" lines"""
    if not ranked:
        return []

    key_width = digit_width(max(max(key for key, _ in ranked), 0))
    value_width = digit_width(max(max(count for _, count in ranked), 0))

    return [
        f"{key:>{key_width}d}{COLUMN_GAP}{count:>{value_width}d}x{BAR_GAP}{'*' * count}"
        for key, count in ranked
    ]


def print_stats(ranked: Sequence[Tuple[int, int]], stream: TextIO = None):
    stream = stream or sys.stdout
    for line in format_stats(ranked):
        stream.write(line + '\n')
