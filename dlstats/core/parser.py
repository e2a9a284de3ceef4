import datetime
import re
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple

from dlstats.utils import logger

# "6543. 14.10.2023 3,11,19,27,35,49"
RESULT_LINE_RE = re.compile(
    r'^(?P<seq_no>\d+)\. (?P<day>\d+)\.(?P<month>\d+)\.(?P<year>\d+) '
    r'(?P<n0>\d+),(?P<n1>\d+),(?P<n2>\d+),(?P<n3>\d+),(?P<n4>\d+),(?P<n5>\d+)$',
    re.ASCII
)

NUMBER_GROUPS = ('n0', 'n1', 'n2', 'n3', 'n4', 'n5')


@dataclass(frozen=True)
class ResultEntry:
    """One published draw"""
    seq_no: int
    date: datetime.date
    numbers: Tuple[int, int, int, int, int, int]

    def format_line(self) -> str:
        """Render back to the results file format"""
        return (f"{self.seq_no}. {self.date.day:02d}.{self.date.month:02d}.{self.date.year} "
                + ','.join(str(n) for n in self.numbers))


# ============================================================
# Line parsing
# ============================================================
def parse_line(line: str) -> Optional[ResultEntry]:
    """Parse one line; None for blank or non-matching lines"""
    line = line.strip()
    if not line:
        return None

    match = RESULT_LINE_RE.match(line)
    if not match:
        return None

    try:
        draw_date = datetime.date(int(match['year']), int(match['month']), int(match['day']))
    except (ValueError, OverflowError):
        logger.debug(f"Skipping line with impossible or out-of-range date: {line}")
        return None

    return ResultEntry(
        seq_no=int(match['seq_no']),
        date=draw_date,
        numbers=tuple(int(match[g]) for g in NUMBER_GROUPS),
    )


def parse_results(text: str) -> List[ResultEntry]:
    """All parsable lines of text, in file order"""
    results = []
    for line in text.split('\n'):
        entry = parse_line(line)
        if entry is not None:
            results.append(entry)
    return results


def parse_results_file(path: Path) -> List[ResultEntry]:
    with open(path, 'r', encoding='utf-8', errors='replace') as f:
        results = parse_results(f.read())
    logger.info(f"Parsed {len(results)} results from {path}")
    return results
