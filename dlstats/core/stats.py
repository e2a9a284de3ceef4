import datetime
from typing import Dict, List, Optional, Sequence, Tuple

from dlstats.core.parser import ResultEntry
from dlstats.core.series import find_result_index
from dlstats.utils import logger

# ============================================================
# Number frequency over a date window
# ============================================================
def get_numbers_statistics(start_date: datetime.date,
                           end_date: datetime.date,
                           min_number: int,
                           max_number: int,
                           results: Sequence[ResultEntry]) -> Optional[Dict[int, int]]:
    """Occurrences of each number in [min_number, max_number] between the draws
    held on start_date and end_date, both included.

    results must already be ordered by sequence number. Returns None when
    either date has no draw.
    """
    start_index = find_result_index(start_date, results)
    if start_index is None:
        logger.error(f"cannot find result from day {start_date.isoformat()}")
        return None

    end_index = find_result_index(end_date, results)
    if end_index is None:
        logger.error(f"cannot find result from day {end_date.isoformat()}")
        return None

    number_counts = {i: 0 for i in range(min_number, max_number + 1)}
    ignored = 0

    for result in results[start_index:end_index + 1]:
        for num in result.numbers:
            if num in number_counts:
                number_counts[num] += 1
            else:
                ignored += 1

    if ignored:
        logger.warning(f"Ignored {ignored} numbers outside {min_number}-{max_number}")

    return number_counts


def rank_stats(stats: Dict[int, int]) -> List[Tuple[int, int]]:
    """(number, count) pairs, most frequent first; equal counts by ascending number"""
    return sorted(stats.items(), key=lambda x: (-x[1], x[0]))
