import datetime
from typing import List, Optional, Sequence

from dlstats.core.parser import ResultEntry


def sort_results(results: Sequence[ResultEntry]) -> List[ResultEntry]:
    """Order by draw sequence number (stable for duplicates)"""
    return sorted(results, key=lambda r: r.seq_no)


def find_result_index(target: datetime.date, results: Sequence[ResultEntry]) -> Optional[int]:
    """Index of the first draw held on target, or None"""
    for i, result in enumerate(results):
        if result.date == target:
            return i
    return None


def default_window(results: Sequence[ResultEntry], window_days: int,
                   end_date: Optional[datetime.date] = None):
    """(start, end) dates of the window ending on end_date or the last draw"""
    if end_date is None:
        end_date = results[-1].date
    start_date = end_date - datetime.timedelta(days=window_days)
    return start_date, end_date
