import datetime

import pytest

from dlstats.config import StatsConfig
from dlstats.core.parser import ResultEntry

SAMPLE_TEXT = """\
1. 27.01.1957 8,12,31,39,43,45
2. 03.02.1957 5,10,11,22,25,27

this line is noise
6543. 1.1.2024 1,2,3,4,5,6
6544. 2.1.2024 1,2,3,4,5,7
6545. 03.01.2024 1,2,3,4,5,8
"""


def entry(seq_no, day, numbers):
    return ResultEntry(seq_no=seq_no, date=day, numbers=tuple(numbers))


@pytest.fixture
def sample_text():
    return SAMPLE_TEXT


@pytest.fixture
def three_days():
    """Draws on 2024-01-01..03 sharing 1-5 and differing in the sixth number"""
    return [
        entry(1, datetime.date(2024, 1, 1), [1, 2, 3, 4, 5, 6]),
        entry(2, datetime.date(2024, 1, 2), [1, 2, 3, 4, 5, 7]),
        entry(3, datetime.date(2024, 1, 3), [1, 2, 3, 4, 5, 8]),
    ]


@pytest.fixture
def config(tmp_path):
    return StatsConfig.from_app_config(
        repo_url='https://example.invalid/dl.txt',
        results_dir=tmp_path / 'results',
    )
