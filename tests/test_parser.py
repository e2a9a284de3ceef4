import datetime

import pytest

from dlstats.core.parser import ResultEntry, parse_line, parse_results, parse_results_file


def test_parse_line_fields():
    entry = parse_line("6543. 14.10.2023 3,11,19,27,35,49")

    assert entry == ResultEntry(
        seq_no=6543,
        date=datetime.date(2023, 10, 14),
        numbers=(3, 11, 19, 27, 35, 49),
    )


def test_parse_line_trims_surrounding_whitespace():
    entry = parse_line("   12. 1.2.1960 1,2,3,4,5,6 \r")
    assert entry is not None
    assert entry.seq_no == 12
    assert entry.date == datetime.date(1960, 2, 1)


def test_format_line_reproduces_fields():
    line = "6543. 14.10.2023 3,11,19,27,35,49"
    entry = parse_line(line)
    assert entry.format_line() == line
    assert parse_line(entry.format_line()) == entry


def test_numbers_are_not_range_checked():
    entry = parse_line("1. 01.01.2000 0,2,3,4,5,99")
    assert entry.numbers == (0, 2, 3, 4, 5, 99)


@pytest.mark.parametrize("line", [
    "",
    "    ",
    "1. 01.01.2000 1,2,3,4,5",
    "1. 01.01.2000 1,2,3,4,5,6,7",
    "1. 01.01.2000 1,2,3,4,,6",
    "1. 01.01.2000 1,2,x,4,5,6",
    "1 01.01.2000 1,2,3,4,5,6",
    "1. 01-01-2000 1,2,3,4,5,6",
    "1. 01.01.2000  1,2,3,4,5,6",
    "1. 01.01.2000 1;2;3;4;5;6",
    "-1. 01.01.2000 1,2,3,4,5,6",
    "1. 31.02.2000 1,2,3,4,5,6",
    "1. 01.01.99999999999999999999 1,2,3,4,5,6",
    "2. 99999999999999999999.01.2000 1,2,3,4,5,6",
])
def test_malformed_lines_are_skipped(line):
    assert parse_line(line) is None


def test_parse_results_keeps_file_order_and_skips_noise(sample_text):
    results = parse_results(sample_text)

    assert [r.seq_no for r in results] == [1, 2, 6543, 6544, 6545]
    assert results[2].date == datetime.date(2024, 1, 1)
    assert results[-1].numbers == (1, 2, 3, 4, 5, 8)


def test_bad_line_does_not_affect_neighbours():
    text = "1. 01.01.2000 1,2,3,4,5,6\n2. 02.01.2000 1,2,3\n3. 03.01.2000 7,8,9,10,11,12\n"
    results = parse_results(text)
    assert [r.seq_no for r in results] == [1, 3]
    assert results[1].numbers == (7, 8, 9, 10, 11, 12)


def test_duplicate_sequence_numbers_are_kept():
    text = "5. 01.01.2000 1,2,3,4,5,6\n5. 02.01.2000 1,2,3,4,5,7\n"
    results = parse_results(text)
    assert len(results) == 2
    assert results[0].date != results[1].date


def test_entries_are_immutable():
    entry = parse_line("1. 01.01.2000 1,2,3,4,5,6")
    with pytest.raises(AttributeError):
        entry.seq_no = 2


def test_parse_results_file(tmp_path, sample_text):
    path = tmp_path / '2024-01-04-dl.txt'
    path.write_text(sample_text, encoding='utf-8')

    assert len(parse_results_file(path)) == 5


def test_parse_results_file_missing(tmp_path):
    with pytest.raises(OSError):
        parse_results_file(tmp_path / 'nope.txt')


def test_oversized_date_field_does_not_stop_parsing():
    text = ("1. 01.01.2000 1,2,3,4,5,6\n"
            "2. 99999999999999999999.01.2000 1,2,3,4,5,6\n"
            "3. 03.01.2000 7,8,9,10,11,12\n")
    results = parse_results(text)
    assert [r.seq_no for r in results] == [1, 3]


def test_only_newline_separates_lines():
    text = "1. 01.01.2000 1,2,3,4,5,6\x0c2. 02.01.2000 1,2,3,4,5,7\r\n3. 03.01.2000 1,2,3,4,5,8\r\n"
    results = parse_results(text)
    assert [r.seq_no for r in results] == [3]
