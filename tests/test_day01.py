import pytest

from advent2021.day01 import (
    count_increases,
    count_window_increases,
    parse_depths,
    part_one,
    part_two,
)

EXAMPLE = "199\n200\n208\n210\n200\n207\n240\n269\n260\n263\n"


def test_parse_depths_reads_every_number():
    assert parse_depths("1 2\n3\n") == [1, 2, 3]


def test_parse_depths_rejects_garbage():
    with pytest.raises(ValueError):
        parse_depths("12\nabc\n")


def test_example_part_one():
    assert part_one(EXAMPLE) == 7


def test_example_part_two():
    assert part_two(EXAMPLE) == 5


def test_strictly_increasing_counts_every_step():
    depths = list(range(10, 30))
    assert count_increases(depths) == len(depths) - 1


def test_decreasing_has_no_increases():
    depths = list(range(30, 10, -1))
    assert count_increases(depths) == 0
    assert count_window_increases(depths, 3) == 0


def test_window_of_one_matches_plain_count():
    depths = parse_depths(EXAMPLE)
    assert count_window_increases(depths, 1) == count_increases(depths)


def test_equal_readings_are_not_increases():
    assert count_increases([5, 5, 5, 5]) == 0


def test_short_input_has_no_windows():
    assert count_window_increases([1, 2], 3) == 0


def test_window_must_be_positive():
    with pytest.raises(ValueError):
        count_window_increases([1, 2, 3], 0)