"""Sonar sweep: counting how often the sea floor depth increases."""

from __future__ import annotations

from collections.abc import Iterable


def parse_depths(text: str) -> list[int]:
    """Read whitespace-separated depth readings."""
    try:
        return [int(token) for token in text.split()]
    except ValueError as exc:
        raise ValueError(f"invalid depth reading: {exc}") from exc


def count_window_increases(depths: Iterable[int], window: int = 3) -> int:
    """Count how often the sum of a sliding window is larger than the previous one.

    Two neighbouring windows share all but one reading, so comparing their
    sums is the same as comparing the reading that enters with the one that
    leaves.
    """
    if window < 1:
        raise ValueError(f"window must be at least 1, got {window}")
    readings = list(depths)
    return sum(later > earlier for earlier, later in zip(readings, readings[window:]))


def count_increases(depths: Iterable[int]) -> int:
    """Count readings that are deeper than the reading before them."""
    return count_window_increases(depths, 1)


def part_one(text: str) -> int:
    """Number of single-reading increases in the puzzle input."""
    return count_increases(parse_depths(text))


def part_two(text: str) -> int:
    """Number of three-reading window increases in the puzzle input."""
    return count_window_increases(parse_depths(text), 3)