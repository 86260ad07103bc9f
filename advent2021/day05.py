"""Hydrothermal venture: overlapping vent lines on a fixed-size floor."""

from __future__ import annotations

import re
from collections import Counter
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

BOARD_SIZE = 1000

_LINE = re.compile(r"(\d+)\s*,\s*(\d+)\s*->\s*(\d+)\s*,\s*(\d+)")


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


@dataclass(frozen=True)
class Segment:
    """A vent line from (x1, y1) to (x2, y2), both ends included."""

    x1: int
    y1: int
    x2: int
    y2: int

    @property
    def is_straight(self) -> bool:
        return self.x1 == self.x2 or self.y1 == self.y2

    @property
    def is_diagonal(self) -> bool:
        return abs(self.x2 - self.x1) == abs(self.y2 - self.y1)

    def points(self) -> Iterator[tuple[int, int]]:
        """Walk from the start towards the end, one unit per axis per step."""
        x, y = self.x1, self.y1
        while True:
            yield x, y
            if (x, y) == (self.x2, self.y2):
                return
            x += _sign(self.x2 - x)
            y += _sign(self.y2 - y)


def parse_segments(text: str) -> list[Segment]:
    """Read lines of the form 'x1,y1 -> x2,y2'."""
    segments = []
    for line in filter(None, (raw.strip() for raw in text.splitlines())):
        match = _LINE.fullmatch(line)
        if match is None:
            raise ValueError(f"malformed vent line: {line!r}")
        coords = [int(group) for group in match.groups()]
        if any(value >= BOARD_SIZE for value in coords):
            raise ValueError(f"vent line leaves the {BOARD_SIZE}x{BOARD_SIZE} floor: {line!r}")
        segments.append(Segment(*coords))
    return segments


def count_overlaps(segments: Iterable[Segment], diagonals: bool) -> int:
    """Count points covered by at least two of the chosen segments."""
    coverage = Counter(
        point
        for segment in segments
        if segment.is_straight or (diagonals and segment.is_diagonal)
        for point in segment.points()
    )
    return sum(hits >= 2 for hits in coverage.values())


def part_one(text: str) -> int:
    """Overlaps among horizontal and vertical lines only."""
    return count_overlaps(parse_segments(text), diagonals=False)


def part_two(text: str) -> int:
    """Overlaps among horizontal, vertical and 45-degree lines."""
    return count_overlaps(parse_segments(text), diagonals=True)