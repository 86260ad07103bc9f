"""Transparent origami: folding a sheet of dotted paper."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

_FOLD = re.compile(r"fold\s+along\s+([a-z])\s*=\s*(\d+)")
_DOT = re.compile(r"(\d+)\s*,\s*(\d+)")

_AXES = ("x", "y")


@dataclass
class Paper:
    """A sheet of given width and height with a set of marked dots."""

    width: int = 1
    height: int = 1
    dots: set[tuple[int, int]] = field(default_factory=set)

    def add_dot(self, x: int, y: int) -> None:
        """Mark a dot, growing the sheet to hold it."""
        if x < 0 or y < 0:
            raise ValueError(f"dot ({x}, {y}) lies outside the paper")
        self.width = max(self.width, x + 1)
        self.height = max(self.height, y + 1)
        self.dots.add((x, y))

    def fold(self, axis: str, position: int) -> None:
        """Fold the part beyond ``position`` back over the rest.

        Folding along ``x`` folds the right half leftwards, along ``y`` the
        bottom half upwards. Dots on the fold line itself are dropped.
        """
        if axis not in _AXES:
            raise ValueError(f"unknown fold axis {axis!r}")
        if position < 0:
            raise ValueError(f"fold position must not be negative, got {position}")
        index = _AXES.index(axis)
        folded: set[tuple[int, int]] = set()
        for dot in self.dots:
            coord = dot[index]
            if coord == position:
                continue
            if coord > position:
                coord = 2 * position - coord
                if coord < 0:
                    raise ValueError(
                        f"fold along {axis}={position} maps dot {dot} off the paper"
                    )
            moved = list(dot)
            moved[index] = coord
            folded.add((moved[0], moved[1]))
        self.dots = folded
        if axis == "x":
            self.width = position
        else:
            self.height = position

    def count(self) -> int:
        """Number of visible dots."""
        return len(self.dots)

    def render(self) -> str:
        """Draw the sheet with '#' for dots and '.' for empty places."""
        return "\n".join(
            "".join("#" if (x, y) in self.dots else "." for x in range(self.width))
            for y in range(self.height)
        )


def _parse(text: str, size: int) -> tuple[Paper, list[tuple[str, int]]]:
    paper = Paper(size, size)
    folds: list[tuple[str, int]] = []
    for line in filter(None, (raw.strip() for raw in text.splitlines())):
        dot = _DOT.fullmatch(line)
        if dot is not None:
            if folds:
                raise ValueError(f"dot after fold instructions: {line!r}")
            paper.add_dot(int(dot.group(1)), int(dot.group(2)))
            continue
        fold = _FOLD.fullmatch(line)
        if fold is None:
            raise ValueError(f"malformed line: {line!r}")
        folds.append((fold.group(1), int(fold.group(2))))
    return paper, folds


def parse_manual(text: str) -> tuple[Paper, list[tuple[str, int]]]:
    """Read dot coordinates followed by 'fold along axis=n' instructions."""
    return _parse(text, 1)


def part_one(text: str) -> int:
    """Visible dots after the first fold."""
    paper, folds = parse_manual(text)
    if not folds:
        raise ValueError("no fold instructions")
    paper.fold(*folds[0])
    return paper.count()


def part_two(text: str) -> str:
    """The drawing left after every fold, on a sheet at least ten by ten."""
    paper, folds = _parse(text, 10)
    if not folds:
        raise ValueError("no fold instructions")
    for axis, position in folds:
        paper.fold(axis, position)
    return paper.render()