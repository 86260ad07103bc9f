"""Dumbo octopus: energy levels that flash and spread to their neighbours."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from itertools import count

_FLASH_LEVEL = 9
_PART_ONE_STEPS = 100


@dataclass
class OctopusGrid:
    """Energy levels of a rectangular grid of octopuses."""

    energy: list[list[int]]

    @classmethod
    def from_text(cls, text: str) -> OctopusGrid:
        """Read rows of single-digit energy levels."""
        rows = [line.strip() for line in text.splitlines() if line.strip()]
        if not rows:
            raise ValueError("the grid is empty")
        if any(not row.isdigit() for row in rows):
            raise ValueError("grid rows must hold digits only")
        if len({len(row) for row in rows}) > 1:
            raise ValueError("grid rows differ in length")
        return cls([[int(char) for char in row] for row in rows])

    def _neighbours(self, row: int, col: int) -> Iterator[tuple[int, int]]:
        for r in range(row - 1, row + 2):
            for c in range(col - 1, col + 2):
                if (r, c) != (row, col) and 0 <= r < len(self.energy) and 0 <= c < len(self.energy[r]):
                    yield r, c

    def step(self) -> int:
        """Advance one step and return how many octopuses flashed."""
        for row in self.energy:
            row[:] = [level + 1 for level in row]
        pending = [
            (r, c)
            for r, row in enumerate(self.energy)
            for c, level in enumerate(row)
            if level > _FLASH_LEVEL
        ]
        flashes = 0
        while pending:
            r, c = pending.pop()
            if self.energy[r][c] <= _FLASH_LEVEL:
                continue
            self.energy[r][c] = 0
            flashes += 1
            for nr, nc in self._neighbours(r, c):
                if self.energy[nr][nc] != 0:
                    self.energy[nr][nc] += 1
                    if self.energy[nr][nc] > _FLASH_LEVEL:
                        pending.append((nr, nc))
        return flashes

    def all_flashed(self) -> bool:
        """True when every octopus flashed in the last step."""
        return all(level == 0 for row in self.energy for level in row)


def part_one(text: str) -> int:
    """Total flashes over the first hundred steps."""
    grid = OctopusGrid.from_text(text)
    return sum(grid.step() for _ in range(_PART_ONE_STEPS))


def part_two(text: str) -> int:
    """First step on which every octopus flashes at once."""
    grid = OctopusGrid.from_text(text)
    for step in count(1):
        grid.step()
        if grid.all_flashed():
            return step
    raise AssertionError("unreachable")