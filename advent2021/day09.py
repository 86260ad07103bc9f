"""Smoke basin: low points and basins of a height map."""

from __future__ import annotations

import heapq
import math
from collections import deque
from collections.abc import Iterator, Sequence

Grid = Sequence[Sequence[int]]

_PEAK = 9


def parse_heightmap(text: str) -> list[list[int]]:
    """Read rows of single-digit heights."""
    rows = [line.strip() for line in text.splitlines() if line.strip()]
    if any(not row.isdigit() for row in rows):
        raise ValueError("height map rows must hold digits only")
    if len({len(row) for row in rows}) > 1:
        raise ValueError("height map rows differ in length")
    return [[int(char) for char in row] for row in rows]


def _neighbours(grid: Grid, row: int, col: int) -> Iterator[tuple[int, int]]:
    for r, c in ((row - 1, col), (row + 1, col), (row, col - 1), (row, col + 1)):
        if 0 <= r < len(grid) and 0 <= c < len(grid[r]):
            yield r, c


def _height(grid: Grid, row: int, col: int) -> int:
    return grid[row][col]


def low_points(grid: Grid) -> Iterator[tuple[int, int]]:
    """Yield (row, col) of cells lower than every neighbour; the edge counts as 9."""
    for row, heights in enumerate(grid):
        for col, height in enumerate(heights):
            if height >= _PEAK:
                continue
            if all(height < grid[r][c] for r, c in _neighbours(grid, row, col)):
                yield row, col


def basin_size(grid: Grid, start: tuple[int, int]) -> int:
    """Number of cells reachable from start without crossing a height of 9."""
    row, col = start
    if _height(grid, row, col) == _PEAK:
        return 0
    seen = {start}
    queue = deque([start])
    while queue:
        current = queue.popleft()
        for neighbour in _neighbours(grid, *current):
            if neighbour not in seen and _height(grid, *neighbour) != _PEAK:
                seen.add(neighbour)
                queue.append(neighbour)
    return len(seen)


def part_one(text: str) -> int:
    """Sum of the risk levels (height plus one) of all low points."""
    grid = parse_heightmap(text)
    return sum(1 + grid[row][col] for row, col in low_points(grid))


def part_two(text: str) -> int:
    """Product of the three largest basin sizes; missing basins count as 1."""
    grid = parse_heightmap(text)
    sizes = [basin_size(grid, point) for point in low_points(grid)]
    largest = heapq.nlargest(3, sizes)
    largest += [1] * (3 - len(largest))
    return math.prod(largest)