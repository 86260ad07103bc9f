"""Chiton: the path of lowest total risk through a cave."""

from __future__ import annotations

import heapq
from collections.abc import Sequence

Grid = Sequence[Sequence[int]]


def parse_risk_map(text: str) -> list[list[int]]:
    """Read rows of single-digit risk levels."""
    rows = [line.strip() for line in text.splitlines() if line.strip()]
    if not rows:
        raise ValueError("the risk map is empty")
    if any(not row.isdigit() for row in rows):
        raise ValueError("risk map rows must hold digits only")
    if len({len(row) for row in rows}) > 1:
        raise ValueError("risk map rows differ in length")
    return [[int(char) for char in row] for row in rows]


def _risk(grid: Grid, rows: int, cols: int, row: int, col: int) -> int:
    offset = row // rows + col // cols
    base = grid[row % rows][col % cols]
    if offset == 0:
        return base
    return (base + offset - 1) % 9 + 1


def lowest_total_risk(grid: Grid, tiles: int = 1) -> int:
    """Lowest risk from the top left to the bottom right corner.

    With ``tiles`` above one the map repeats that many times in each
    direction; every tile step right or down raises each risk by one,
    wrapping from 9 back to 1. The risk of the starting cell never counts.
    """
    if tiles < 1:
        raise ValueError(f"tiles must be at least 1, got {tiles}")
    rows = len(grid)
    if rows == 0 or not grid[0]:
        raise ValueError("the risk map is empty")
    cols = len(grid[0])
    if any(len(row) != cols for row in grid):
        raise ValueError("risk map rows differ in length")

    height, width = rows * tiles, cols * tiles
    target = (height - 1, width - 1)
    best = {(0, 0): 0}
    queue = [(0, 0, 0)]
    while queue:
        cost, row, col = heapq.heappop(queue)
        if (row, col) == target:
            return cost
        if cost > best[(row, col)]:
            continue
        for r, c in ((row - 1, col), (row, col - 1), (row + 1, col), (row, col + 1)):
            if 0 <= r < height and 0 <= c < width:
                total = cost + _risk(grid, rows, cols, r, c)
                if total < best.get((r, c), total + 1):
                    best[(r, c)] = total
                    heapq.heappush(queue, (total, r, c))
    raise AssertionError("the bottom right corner is always reachable")


def part_one(text: str) -> int:
    """Lowest total risk through the map as given."""
    return lowest_total_risk(parse_risk_map(text), 1)


def part_two(text: str) -> int:
    """Lowest total risk through the map repeated five times each way."""
    return lowest_total_risk(parse_risk_map(text), 5)