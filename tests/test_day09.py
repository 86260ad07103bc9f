import pytest

from advent2021.day09 import (
    basin_size,
    low_points,
    parse_heightmap,
    part_one,
    part_two,
)

EXAMPLE = """2199943210
3987894921
9856789892
8767896789
9899965678
"""


def test_parse_heightmap_reads_digits():
    assert parse_heightmap("12\n34\n") == [[1, 2], [3, 4]]


def test_parse_heightmap_rejects_ragged_rows():
    with pytest.raises(ValueError):
        parse_heightmap("123\n45\n")


def test_parse_heightmap_rejects_non_digits():
    with pytest.raises(ValueError):
        parse_heightmap("12a\n")


def test_example_part_one():
    assert part_one(EXAMPLE) == 15


def test_example_part_two():
    assert part_two(EXAMPLE) == 1134


def test_low_points_are_below_all_neighbours():
    grid = parse_heightmap(EXAMPLE)
    points = list(low_points(grid))
    assert points
    for row, col in points:
        height = grid[row][col]
        for dr, dc in ((-1, 0), (1, 0), (0, -1), (0, 1)):
            r, c = row + dr, col + dc
            if 0 <= r < len(grid) and 0 <= c < len(grid[0]):
                assert height < grid[r][c]


def test_basins_do_not_exceed_non_peak_cells():
    grid = parse_heightmap(EXAMPLE)
    total = sum(basin_size(grid, point) for point in low_points(grid))
    non_peaks = sum(height != 9 for row in grid for height in row)
    assert total <= non_peaks


def test_basin_from_peak_is_empty():
    grid = parse_heightmap(EXAMPLE)
    assert grid[0][2] == 9
    assert basin_size(grid, (0, 2)) == 0


def test_basin_is_walled_by_nines():
    grid = parse_heightmap("090\n999\n000\n")
    assert basin_size(grid, (0, 0)) == 1
    assert basin_size(grid, (2, 1)) == 3


def test_missing_basins_count_as_one():
    text = "191\n"
    assert part_two(text) == basin_size(parse_heightmap(text), (0, 0)) * basin_size(
        parse_heightmap(text), (0, 2)
    )