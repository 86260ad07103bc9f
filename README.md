# advent2021

Solutions to the 2021 Advent of Code puzzles for days 1, 2, 3, 5, 8, 9, 10,
11, 12, 13, 14, 15 and 16. You can run each day from the command line, or
import it as a library. It has no runtime dependencies beyond the standard
library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

The `advent2021` command takes a day number, a part number (`1` or `2`) and
the path of a puzzle input file. It prints the answer:

```
advent2021 1 1 input.txt
advent2021 14 2 input.txt
```

Run `advent2021 --help` to see the usage. If no input file is given, the
command prints `no file given` and exits with status 1. If the file cannot be
read, or the input is malformed, it prints an error to standard error and
exits with status 1.

Most answers are a single number. Two days print something else:

- Day 13, part 2 prints the folded sheet, with `#` for dots and `.` for
  empty places.
- Day 16 reads one hexadecimal transmission per whitespace-separated word.
  It prints one answer per transmission, each on its own line.

## Library use

Each day has its own module, `advent2021.dayNN`. Every module has a
`part_one(text)` and a `part_two(text)` function. Each one takes the full
puzzle input as a string and returns the answer:

```python
from advent2021 import day01, day14

print(day01.part_one("199\n200\n208\n210\n200\n207\n240\n269\n260\n263\n"))
with open("input.txt") as handle:
    print(day14.part_two(handle.read()))
```

Malformed input raises `ValueError`.

The building blocks behind each part are also public:

- `day01.count_increases` and `day01.count_window_increases`
- `day02.parse_commands`
- `day03.power_consumption` and `day03.life_support_rating`. The bit width
  comes from the longest number in the report.
- `day05.Segment`, whose `points()` walks the line, and
  `day05.count_overlaps`. Coordinates must be below 1000.
- `day08.count_unique_digits` and `day08.decode_output`
- `day09.low_points` and `day09.basin_size`
- `day10.check_line`, which returns a `LineCheck`, and
  `day10.completion_score`
- `day11.OctopusGrid`, with `from_text()`, `step()` and `all_flashed()`
- `day12.CaveGraph`, with `add_edge()` and `count_paths(allow_revisit)`, and
  `day12.parse_graph`
- `day13.Paper`, with `add_dot()`, `fold()`, `count()` and `render()`, and
  `day13.parse_manual`
- `day14.parse_polymer` and `day14.element_spread`
- `day15.parse_risk_map` and `day15.lowest_total_risk(grid, tiles)`
- `day16.hex_to_bits` and `day16.parse_packet`. `parse_packet` returns a
  `Packet` with `version_sum()` and `value()`.

The dispatcher `advent2021.cli.solve(day, part, text)` runs any day and part
by number. It raises `ValueError` for a day or part it does not have.

## What it does not do

The package does not download puzzle inputs or submit answers. It only solves
the days listed above, and only from input text that you supply.