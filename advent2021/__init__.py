"""Solutions to the 2021 Advent of Code puzzles, one module per day, with a command line dispatcher."""

__version__ = "0.1.0"