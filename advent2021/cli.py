"""Command line entry point: solve one puzzle part for an input file."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from types import ModuleType

from advent2021 import (
    day01,
    day02,
    day03,
    day05,
    day08,
    day09,
    day10,
    day11,
    day12,
    day13,
    day14,
    day15,
    day16,
)

_DAYS: dict[int, ModuleType] = {
    1: day01,
    2: day02,
    3: day03,
    5: day05,
    8: day08,
    9: day09,
    10: day10,
    11: day11,
    12: day12,
    13: day13,
    14: day14,
    15: day15,
    16: day16,
}


def solve(day: int, part: int, text: str) -> object:
    """Run the given part of the given day's puzzle on the input text."""
    try:
        module = _DAYS[day]
    except KeyError:
        raise ValueError(f"no solution for day {day}") from None
    if part == 1:
        return module.part_one(text)
    if part == 2:
        return module.part_two(text)
    raise ValueError(f"part must be 1 or 2, got {part}")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="advent2021", description="Solve a puzzle part.")
    parser.add_argument("day", type=int, choices=sorted(_DAYS))
    parser.add_argument("part", type=int, choices=(1, 2))
    parser.add_argument("file", nargs="?")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Solve the requested puzzle part and print the answer."""
    args = _build_parser().parse_args(argv)
    if args.file is None:
        print("no file given")
        return 1
    try:
        with open(args.file, encoding="utf-8") as handle:
            text = handle.read()
    except OSError as exc:
        print(f"cannot read {args.file}: {exc}", file=sys.stderr)
        return 1
    try:
        result = solve(args.day, args.part, text)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    if isinstance(result, list):
        for item in result:
            print(item)
    else:
        print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())