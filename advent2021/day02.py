"""Dive: steering the submarine with a list of commands."""

from __future__ import annotations

from collections.abc import Iterable


def parse_commands(text: str) -> list[tuple[str, int]]:
    """Read pairs of a direction word and an amount."""
    tokens = text.split()
    if len(tokens) % 2:
        raise ValueError("every command needs a direction and an amount")
    words = iter(tokens)
    try:
        return [(direction, int(amount)) for direction, amount in zip(words, words)]
    except ValueError as exc:
        raise ValueError(f"invalid command amount: {exc}") from exc


def _plain_course(commands: Iterable[tuple[str, int]]) -> tuple[int, int]:
    position = depth = 0
    for direction, amount in commands:
        if direction == "forward":
            position += amount
        elif direction == "down":
            depth += amount
        elif direction == "up":
            depth -= amount
    return position, depth


def _aimed_course(commands: Iterable[tuple[str, int]]) -> tuple[int, int]:
    position = depth = aim = 0
    for direction, amount in commands:
        if direction == "forward":
            position += amount
            depth += aim * amount
        elif direction == "down":
            aim += amount
        elif direction == "up":
            aim -= amount
    return position, depth


def part_one(text: str) -> int:
    """Horizontal position times depth when up and down change depth directly."""
    position, depth = _plain_course(parse_commands(text))
    return position * depth


def part_two(text: str) -> int:
    """Horizontal position times depth when up and down change the aim."""
    position, depth = _aimed_course(parse_commands(text))
    return position * depth