"""Seven segment search: decoding scrambled display wiring."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

_UNIQUE_LENGTHS = {2: "1", 3: "7", 4: "4", 7: "8"}

Entry = tuple[tuple[str, ...], tuple[str, ...]]


def parse_entries(text: str) -> list[Entry]:
    """Read lines of ten signal patterns, a pipe, and the output digits."""
    entries = []
    for line in filter(None, (raw.strip() for raw in text.splitlines())):
        parts = line.split("|")
        if len(parts) != 2:
            raise ValueError(f"expected one '|' in entry: {line!r}")
        patterns, outputs = parts
        entries.append((tuple(patterns.split()), tuple(outputs.split())))
    return entries


def count_unique_digits(entries: Iterable[Entry]) -> int:
    """Count output values that show 1, 4, 7 or 8, known by length alone."""
    return sum(
        len(output) in _UNIQUE_LENGTHS for _, outputs in entries for output in outputs
    )


def _pattern_of_length(patterns: Sequence[str], length: int, digit: str) -> frozenset[str]:
    for pattern in patterns:
        if len(pattern) == length:
            return frozenset(pattern)
    raise ValueError(f"no pattern for digit {digit} among the signal patterns")


def _decode_digit(segments: frozenset[str], one: frozenset[str], four: frozenset[str]) -> str:
    size = len(segments)
    if size in _UNIQUE_LENGTHS:
        return _UNIQUE_LENGTHS[size]
    if size == 5:
        if one <= segments:
            return "3"
        return "5" if len(four & segments) == 3 else "2"
    if size == 6:
        if not one <= segments:
            return "6"
        return "9" if four <= segments else "0"
    raise ValueError(f"no digit lights {size} segments")


def decode_output(patterns: Sequence[str], outputs: Sequence[str]) -> int:
    """Work out the number shown by the output digits."""
    one = _pattern_of_length(patterns, 2, "1")
    four = _pattern_of_length(patterns, 4, "4")
    digits = "".join(_decode_digit(frozenset(output), one, four) for output in outputs)
    if not digits:
        raise ValueError("no output digits to decode")
    return int(digits)


def part_one(text: str) -> int:
    """Number of easily recognised digits in all outputs."""
    return count_unique_digits(parse_entries(text))


def part_two(text: str) -> int:
    """Sum of all decoded output values."""
    return sum(decode_output(patterns, outputs) for patterns, outputs in parse_entries(text))