"""Binary diagnostic: power consumption and life support ratings."""

from __future__ import annotations

from collections.abc import Sequence


def parse_report(text: str) -> tuple[list[int], int]:
    """Read binary numbers and return them with the widest bit count seen."""
    tokens = text.split()
    try:
        numbers = [int(token, 2) for token in tokens]
    except ValueError as exc:
        raise ValueError(f"invalid binary number: {exc}") from exc
    width = max((len(token) for token in tokens), default=0)
    return numbers, width


def _ones_at(numbers: Sequence[int], bit: int) -> int:
    return sum((number >> bit) & 1 for number in numbers)


def power_consumption(numbers: Sequence[int], width: int) -> int:
    """Gamma rate times epsilon rate.

    A gamma bit is set when more than half of the numbers (rounded down)
    have it set; epsilon is its complement over the given width.
    """
    if not numbers:
        raise ValueError("the report holds no numbers")
    half = len(numbers) // 2
    gamma = 0
    for bit in reversed(range(width)):
        gamma = (gamma << 1) | (_ones_at(numbers, bit) > half)
    epsilon = ((1 << width) - 1) ^ gamma
    return gamma * epsilon


def _rating(numbers: Sequence[int], width: int, keep_most_common: bool) -> int:
    candidates = list(numbers)
    if not candidates:
        raise ValueError("the report holds no numbers")
    for bit in reversed(range(width)):
        if len(candidates) == 1:
            break
        ones = _ones_at(candidates, bit)
        ones_win = ones >= len(candidates) - ones
        wanted = int(ones_win == keep_most_common)
        candidates = [n for n in candidates if (n >> bit) & 1 == wanted]
        if not candidates:
            raise ValueError(f"no number left after filtering on bit {bit}")
    return candidates[0]


def life_support_rating(numbers: Sequence[int], width: int) -> int:
    """Oxygen generator rating times CO2 scrubber rating."""
    oxygen = _rating(numbers, width, keep_most_common=True)
    scrubber = _rating(numbers, width, keep_most_common=False)
    return oxygen * scrubber


def part_one(text: str) -> int:
    """Power consumption of the submarine."""
    return power_consumption(*parse_report(text))


def part_two(text: str) -> int:
    """Life support rating of the submarine."""
    return life_support_rating(*parse_report(text))