"""Extended polymerization: growing a polymer from pair insertion rules."""

from __future__ import annotations

import re
from collections import Counter
from collections.abc import Mapping

_RULE = re.compile(r"([A-Z]{2})\s*->\s*([A-Z])")
_TEMPLATE = re.compile(r"[A-Z]+")


def parse_polymer(text: str) -> tuple[str, dict[str, str]]:
    """Read the polymer template followed by lines of 'AB -> C' rules."""
    lines = [line.strip() for line in text.splitlines() if line.strip()]
    if not lines:
        raise ValueError("no polymer template")
    template, *rule_lines = lines
    if _TEMPLATE.fullmatch(template) is None:
        raise ValueError(f"malformed polymer template: {template!r}")
    rules: dict[str, str] = {}
    for line in rule_lines:
        match = _RULE.fullmatch(line)
        if match is None:
            raise ValueError(f"malformed insertion rule: {line!r}")
        rules[match.group(1)] = match.group(2)
    return template, rules


def element_spread(template: str, rules: Mapping[str, str], steps: int) -> int:
    """Most common minus least common element count after the given steps."""
    if steps < 0:
        raise ValueError(f"steps must not be negative, got {steps}")
    if not template:
        raise ValueError("the template is empty")
    pairs = Counter(a + b for a, b in zip(template, template[1:]))
    elements = Counter(template)
    for _ in range(steps):
        grown: Counter[str] = Counter()
        for pair, amount in pairs.items():
            try:
                inserted = rules[pair]
            except KeyError:
                raise ValueError(f"no insertion rule for pair {pair!r}") from None
            grown[pair[0] + inserted] += amount
            grown[inserted + pair[1]] += amount
            elements[inserted] += amount
        pairs = grown
    counts = elements.values()
    return max(counts) - min(counts)


def part_one(text: str) -> int:
    """Element spread after ten steps."""
    return element_spread(*parse_polymer(text), 10)


def part_two(text: str) -> int:
    """Element spread after forty steps."""
    return element_spread(*parse_polymer(text), 40)