"""Syntax scoring: corrupted and incomplete bracket lines."""

from __future__ import annotations

from dataclasses import dataclass

_PAIRS = {"(": ")", "[": "]", "{": "}", "<": ">"}
_CLOSERS = frozenset(_PAIRS.values())

ILLEGAL_POINTS = {")": 3, "]": 57, "}": 1197, ">": 25137}
COMPLETION_POINTS = {")": 1, "]": 2, "}": 3, ">": 4}


@dataclass(frozen=True)
class LineCheck:
    """Outcome of checking one line of brackets.

    ``illegal`` is the first closing character that did not match, if any.
    ``closers`` is what it takes to complete an uncorrupted line.
    """

    illegal: str | None = None
    closers: str = ""

    @property
    def corrupted(self) -> bool:
        return self.illegal is not None

    @property
    def incomplete(self) -> bool:
        return not self.corrupted and bool(self.closers)


def check_line(line: str) -> LineCheck:
    """Find the first illegal character, or the closers that finish the line."""
    stack: list[str] = []
    for char in line:
        if char in _PAIRS:
            stack.append(char)
        elif char in _CLOSERS:
            if stack and _PAIRS[stack[-1]] == char:
                stack.pop()
            else:
                return LineCheck(illegal=char)
        else:
            raise ValueError(f"unexpected character {char!r} in line {line!r}")
    return LineCheck(closers="".join(_PAIRS[opener] for opener in reversed(stack)))


def completion_score(closers: str) -> int:
    """Score a completion string: times five, plus the points of each closer."""
    score = 0
    for char in closers:
        try:
            score = 5 * score + COMPLETION_POINTS[char]
        except KeyError:
            raise ValueError(f"not a closing character: {char!r}") from None
    return score


def _checks(text: str) -> list[LineCheck]:
    return [check_line(line) for line in text.split()]


def part_one(text: str) -> int:
    """Total syntax error score of the corrupted lines."""
    return sum(ILLEGAL_POINTS[check.illegal] for check in _checks(text) if check.illegal)


def part_two(text: str) -> int:
    """Middle score among the completions of the incomplete lines."""
    scores = sorted(
        completion_score(check.closers) for check in _checks(text) if check.incomplete
    )
    if not scores:
        raise ValueError("no incomplete lines to score")
    return scores[len(scores) // 2]