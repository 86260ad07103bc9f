"""Passage pathing: counting routes through a cave system."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field

START = "start"
END = "end"


def _is_big(cave: str) -> bool:
    return cave[:1].isupper()


@dataclass
class CaveGraph:
    """Undirected connections between named caves."""

    edges: dict[str, list[str]] = field(default_factory=dict)

    def add_edge(self, first: str, second: str) -> None:
        """Connect two caves in both directions."""
        if not first or not second:
            raise ValueError("cave names must not be empty")
        self.edges.setdefault(first, []).append(second)
        self.edges.setdefault(second, []).append(first)

    def count_paths(self, allow_revisit: bool) -> int:
        """Count paths from start to end.

        Small caves are visited at most once, except that one small cave may
        be visited twice when ``allow_revisit`` is set. The start cave is
        never re-entered.
        """
        visits: Counter[str] = Counter()

        def walk(cave: str, revisit_left: bool) -> int:
            if cave == END:
                return 1
            visits[cave] += 1
            total = 0
            for nxt in self.edges.get(cave, ()):
                if nxt == START:
                    continue
                if not _is_big(nxt) and visits[nxt] > 0:
                    if revisit_left:
                        total += walk(nxt, False)
                    continue
                total += walk(nxt, revisit_left)
            visits[cave] -= 1
            return total

        return walk(START, allow_revisit)


def parse_graph(text: str) -> CaveGraph:
    """Read lines of the form 'a-b'."""
    graph = CaveGraph()
    for line in text.split():
        parts = line.split("-")
        if len(parts) != 2:
            raise ValueError(f"malformed connection: {line!r}")
        graph.add_edge(*parts)
    return graph


def part_one(text: str) -> int:
    """Paths that visit each small cave at most once."""
    return parse_graph(text).count_paths(allow_revisit=False)


def part_two(text: str) -> int:
    """Paths that may visit a single small cave twice."""
    return parse_graph(text).count_paths(allow_revisit=True)