"""Packet decoder: reading nested packets from a hexadecimal transmission."""

from __future__ import annotations

import operator
from collections.abc import Callable
from dataclasses import dataclass, field
from functools import reduce

LITERAL_TYPE = 4

_OPERATORS: dict[int, Callable[[int, int], int]] = {
    0: operator.add,
    1: operator.mul,
    2: min,
    3: max,
    5: lambda a, b: int(a > b),
    6: lambda a, b: int(a < b),
    7: lambda a, b: int(a == b),
}


@dataclass(frozen=True)
class Packet:
    """A literal value or an operator over sub-packets."""

    version: int
    type_id: int
    literal: int | None = None
    children: tuple[Packet, ...] = field(default_factory=tuple)

    def version_sum(self) -> int:
        """Sum of the versions of this packet and all packets inside it."""
        return self.version + sum(child.version_sum() for child in self.children)

    def value(self) -> int:
        """Evaluate the expression this packet stands for."""
        if self.type_id == LITERAL_TYPE:
            if self.literal is None:
                raise ValueError("literal packet carries no value")
            return self.literal
        if not self.children:
            raise ValueError(f"operator packet of type {self.type_id} has no sub-packets")
        try:
            combine = _OPERATORS[self.type_id]
        except KeyError:
            raise ValueError(f"unknown packet type {self.type_id}") from None
        return reduce(combine, (child.value() for child in self.children))


def hex_to_bits(text: str) -> str:
    """Spell out a hexadecimal string as four binary digits per character."""
    try:
        return "".join(f"{int(char, 16):04b}" for char in text.strip())
    except ValueError:
        raise ValueError(f"not a hexadecimal transmission: {text!r}") from None


class _BitReader:
    def __init__(self, bits: str) -> None:
        self.bits = bits
        self.pos = 0

    def read(self, count: int) -> int:
        end = self.pos + count
        if end > len(self.bits):
            raise ValueError("transmission ends in the middle of a packet")
        chunk = self.bits[self.pos:end]
        self.pos = end
        return int(chunk, 2)

    def packet(self) -> Packet:
        version = self.read(3)
        type_id = self.read(3)
        if type_id == LITERAL_TYPE:
            value = 0
            more = True
            while more:
                more = bool(self.read(1))
                value = (value << 4) | self.read(4)
            return Packet(version, type_id, literal=value)
        if self.read(1):
            children = tuple(self.packet() for _ in range(self.read(11)))
        else:
            length = self.read(15)
            end = self.pos + length
            found = []
            while self.pos < end:
                found.append(self.packet())
            children = tuple(found)
        return Packet(version, type_id, children=children)


def parse_packet(hex_text: str) -> Packet:
    """Decode the outermost packet of a hexadecimal transmission."""
    return _BitReader(hex_to_bits(hex_text)).packet()


def part_one(text: str) -> list[int]:
    """Version sum of each transmission, one per whitespace-separated word."""
    return [parse_packet(word).version_sum() for word in text.split()]


def part_two(text: str) -> list[int]:
    """Value of each transmission, one per whitespace-separated word."""
    return [parse_packet(word).value() for word in text.split()]