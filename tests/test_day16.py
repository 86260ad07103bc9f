import math

import pytest

from advent2021.day16 import Packet, hex_to_bits, parse_packet, part_one, part_two


def literal_bits(version, number):
    digits = f"{number:b}"
    digits = digits.zfill(-(-len(digits) // 4) * 4)
    chunks = [digits[i:i + 4] for i in range(0, len(digits), 4)]
    groups = "".join(
        ("0" if last else "1") + chunk
        for last, chunk in zip([False] * (len(chunks) - 1) + [True], chunks)
    )
    return f"{version:03b}100" + groups


def operator_bits(version, type_id, children, by_count=True):
    body = "".join(children)
    header = f"{version:03b}{type_id:03b}"
    if by_count:
        return header + "1" + f"{len(children):011b}" + body
    return header + "0" + f"{len(body):015b}" + body


def to_hex(bits):
    bits = bits + "0" * (-len(bits) % 4)
    return f"{int(bits, 2):0{len(bits) // 4}X}"


def test_hex_to_bits_keeps_every_digit():
    text = "0F3A"
    bits = hex_to_bits(text)
    assert len(bits) == 4 * len(text)
    assert int(bits, 2) == int(text, 16)
    assert bits.startswith("0000")


def test_hex_to_bits_rejects_non_hex():
    with pytest.raises(ValueError):
        hex_to_bits("XYZ")


def test_literal_example():
    assert parse_packet("D2FE28").literal == 2021


@pytest.mark.parametrize("number", [0, 5, 15, 16, 123456789])
def test_literal_round_trip(number):
    packet = parse_packet(to_hex(literal_bits(6, number)))
    assert packet == Packet(6, 4, literal=number)
    assert packet.value() == number


def test_version_sum_example():
    assert parse_packet("8A004A801A8002F478").version_sum() == 16


def test_value_example():
    assert parse_packet("C200B40A82").value() == 3


def test_version_sum_covers_nested_packets():
    inner = operator_bits(2, 0, [literal_bits(3, 1), literal_bits(4, 2)])
    outer = operator_bits(1, 1, [inner, literal_bits(5, 7)], by_count=False)
    assert parse_packet(to_hex(outer)).version_sum() == 1 + 2 + 3 + 4 + 5


@pytest.mark.parametrize(
    "type_id, values, expected",
    [
        (0, [3, 4, 10], sum([3, 4, 10])),
        (1, [3, 4, 10], math.prod([3, 4, 10])),
        (2, [8, 2, 5], min([8, 2, 5])),
        (3, [8, 2, 5], max([8, 2, 5])),
        (5, [5, 3], int(5 > 3)),
        (5, [3, 5], int(3 > 5)),
        (6, [3, 5], int(3 < 5)),
        (7, [9, 9], int(9 == 9)),
        (7, [9, 8], int(9 == 8)),
    ],
)
def test_operator_values(type_id, values, expected):
    children = [literal_bits(0, value) for value in values]
    assert parse_packet(to_hex(operator_bits(0, type_id, children))).value() == expected


def test_length_and_count_modes_agree():
    children = [literal_bits(1, 11), literal_bits(2, 300)]
    by_count = parse_packet(to_hex(operator_bits(3, 0, children, by_count=True)))
    by_length = parse_packet(to_hex(operator_bits(3, 0, children, by_count=False)))
    assert by_count.children == by_length.children
    assert by_count.value() == by_length.value()


def test_operator_without_children_has_no_value():
    packet = parse_packet(to_hex(operator_bits(0, 0, [])))
    with pytest.raises(ValueError):
        packet.value()


def test_truncated_transmission_is_rejected():
    with pytest.raises(ValueError):
        parse_packet("D2")


def test_parts_handle_each_transmission():
    first = to_hex(operator_bits(1, 0, [literal_bits(2, 6), literal_bits(3, 9)]))
    second = to_hex(literal_bits(4, 42))
    text = f"{first}\n{second}\n"
    assert part_one(text) == [parse_packet(first).version_sum(), 4]
    assert part_two(text) == [parse_packet(first).value(), 42]