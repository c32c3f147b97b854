"""Part numbers in an engine schematic."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from itertools import islice
from pathlib import Path
from typing import Sequence

from adventpuzzles.grid import Point


@dataclass(frozen=True)
class Number:
    loc: Point
    value: int
    digits: int


@dataclass(frozen=True)
class Symbol:
    loc: Point
    value: str


@dataclass
class Schematic:
    bound: Point = field(default_factory=Point)
    numbers: list[Number] = field(default_factory=list)
    symbols: list[Symbol] = field(default_factory=list)


def adjacent(symbol: Symbol, number: Number) -> bool:
    """Whether any digit of ``number`` touches ``symbol``, diagonals included."""
    n, s = number.loc, symbol.loc
    return (
        s.y - 1 <= n.y <= s.y + 1
        and n.x <= s.x + 1
        and n.x >= s.x - number.digits
    )


def _is_digit(byte: int) -> bool:
    return 0x30 <= byte <= 0x39


def parse_schematic(text: str | bytes) -> Schematic:
    """Collect numbers and symbols; '.' is empty space.

    A number still being read when the input ends is not recorded.
    """
    data = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    numbers: list[Number] = []
    symbols: list[Symbol] = []
    x = y = width = 0
    parsing = False
    start = Point()
    value = digits = 0

    for byte in data:
        if parsing:
            if _is_digit(byte):
                value = value * 10 + byte - 0x30
                digits += 1
                x += 1
                continue
            numbers.append(Number(start, value, digits))
            value = digits = 0
            parsing = False

        if byte == ord("."):
            x += 1
        elif byte == ord("\n"):
            width = x
            x = 0
            y += 1
        elif _is_digit(byte):
            parsing = True
            value = byte - 0x30
            digits = 1
            start = Point(x, y)
            x += 1
        else:
            symbols.append(Symbol(Point(x, y), chr(byte)))
            x += 1

    return Schematic(Point(width, y + 1), numbers, symbols)


def part01(schematic: Schematic) -> int:
    return sum(
        number.value
        for symbol in schematic.symbols
        for number in schematic.numbers
        if adjacent(symbol, number)
    )


def part02(schematic: Schematic) -> int:
    total = 0
    for symbol in schematic.symbols:
        if symbol.value != "*":
            continue
        touching = (n.value for n in schematic.numbers if adjacent(symbol, n))
        pair = list(islice(touching, 2))
        if len(pair) == 2:
            total += pair[0] * pair[1]
    return total


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Sum engine part numbers.")
    parser.add_argument("input", nargs="?", default="input.txt")
    args = parser.parse_args(argv)

    schematic = parse_schematic(Path(args.input).read_bytes())
    print(part01(schematic))
    print(part02(schematic))