"""Counting stones that split as you blink."""

from __future__ import annotations

import argparse
from functools import cache
from pathlib import Path
from typing import Iterable, Sequence

from adventpuzzles.inputs import parse_int


def parse_input(text: str) -> list[int]:
    return [parse_int(field) for field in text.split()]


@cache
def count(stone: int, steps: int) -> int:
    """Number of stones that ``stone`` becomes after ``steps`` blinks."""
    if steps == 0:
        return 1
    if stone == 0:
        return count(1, steps - 1)
    digits = str(stone)
    if len(digits) % 2 == 0:
        half = len(digits) // 2
        return count(parse_int(digits[:half]), steps - 1) + count(
            parse_int(digits[half:]), steps - 1
        )
    return count(stone * 2024, steps - 1)


def part01(stones: Iterable[int]) -> int:
    return sum(count(stone, 25) for stone in stones)


def part02(stones: Iterable[int]) -> int:
    return sum(count(stone, 75) for stone in stones)


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Count stones after blinking.")
    parser.add_argument("input", nargs="?", default="input.txt")
    args = parser.parse_args(argv)

    stones = parse_input(Path(args.input).read_text(encoding="utf-8"))
    print(part01(stones))
    print(part02(stones))