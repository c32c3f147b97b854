"""Calibration values hidden in lines of text."""

from __future__ import annotations

import argparse
from typing import Iterable, Sequence

from adventpuzzles.inputs import parse_int, read_lines

_WORDS = {
    "one": "1",
    "two": "2",
    "three": "3",
    "four": "4",
    "five": "5",
    "six": "6",
    "seven": "7",
    "eight": "8",
    "nine": "9",
}


def _combine(digits: list[str]) -> int:
    if not digits:
        return 0
    try:
        return parse_int(digits[0] + digits[-1])
    except ValueError:
        return 0


def extract_number(line: str) -> int:
    """Join the first and last digit of ``line``; 0 if there is none."""
    return _combine([char for char in line if char.isdecimal()])


def number_prefix(text: str) -> str | None:
    """Return the digit that ``text`` starts with, spelled out or not."""
    for word, digit in _WORDS.items():
        if text.startswith(word):
            return digit
    if text and text[0].isdecimal():
        return text[0]
    return None


def extract_number2(line: str) -> int:
    """Like extract_number, but spelled-out digits count too."""
    prefixes = (number_prefix(line[i:]) for i in range(len(line)))
    return _combine([digit for digit in prefixes if digit is not None])


def part01(lines: Iterable[str]) -> int:
    return sum(extract_number(line) for line in lines)


def part02(lines: Iterable[str]) -> int:
    return sum(extract_number2(line) for line in lines)


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Sum calibration values.")
    parser.add_argument("input", nargs="?", default="input.txt")
    args = parser.parse_args(argv)

    lines = read_lines(args.input)
    print(part01(lines))
    print(part02(lines))