"""Extrapolating sequences by repeated differences."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Iterable, Sequence

from adventpuzzles.inputs import parse_int


def _to_int(text: str) -> int:
    try:
        return parse_int(text)
    except ValueError:
        return 0


def parse_report(text: str) -> list[list[int]]:
    return [[_to_int(value) for value in line.split()] for line in text.splitlines()]


def extend(history: Sequence[int]) -> list[list[int]]:
    """The history followed by successive differences, down to all zeros."""
    if not history:
        raise ValueError("history is empty")
    levels = [list(history)]
    while True:
        last = levels[-1]
        diffs = [b - a for a, b in zip(last, last[1:])]
        levels.append(diffs)
        if all(d == 0 for d in diffs):
            return levels


def extrapolate_right(levels: Sequence[Sequence[int]]) -> int:
    """The next value of the top level."""
    value = 0
    for level in reversed(levels[:-1]):
        value = level[-1] + value
    return value


def extrapolate_left(levels: Sequence[Sequence[int]]) -> int:
    """The value before the first of the top level."""
    value = 0
    for level in reversed(levels[:-1]):
        value = level[0] - value
    return value


def part01(report: Iterable[Sequence[int]]) -> int:
    return sum(extrapolate_right(extend(history)) for history in report)


def part02(report: Iterable[Sequence[int]]) -> int:
    return sum(extrapolate_left(extend(history)) for history in report)


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Extrapolate sensor histories.")
    parser.add_argument("input", nargs="?", default="input.txt")
    args = parser.parse_args(argv)

    report = parse_report(Path(args.input).read_text(encoding="utf-8"))
    print(part01(report))
    print(part02(report))