"""Checking reactor reports for safe level changes."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Iterable, Sequence

from adventpuzzles.inputs import parse_int


def parse_reports(text: str) -> list[list[int]]:
    return [[parse_int(field) for field in line.split()] for line in text.splitlines()]


def _different_sign(a: int, b: int) -> bool:
    return (a < 0) != (b < 0)


def _within_range(n: int) -> bool:
    return 1 <= abs(n) <= 3


def bad_index(report: Sequence[int]) -> int:
    """Index of the level where the report first becomes unsafe; -1 if safe."""
    previous = report[1] - report[0]
    if not _within_range(previous):
        return 0

    for i in range(1, len(report) - 1):
        current = report[i + 1] - report[i]
        if not _within_range(current) or _different_sign(previous, current):
            return i
        previous = current

    return -1


def _without(report: Sequence[int], index: int) -> list[int]:
    return [*report[:index], *report[index + 1 :]]


def _dampened_safe(report: Sequence[int]) -> bool:
    bad = bad_index(report)
    if bad < 0:
        return True
    candidates = [bad, bad + 1]
    if bad == 1:
        candidates.append(0)
    return any(bad_index(_without(report, i)) < 0 for i in candidates)


def part01(reports: Iterable[Sequence[int]]) -> int:
    return sum(1 for report in reports if bad_index(report) < 0)


def part02(reports: Iterable[Sequence[int]]) -> int:
    """Safe reports, allowing one level to be removed."""
    return sum(1 for report in reports if _dampened_safe(report))


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Count safe reactor reports.")
    parser.add_argument("input", nargs="?", default="input.txt")
    args = parser.parse_args(argv)

    reports = parse_reports(Path(args.input).read_text(encoding="utf-8"))
    print(part01(reports))
    print(part02(reports))