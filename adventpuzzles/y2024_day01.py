"""Reconciling two lists of location ids."""

from __future__ import annotations

import argparse
from collections import Counter
from pathlib import Path
from typing import Sequence

from adventpuzzles.inputs import parse_int


def parse_lists(text: str) -> tuple[list[int], list[int]]:
    """Split each line into a left and a right number."""
    left: list[int] = []
    right: list[int] = []
    for line in text.splitlines():
        fields = line.split()
        left.append(parse_int(fields[0]))
        right.append(parse_int(fields[1]))
    return left, right


def part01(left: Sequence[int], right: Sequence[int]) -> int:
    """Total distance between the lists, paired smallest to smallest."""
    return sum(abs(a - b) for a, b in zip(sorted(left), sorted(right)))


def part02(left: Sequence[int], right: Sequence[int]) -> int:
    """Similarity: each left number times its count in the right list."""
    appearances = Counter(right)
    return sum(n * appearances[n] for n in left)


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Compare location id lists.")
    parser.add_argument("input", nargs="?", default="input.txt")
    args = parser.parse_args(argv)

    left, right = parse_lists(Path(args.input).read_text(encoding="utf-8"))
    print(part01(left, right))
    print(part02(left, right))