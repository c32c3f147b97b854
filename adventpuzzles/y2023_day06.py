"""Toy boat races: how long to hold the button."""

from __future__ import annotations

import argparse
import math
from math import prod
from pathlib import Path
from typing import Sequence

from adventpuzzles.inputs import parse_int

# distance = held * (time - held), so the hold times that exactly match a
# distance are the roots of held^2 - time*held + distance = 0.


def _to_int(text: str) -> int:
    try:
        return parse_int(text)
    except ValueError:
        return 0


def held(time: int, distance: int) -> tuple[float, float]:
    """The two hold times that travel exactly ``distance``."""
    root = math.sqrt(float(time * time - 4 * distance))
    return (time - root) / 2, (time + root) / 2


def nwin(time: int, distance: int) -> int:
    """Number of whole hold times that beat ``distance``."""
    low, high = held(time, distance)

    first = math.ceil(low)
    if low == float(int(low)):
        first += 1

    last = math.floor(high)
    if high == float(int(high)):
        last -= 1

    return last - first + 1


def parse_race_doc(text: str) -> tuple[list[int], list[int]]:
    lines = text.splitlines()
    if not lines:
        return [], []
    times = [_to_int(value) for value in lines[0].split()[1:]]
    if len(lines) < 2:
        return times, []
    distances = [_to_int(value) for value in lines[1].split()[1:]]
    return times, distances


def part01(times: Sequence[int], distances: Sequence[int]) -> int:
    return prod(nwin(t, d) for t, d in zip(times, distances, strict=True))


def part02(times: Sequence[int], distances: Sequence[int]) -> int:
    if len(times) != len(distances):
        raise ValueError("times and distances differ in length")
    time = _to_int("".join(str(t) for t in times))
    distance = _to_int("".join(str(d) for d in distances))
    return nwin(time, distance)


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Count ways to win boat races.")
    parser.add_argument("input", nargs="?", default="input.txt")
    args = parser.parse_args(argv)

    times, distances = parse_race_doc(Path(args.input).read_text(encoding="utf-8"))
    print(part01(times, distances))
    print(part02(times, distances))