"""Distances between galaxies in an expanding universe."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from itertools import combinations
from pathlib import Path
from typing import Sequence

from adventpuzzles.grid import Grid, Point


@dataclass
class Universe:
    image: Grid[str] = field(default_factory=Grid)
    galaxies: list[Point] = field(default_factory=list)
    empty_ys: list[int] = field(default_factory=list)
    empty_xs: list[int] = field(default_factory=list)


def parse_universe(text: str) -> Universe:
    lines = text.splitlines()
    galaxies = [
        Point(x, y)
        for y, line in enumerate(lines)
        for x, tile in enumerate(line)
        if tile == "#"
    ]
    rows_with = {g.y for g in galaxies}
    columns_with = {g.x for g in galaxies}
    width = len(lines[0]) if lines else 0
    return Universe(
        image=Grid(list(line) for line in lines),
        galaxies=galaxies,
        empty_ys=[y for y in range(len(lines)) if y not in rows_with],
        empty_xs=[x for x in range(width) if x not in columns_with],
    )


def distance(universe: Universe, a: Point, b: Point, scale: int) -> int:
    """Manhattan distance where each empty row or column counts ``scale`` times."""
    low_y, high_y = sorted((a.y, b.y))
    low_x, high_x = sorted((a.x, b.x))
    empty_rows = sum(1 for y in universe.empty_ys if low_y < y < high_y)
    empty_columns = sum(1 for x in universe.empty_xs if low_x < x < high_x)
    return (
        (high_y - low_y)
        + (high_x - low_x)
        + (empty_rows + empty_columns) * (scale - 1)
    )


def _total(universe: Universe, scale: int) -> int:
    return sum(
        distance(universe, a, b, scale) for a, b in combinations(universe.galaxies, 2)
    )


def part01(universe: Universe) -> int:
    return _total(universe, 2)


def part02(universe: Universe) -> int:
    return _total(universe, 1_000_000)


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Sum galaxy distances.")
    parser.add_argument("input", nargs="?", default="input.txt")
    args = parser.parse_args(argv)

    universe = parse_universe(Path(args.input).read_text(encoding="utf-8"))
    print(part01(universe))
    print(part02(universe))