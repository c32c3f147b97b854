"""Antinodes created by pairs of same-frequency antennas."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from itertools import combinations
from pathlib import Path
from typing import Sequence

from adventpuzzles.grid import Point


@dataclass(frozen=True)
class Antenna:
    position: Point
    symbol: str


@dataclass
class Plot:
    """The map's width and height (as a point) and the antennas on it."""

    dim: Point = field(default_factory=Point)
    antennas: list[Antenna] = field(default_factory=list)


def parse_input(text: str) -> Plot:
    lines = text.splitlines()
    antennas = [
        Antenna(Point(x, y), symbol)
        for y, line in enumerate(lines)
        for x, symbol in enumerate(line)
        if symbol != "."
    ]
    width = len(lines[-1]) if lines else 0
    return Plot(Point(width, len(lines)), antennas)


def _in_bound(dim: Point, p: Point) -> bool:
    return 0 <= p.x < dim.x and 0 <= p.y < dim.y


def _pairs(plot: Plot):
    for a1, a2 in combinations(plot.antennas, 2):
        if a1.symbol == a2.symbol:
            yield a1.position, a2.position


def part01(plot: Plot) -> int:
    """Antinodes one antenna-distance beyond each end of every pair."""
    antinodes: set[Point] = set()
    for p1, p2 in _pairs(plot):
        dx, dy = p1.x - p2.x, p1.y - p2.y
        for candidate in (Point(p1.x + dx, p1.y + dy), Point(p2.x - dx, p2.y - dy)):
            if _in_bound(plot.dim, candidate):
                antinodes.add(candidate)
    return len(antinodes)


def part02(plot: Plot) -> int:
    """Antinodes at every in-bound step along each pair's line, antennas included."""
    antinodes = {antenna.position for antenna in plot.antennas}
    for p1, p2 in _pairs(plot):
        dx, dy = p1.x - p2.x, p1.y - p2.y
        for start, sx, sy in ((p1, dx, dy), (p2, -dx, -dy)):
            p = Point(start.x + sx, start.y + sy)
            while _in_bound(plot.dim, p):
                antinodes.add(p)
                p = Point(p.x + sx, p.y + sy)
    return len(antinodes)


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Count antinode locations.")
    parser.add_argument("input", nargs="?", default="input.txt")
    args = parser.parse_args(argv)

    plot = parse_input(Path(args.input).read_text(encoding="utf-8"))
    print(part01(plot))
    print(part02(plot))