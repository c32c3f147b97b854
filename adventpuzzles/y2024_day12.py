"""Fencing garden regions."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Iterator, Sequence

from adventpuzzles.grid import Direction, Grid, Point, move

_CARDINALS = (Direction.UP, Direction.RIGHT, Direction.DOWN, Direction.LEFT)

# Pairs of neighbouring sides meeting at each corner of a cell, with the diagonal between them.
_CORNERS = (
    (Direction.UP, Direction.RIGHT, Direction.UP_RIGHT),
    (Direction.RIGHT, Direction.DOWN, Direction.DOWN_RIGHT),
    (Direction.DOWN, Direction.LEFT, Direction.DOWN_LEFT),
    (Direction.LEFT, Direction.UP, Direction.UP_LEFT),
)


def parse_input(text: str) -> Grid[str]:
    return Grid(list(line) for line in text.splitlines())


def _regions(grid: Grid[str]) -> Iterator[list[Point]]:
    """Yield each connected region of equal plants as a list of points."""
    visited: set[Point] = set()
    for y, row in enumerate(grid):
        for x, plant in enumerate(row):
            origin = Point(x, y)
            if origin in visited:
                continue
            visited.add(origin)
            region = []
            stack = [origin]
            while stack:
                p = stack.pop()
                region.append(p)
                for direction in _CARDINALS:
                    nxt = move(p, direction)
                    if nxt not in visited and grid.value(nxt) == plant:
                        visited.add(nxt)
                        stack.append(nxt)
            yield region


def _perimeter(grid: Grid[str], region: list[Point]) -> int:
    return sum(
        1
        for p in region
        for direction in _CARDINALS
        if grid.value(move(p, direction)) != grid.value(p)
    )


def _sides(grid: Grid[str], region: list[Point]) -> int:
    """Straight fence sections, counted as the region's corners."""
    corners = 0
    for p in region:
        plant = grid.value(p)
        for first, second, diagonal in _CORNERS:
            a = grid.value(move(p, first)) == plant
            b = grid.value(move(p, second)) == plant
            if not a and not b:
                corners += 1
            elif a and b and grid.value(move(p, diagonal)) != plant:
                corners += 1
    return corners


def part01(grid: Grid[str]) -> int:
    """Total price: area times perimeter of every region."""
    return sum(len(region) * _perimeter(grid, region) for region in _regions(grid))


def part02(grid: Grid[str]) -> int:
    """Total bulk price: area times number of sides of every region."""
    return sum(len(region) * _sides(grid, region) for region in _regions(grid))


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Price garden fencing.")
    parser.add_argument("input", nargs="?", default="input.txt")
    args = parser.parse_args(argv)

    grid = parse_input(Path(args.input).read_text(encoding="utf-8"))
    print(part01(grid))
    print(part02(grid))