"""Tracing a loop of pipes and counting the tiles it encloses."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Sequence

from adventpuzzles.grid import Direction, Grid, Point, move

_CARDINALS = (Direction.UP, Direction.RIGHT, Direction.DOWN, Direction.LEFT)

# Tiles that have an opening toward the given direction.
_OPEN_TOWARD = {
    Direction.UP: frozenset("S|LJ"),
    Direction.DOWN: frozenset("S|F7"),
    Direction.LEFT: frozenset("S-J7"),
    Direction.RIGHT: frozenset("S-FL"),
}

# Tiles that can be entered when moving in the given direction.
_ENTERABLE_FROM = {
    Direction.UP: frozenset("S|7F"),
    Direction.DOWN: frozenset("S|JL"),
    Direction.LEFT: frozenset("S-FL"),
    Direction.RIGHT: frozenset("S-J7"),
}

_START_REPLACEMENT = {
    (Direction.UP, Direction.RIGHT): "L",
    (Direction.UP, Direction.DOWN): "|",
    (Direction.UP, Direction.LEFT): "J",
    (Direction.RIGHT, Direction.DOWN): "F",
    (Direction.RIGHT, Direction.LEFT): "-",
    (Direction.DOWN, Direction.LEFT): "7",
}


def connected(a: str | None, b: str | None, direction: Direction) -> bool:
    """Whether tile ``a`` connects to tile ``b`` lying in ``direction`` from it."""
    return a in _OPEN_TOWARD.get(direction, frozenset()) and b in _ENTERABLE_FROM.get(
        direction, frozenset()
    )


def parse_field(text: str) -> Grid[str]:
    return Grid(list(line) for line in text.splitlines())


def _find_start(field: Grid[str]) -> Point:
    start = field.find("S")
    if start is None:
        raise ValueError("field has no starting tile")
    return start


def main_loop(field: Grid[str]) -> Grid[bool]:
    """Mark the tiles of the loop that passes through the start tile."""
    loop: Grid[bool] = Grid([False] * len(row) for row in field)
    current = _find_start(field)
    loop.set_value(current, True)

    extended = True
    while extended:
        extended = False
        for direction in _CARDINALS:
            candidate = move(current, direction)
            if (
                field.in_bound(candidate)
                and connected(field.value(current), field.value(candidate), direction)
                and not loop.value(candidate, False)
            ):
                extended = True
                current = candidate
                loop.set_value(current, True)

    return loop


def crossings(field: Grid[str], loop: Grid[bool], point: Point) -> int:
    """Times the loop is crossed walking right from ``point`` to the edge."""
    if loop.value(point, False):
        return 0

    count = 0
    corner = None
    p = move(point, Direction.RIGHT)
    while loop.in_bound(p):
        if loop.value(p):
            tile = field.value(p)
            if tile == "|":
                count += 1
            elif tile == "F":
                corner = tile
            elif tile == "7":
                if corner != "F":
                    count += 1
                corner = tile
            elif tile == "J":
                if corner != "L":
                    count += 1
                corner = tile
            elif tile == "L":
                corner = tile
        p = move(p, Direction.RIGHT)

    return count


def part01(field: Grid[str]) -> int:
    """Steps to the point of the loop farthest from the start."""
    length = sum(sum(row) for row in main_loop(field))
    return (length + 1) // 2


def part02(field: Grid[str]) -> int:
    """Number of tiles enclosed by the loop."""
    field = Grid(field)
    loop = main_loop(field)

    start = _find_start(field)
    links = [d for d in _CARDINALS if connected("S", field.value(move(start, d)), d)]
    first = links[0] if links else Direction.UP
    last = links[-1] if len(links) > 1 else Direction.UP
    field.set_value(start, _START_REPLACEMENT.get((first, last), "\x00"))

    return sum(
        1
        for y, row in enumerate(loop)
        for x in range(len(row))
        if crossings(field, loop, Point(x, y)) % 2 != 0
    )


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Trace the pipe loop.")
    parser.add_argument("input", nargs="?", default="input.txt")
    args = parser.parse_args(argv)

    field = parse_field(Path(args.input).read_text(encoding="utf-8"))
    print(part01(field))
    print(part02(field))