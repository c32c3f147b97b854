"""Following a patrolling guard around obstructions."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Sequence

from adventpuzzles.grid import Direction, Grid, Point, move

_BACK = {
    Direction.UP: Direction.DOWN,
    Direction.RIGHT: Direction.LEFT,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
}

_RIGHT_TURN = {
    Direction.UP: Direction.RIGHT,
    Direction.RIGHT: Direction.DOWN,
    Direction.DOWN: Direction.LEFT,
    Direction.LEFT: Direction.UP,
}


def parse_input(text: str) -> tuple[Point, Grid[str]]:
    """The guard's start ('^', replaced by '.') and the map."""
    start = Point()
    rows = []
    for y, line in enumerate(text.splitlines()):
        row = list(line)
        if "^" in row:
            x = row.index("^")
            start = Point(x, y)
            row[x] = "."
        rows.append(row)
    return start, Grid(rows)


def turn_back(direction: Direction) -> Direction:
    return _BACK.get(direction, direction)


def turn_right(direction: Direction) -> Direction:
    return _RIGHT_TURN.get(direction, direction)


def _patrol(start: Point, grid: Grid[str]):
    """Yield (point, direction) for each open cell the guard stands on."""
    point, direction = start, Direction.UP
    while grid.in_bound(point):
        if grid[point.y][point.x] == "#":
            point = move(point, turn_back(direction))
            direction = turn_right(direction)
            point = move(point, direction)
            continue
        yield point, direction
        point = move(point, direction)


def part01(start: Point, grid: Grid[str]) -> int:
    """Distinct cells visited before the guard leaves the map."""
    return len({point for point, _ in _patrol(start, grid)})


def is_loop(start: Point, grid: Grid[str]) -> bool:
    """Whether the guard walks the same cell in the same direction twice."""
    seen: set[tuple[Point, Direction]] = set()
    for state in _patrol(start, grid):
        if state in seen:
            return True
        seen.add(state)
    return False


def part02(start: Point, grid: Grid[str]) -> int:
    """Cells where one new obstruction would trap the guard in a loop."""
    count = 0
    for y, row in enumerate(grid):
        for x, tile in enumerate(row):
            if (x, y) == (start.x, start.y) or tile == "#":
                continue
            row[x] = "#"
            if is_loop(start, grid):
                count += 1
            row[x] = "."
    return count


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Track the guard's patrol.")
    parser.add_argument("input", nargs="?", default="input.txt")
    args = parser.parse_args(argv)

    start, grid = parse_input(Path(args.input).read_text(encoding="utf-8"))
    print(part01(start, grid))
    print(part02(start, grid))