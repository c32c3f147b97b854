"""Scoring and rating hiking trails on a topographic map."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Iterator, Sequence

from adventpuzzles.grid import Direction, Grid, Point, move

_CARDINALS = (Direction.UP, Direction.RIGHT, Direction.DOWN, Direction.LEFT)


def parse_input(text: str) -> Grid[int]:
    return Grid([ord(c) - ord("0") for c in line] for line in text.splitlines())


def _trail_ends(point: Point, grid: Grid[int]) -> Iterator[Point]:
    """Yield the height-9 end of every uphill trail from ``point``."""
    stack = [point]
    while stack:
        p = stack.pop()
        height = grid[p.y][p.x]
        if height == 9:
            yield p
            continue
        for direction in _CARDINALS:
            nxt = move(p, direction)
            if grid.value(nxt) == height + 1:
                stack.append(nxt)


def score(point: Point, grid: Grid[int]) -> int:
    """Distinct height-9 positions reachable from ``point``."""
    return len(set(_trail_ends(point, grid)))


def rating(point: Point, grid: Grid[int]) -> int:
    """Distinct trails from ``point`` to any height-9 position."""
    return sum(1 for _ in _trail_ends(point, grid))


def part01(grid: Grid[int]) -> int:
    return sum(score(head, grid) for head in grid.find_all(0))


def part02(grid: Grid[int]) -> int:
    return sum(rating(head, grid) for head in grid.find_all(0))


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Score trailheads.")
    parser.add_argument("input", nargs="?", default="input.txt")
    args = parser.parse_args(argv)

    grid = parse_input(Path(args.input).read_text(encoding="utf-8"))
    print(part01(grid))
    print(part02(grid))