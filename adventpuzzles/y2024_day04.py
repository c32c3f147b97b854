"""Word search for XMAS."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Sequence

from adventpuzzles.grid import Direction, Grid, Point, move


def parse_grid(text: str) -> Grid[str]:
    return Grid(list(line) for line in text.splitlines())


def word_from(grid: Grid[str], point: Point, direction: Direction, length: int) -> str:
    """Up to ``length`` letters read from ``point`` in ``direction``, stopping at the edge."""
    letters = []
    for _ in range(length):
        if not grid.in_bound(point):
            break
        letters.append(grid.value(point))
        point = move(point, direction)
    return "".join(letters)


def part01(grid: Grid[str]) -> int:
    """Occurrences of XMAS in any of the eight directions."""
    return sum(
        1
        for y, row in enumerate(grid)
        for x, letter in enumerate(row)
        if letter == "X"
        for direction in Direction
        if word_from(grid, Point(x, y), direction, 4) == "XMAS"
    )


def _is_mas(word: str) -> bool:
    return word in ("MAS", "SAM")


def part02(grid: Grid[str]) -> int:
    """Occurrences of two MAS crossing diagonally at an A."""
    count = 0
    for y, row in enumerate(grid):
        for x, letter in enumerate(row):
            if letter != "A":
                continue
            if not _is_mas(word_from(grid, Point(x - 1, y - 1), Direction.DOWN_RIGHT, 3)):
                continue
            if not _is_mas(word_from(grid, Point(x - 1, y + 1), Direction.UP_RIGHT, 3)):
                continue
            count += 1
    return count


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Search the word grid.")
    parser.add_argument("input", nargs="?", default="input.txt")
    args = parser.parse_args(argv)

    grid = parse_grid(Path(args.input).read_text(encoding="utf-8"))
    print(part01(grid))
    print(part02(grid))