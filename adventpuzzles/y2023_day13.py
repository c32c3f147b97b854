"""Finding lines of reflection in patterns of ash and rock."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path
from typing import Iterable, Sequence

from adventpuzzles.grid import Grid


class Symmetry(IntEnum):
    HORIZONTAL = 0
    VERTICAL = 1


@dataclass(frozen=True)
class Mirror:
    """A candidate reflection line after row or column ``index``."""

    symmetry: Symmetry
    index: int
    diff: int


def parse_walks(text: str) -> list[Grid[str]]:
    """Split the text into patterns separated by blank lines."""
    walks: list[Grid[str]] = []
    rows: list[list[str]] = []
    for line in text.splitlines():
        if line:
            rows.append(list(line))
        elif rows:
            walks.append(Grid(rows))
            rows = []
    if rows:
        walks.append(Grid(rows))
    return walks


def _mismatches(a: Sequence[str], b: Sequence[str]) -> int:
    return sum(1 for p, q in zip(a, b) if p != q)


def horizontal_diff(grid: Grid[str], y: int) -> int:
    """Cells that differ when reflecting across the line below row ``y``; -1 if no such line."""
    if not 0 <= y < len(grid) - 1:
        return -1
    pairs = zip(range(y, -1, -1), range(y + 1, len(grid)))
    return sum(_mismatches(grid.row(a), grid.row(b)) for a, b in pairs)


def vertical_diff(grid: Grid[str], x: int) -> int:
    """Cells that differ when reflecting across the line right of column ``x``; -1 if no such line."""
    width = len(grid[0])
    if not 0 <= x < width - 1:
        return -1
    pairs = zip(range(x, -1, -1), range(x + 1, width))
    return sum(_mismatches(grid.column(a), grid.column(b)) for a, b in pairs)


def mirrors(grid: Grid[str]) -> list[Mirror]:
    """Every candidate line, horizontal ones first."""
    found = [
        Mirror(Symmetry.HORIZONTAL, y, horizontal_diff(grid, y))
        for y in range(len(grid) - 1)
    ]
    found.extend(
        Mirror(Symmetry.VERTICAL, x, vertical_diff(grid, x))
        for x in range(len(grid[0]) - 1)
    )
    return found


def _summarize(walks: Iterable[Grid[str]], diff: int) -> int:
    total = 0
    for walk in walks:
        for mirror in mirrors(walk):
            if mirror.diff != diff:
                continue
            if mirror.symmetry is Symmetry.HORIZONTAL:
                total += 100 * (mirror.index + 1)
            else:
                total += mirror.index + 1
    return total


def part01(walks: Iterable[Grid[str]]) -> int:
    return _summarize(walks, 0)


def part02(walks: Iterable[Grid[str]]) -> int:
    return _summarize(walks, 1)


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Summarize reflection lines.")
    parser.add_argument("input", nargs="?", default="input.txt")
    args = parser.parse_args(argv)

    walks = parse_walks(Path(args.input).read_text(encoding="utf-8"))
    print(part01(walks))
    print(part02(walks))