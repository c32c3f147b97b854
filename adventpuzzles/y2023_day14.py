"""Rolling rocks on a tilting platform."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Sequence

from adventpuzzles.grid import Direction, Grid

_SPINS = 1_000_000_000


def parse_platform(text: str) -> Grid[str]:
    return Grid(list(line) for line in text.splitlines())


def _roll(line: Sequence[str]) -> list[str]:
    """Roll every 'O' toward index 0 until it meets a '#' or another rock."""
    segments = []
    for segment in "".join(line).split("#"):
        rocks = segment.count("O")
        segments.append("O" * rocks + "." * (len(segment) - rocks))
    return list("#".join(segments))


def tilt(platform: Grid[str], direction: Direction) -> None:
    """Tilt the platform in place so rounded rocks roll toward ``direction``."""
    if direction in (Direction.UP, Direction.DOWN):
        width = len(platform[0]) if len(platform) else 0
        for x in range(width):
            column = platform.column(x)
            if direction is Direction.UP:
                rolled = _roll(column)
            else:
                rolled = _roll(column[::-1])[::-1]
            for row, tile in zip(platform, rolled):
                row[x] = tile
    elif direction in (Direction.LEFT, Direction.RIGHT):
        for row in platform:
            if direction is Direction.LEFT:
                row[:] = _roll(row)
            else:
                row[:] = _roll(row[::-1])[::-1]


def spin(platform: Grid[str]) -> None:
    """One cycle: tilt north, west, south, then east."""
    for direction in (Direction.UP, Direction.LEFT, Direction.DOWN, Direction.RIGHT):
        tilt(platform, direction)


def _state(platform: Grid[str]) -> str:
    return "".join("".join(row) for row in platform)


def _restore(platform: Grid[str], state: str) -> None:
    tiles = iter(state)
    for row in platform:
        row[:] = [next(tiles) for _ in row]


def spin_until_repeat(platform: Grid[str]) -> dict[str, int]:
    """Spin until a state recurs; map each new state to its spin number.

    The platform is left in the last state before the repeat.
    """
    patterns: dict[str, int] = {}
    previous = _state(platform)
    while True:
        spin(platform)
        state = _state(platform)
        if state in patterns:
            _restore(platform, previous)
            return patterns
        previous = state
        patterns[state] = len(patterns) + 1


def north_load(platform: Grid[str]) -> int:
    height = len(platform)
    return sum(
        height - y for y, row in enumerate(platform) for tile in row if tile == "O"
    )


def part01(platform: Grid[str]) -> int:
    tilt(platform, Direction.UP)
    return north_load(platform)


def part02(platform: Grid[str]) -> int:
    initial = spin_until_repeat(platform)
    cycle = spin_until_repeat(platform)

    offset = (_SPINS - len(initial)) % len(cycle)
    by_spin = {count: state for state, count in cycle.items()}
    if offset in by_spin:
        _restore(platform, by_spin[offset])

    return north_load(platform)


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Measure load on the platform.")
    parser.add_argument("input", nargs="?", default="input.txt")
    args = parser.parse_args(argv)

    text = Path(args.input).read_text(encoding="utf-8")
    print(part01(parse_platform(text)))
    print(part02(parse_platform(text)))