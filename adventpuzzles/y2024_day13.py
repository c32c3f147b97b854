"""Claw machines: the cheapest button presses that reach the prize."""

from __future__ import annotations

import argparse
import re
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Iterable, Sequence

from adventpuzzles.grid import Point

_BUTTON_A = re.compile(r"Button A: X\+([+-]?\d+), Y\+([+-]?\d+)")
_BUTTON_B = re.compile(r"Button B: X\+([+-]?\d+), Y\+([+-]?\d+)")
_PRIZE = re.compile(r"Prize: X=([+-]?\d+), Y=([+-]?\d+)")
_PRIZE_OFFSET = 10_000_000_000_000


@dataclass(frozen=True)
class Game:
    button_a: Point = field(default_factory=Point)
    button_b: Point = field(default_factory=Point)
    prize: Point = field(default_factory=Point)


@dataclass(frozen=True)
class Presses:
    a: int = 0
    b: int = 0


def _point(pattern: re.Pattern[str], line: str) -> Point:
    match = pattern.match(line)
    if match is None:
        return Point()
    return Point(int(match.group(1)), int(match.group(2)))


def parse_input(text: str) -> list[Game]:
    """Read games of three lines each, separated by blank lines."""
    games = []
    lines = iter(text.splitlines())
    for first in lines:
        second = next(lines, "")
        third = next(lines, "")
        next(lines, None)
        games.append(
            Game(_point(_BUTTON_A, first), _point(_BUTTON_B, second), _point(_PRIZE, third))
        )
    return games


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def solve(a1: int, b1: int, c1: int, a2: int, b2: int, c2: int) -> tuple[int, int]:
    """Integer solution of a1*x + b1*y = c1, a2*x + b2*y = c2 by Cramer's rule.

    Divisions truncate toward zero; a singular system gives (0, 0).
    """
    determinant = a1 * b2 - a2 * b1
    if determinant == 0:
        return 0, 0
    x = _trunc_div(c1 * b2 - c2 * b1, determinant)
    y = _trunc_div(a1 * c2 - a2 * c1, determinant)
    return x, y


def play(game: Game) -> Presses:
    """Presses that land exactly on the prize, or zero presses if none do."""
    a, b = solve(
        game.button_a.x, game.button_b.x, game.prize.x,
        game.button_a.y, game.button_b.y, game.prize.y,
    )
    if game.button_a.x * a + game.button_b.x * b != game.prize.x:
        return Presses()
    if game.button_a.y * a + game.button_b.y * b != game.prize.y:
        return Presses()
    return Presses(a, b)


def cost(presses: Presses) -> int:
    return presses.a * 3 + presses.b


def part01(games: Iterable[Game]) -> int:
    return sum(cost(play(game)) for game in games)


def part02(games: Iterable[Game]) -> int:
    return sum(
        cost(
            play(
                replace(
                    game,
                    prize=Point(game.prize.x + _PRIZE_OFFSET, game.prize.y + _PRIZE_OFFSET),
                )
            )
        )
        for game in games
    )


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Count tokens to win prizes.")
    parser.add_argument("input", nargs="?", default="input.txt")
    args = parser.parse_args(argv)

    games = parse_input(Path(args.input).read_text(encoding="utf-8"))
    print(part01(games))
    print(part02(games))