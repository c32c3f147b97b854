"""Games of coloured cubes drawn from a bag."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from typing import Iterable, Sequence

from adventpuzzles.inputs import parse_int, read_lines


def _to_int(text: str) -> int:
    try:
        return parse_int(text)
    except ValueError:
        return 0


@dataclass
class CubeSet:
    red: int = 0
    green: int = 0
    blue: int = 0

    def power(self) -> int:
        return self.red * self.green * self.blue


@dataclass
class Game:
    game_id: int = 0
    sets: list[CubeSet] = field(default_factory=list)

    def minimum(self) -> CubeSet:
        """The fewest cubes of each colour that make every set possible."""
        return CubeSet(
            red=max((s.red for s in self.sets), default=0),
            green=max((s.green for s in self.sets), default=0),
            blue=max((s.blue for s in self.sets), default=0),
        )


def parse_cubeset(text: str) -> CubeSet:
    cubes = CubeSet()
    for part in text.split(", "):
        count, _, colour = part.partition(" ")
        if colour in ("red", "green", "blue"):
            setattr(cubes, colour, _to_int(count))
    return cubes


def parse_game(text: str) -> Game:
    header, _, body = text.partition(": ")
    _, _, game_id = header.partition(" ")
    return Game(_to_int(game_id), [parse_cubeset(part) for part in body.split("; ")])


def possible(game: Game, bound: CubeSet) -> bool:
    return all(
        s.red <= bound.red and s.green <= bound.green and s.blue <= bound.blue
        for s in game.sets
    )


def part01(lines: Iterable[str]) -> int:
    bound = CubeSet(red=12, green=13, blue=14)
    games = (parse_game(line) for line in lines)
    return sum(game.game_id for game in games if possible(game, bound))


def part02(lines: Iterable[str]) -> int:
    return sum(parse_game(line).minimum().power() for line in lines)


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Check cube games.")
    parser.add_argument("input", nargs="?", default="input.txt")
    args = parser.parse_args(argv)

    lines = read_lines(args.input)
    print(part01(lines))
    print(part02(lines))