"""Following seeds through an almanac of range mappings."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from pathlib import Path
from typing import Sequence

from adventpuzzles.inputs import parse_int

_MAP_COUNT = 7


def _to_int(text: str) -> int:
    try:
        return parse_int(text)
    except ValueError:
        return 0


@dataclass(frozen=True)
class MapRange:
    dst: int
    src: int
    length: int


@dataclass
class Mapping:
    """A list of ranges; values outside every range map to themselves."""

    ranges: list[MapRange] = field(default_factory=list)

    def map_from(self, n: int) -> int:
        for r in self.ranges:
            if r.src <= n < r.src + r.length:
                return r.dst + (n - r.src)
        return n

    def map_to(self, n: int) -> int:
        for r in self.ranges:
            if r.dst <= n < r.dst + r.length:
                return r.src + (n - r.dst)
        return n


def _empty_maps() -> list[Mapping]:
    return [Mapping() for _ in range(_MAP_COUNT)]


@dataclass
class Almanac:
    """Seeds and the seven mappings from seed to location, in order."""

    seeds: list[int] = field(default_factory=list)
    maps: list[Mapping] = field(default_factory=_empty_maps)

    def location(self, seed: int) -> int:
        value = seed
        for mapping in self.maps:
            value = mapping.map_from(value)
        return value

    def reverse(self, location: int) -> int:
        value = location
        for mapping in reversed(self.maps):
            value = mapping.map_to(value)
        return value


def parse_almanac(text: str) -> Almanac:
    almanac = Almanac()
    lines = iter(text.splitlines())

    first = next(lines, None)
    if first is None:
        return almanac
    almanac.seeds = [_to_int(value) for value in first.split()[1:]]

    next(lines, None)
    next(lines, None)

    for mapping in almanac.maps:
        line = next(lines, None)
        if line is None:
            return almanac
        while line != "":
            fields = line.split()
            mapping.ranges.append(
                MapRange(_to_int(fields[0]), _to_int(fields[1]), _to_int(fields[2]))
            )
            line = next(lines, None)
            if line is None:
                return almanac
        next(lines, None)

    return almanac


def part01(almanac: Almanac) -> int:
    return min((almanac.location(seed) for seed in almanac.seeds), default=0)


def part02(almanac: Almanac) -> int:
    """Lowest location whose seed falls in one of the seed ranges."""
    starts = almanac.seeds[0::2]
    lengths = almanac.seeds[1::2]
    ranges = [(start, start + length) for start, length in zip(starts, lengths)]
    if not ranges:
        raise ValueError("almanac has no seed ranges")

    location = 0
    while True:
        seed = almanac.reverse(location)
        if any(start <= seed < end for start, end in ranges):
            return location
        location += 1


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Find the nearest planting location.")
    parser.add_argument("input", nargs="?", default="input.txt")
    args = parser.parse_args(argv)

    almanac = parse_almanac(Path(args.input).read_text(encoding="utf-8"))
    print(part01(almanac))
    print(part02(almanac))