"""Counting arrangements of damaged springs."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from functools import cache
from pathlib import Path
from typing import Iterable, Sequence

from adventpuzzles.inputs import parse_int


def _to_int(text: str) -> int:
    try:
        return parse_int(text)
    except ValueError:
        return 0


def _slots(groups: Sequence[int]) -> int:
    """Cells needed for ``groups`` with one gap between neighbours."""
    return sum(groups) + len(groups) - 1 if groups else 0


def arrangements(row: str | Iterable[str], groups: Sequence[int]) -> int:
    """Ways the unknown cells ('?') can be filled to match ``groups``."""
    row = "".join(row)

    @cache
    def count(cells: str, wanted: tuple[int, ...]) -> int:
        if len(cells) < _slots(wanted):
            return 0
        if not wanted:
            return 0 if "#" in cells else 1

        first, rest = wanted[0], wanted[1:]
        end = len(cells) - _slots(rest)
        total = 0

        for start in range(end):
            if cells[start] == ".":
                continue

            pos = start + 1
            while pos - start < first and pos != end and cells[pos] != ".":
                pos += 1

            if pos - start == first:
                if pos < end and cells[pos] != "#":
                    total += count(cells[pos + 1 :], rest)
                elif pos == end and not rest:
                    total += count(cells[pos:], rest)

            if cells[start] == "#":
                break

        return total

    return count(row, tuple(groups))


@dataclass(frozen=True)
class SpringField:
    condition: str
    groups: tuple[int, ...]


def parse_spring_fields(text: str) -> list[SpringField]:
    fields = []
    for line in text.splitlines():
        condition, groups = line.split()[:2]
        fields.append(SpringField(condition, tuple(_to_int(g) for g in groups.split(","))))
    return fields


def unfold(field: SpringField) -> SpringField:
    """Five copies of the row joined by '?', and five copies of the groups."""
    return SpringField("?".join([field.condition] * 5), field.groups * 5)


def part01(fields: Iterable[SpringField]) -> int:
    return sum(arrangements(f.condition, f.groups) for f in fields)


def part02(fields: Iterable[SpringField]) -> int:
    return sum(arrangements(u.condition, u.groups) for u in map(unfold, fields))


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Count spring arrangements.")
    parser.add_argument("input", nargs="?", default="input.txt")
    args = parser.parse_args(argv)

    fields = parse_spring_fields(Path(args.input).read_text(encoding="utf-8"))
    print(part01(fields))
    print(part02(fields))