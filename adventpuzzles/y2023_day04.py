"""Scratchcards and the copies they win."""

from __future__ import annotations

import argparse
import heapq
from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable, Sequence

from adventpuzzles.inputs import parse_int, read_lines


def _to_int(text: str) -> int:
    try:
        return parse_int(text)
    except ValueError:
        return 0


@dataclass
class Scratchcard:
    card_id: int = 0
    winning: set[int] = field(default_factory=set)
    have: set[int] = field(default_factory=set)

    def matches(self) -> list[int]:
        """The numbers held that are also winning numbers, in ascending order."""
        return sorted(self.have & self.winning)


def parse_scratchcard(line: str) -> Scratchcard:
    header, _, body = line.partition(": ")
    card_id = _to_int(header.split()[1])
    winning, _, have = body.partition(" | ")
    return Scratchcard(
        card_id,
        {_to_int(text) for text in winning.split()},
        {_to_int(text) for text in have.split()},
    )


def part01(lines: Iterable[str]) -> int:
    total = 0
    for line in lines:
        matched = len(parse_scratchcard(line).matches())
        if matched > 0:
            total += 1 << (matched - 1)
    return total


def part02(lines: Iterable[str]) -> int:
    """Count every card held once all won copies have been processed."""
    counts: Counter[int] = Counter()
    matched: dict[int, int] = {}
    for line in lines:
        card = parse_scratchcard(line)
        matched[card.card_id] = len(card.matches())
        counts[card.card_id] += 1

    # A card only ever wins copies of cards with higher ids, so processing
    # ids in ascending order sees each card's final count before using it.
    pending = list(counts)
    heapq.heapify(pending)
    done: set[int] = set()
    while pending:
        card_id = heapq.heappop(pending)
        if card_id in done:
            continue
        done.add(card_id)
        copies = counts[card_id]
        for offset in range(1, matched.get(card_id, 0) + 1):
            counts[card_id + offset] += copies
            heapq.heappush(pending, card_id + offset)

    return sum(counts.values())


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Score scratchcards.")
    parser.add_argument("input", nargs="?", default="input.txt")
    args = parser.parse_args(argv)

    lines = read_lines(args.input)
    print(part01(lines))
    print(part02(lines))