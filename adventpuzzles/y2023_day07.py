"""Camel Cards: ranking poker-like hands."""

from __future__ import annotations

import argparse
from collections import Counter
from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path
from typing import Callable, Iterable, Sequence

from adventpuzzles.inputs import parse_int

_FACE_VALUES = {"A": 14, "K": 13, "Q": 12, "J": 11, "T": 10}


def _to_int(text: str) -> int:
    try:
        return parse_int(text)
    except ValueError:
        return 0


class HandType(IntEnum):
    """Hand types, strongest first."""

    FIVE_OF_A_KIND = 0
    FOUR_OF_A_KIND = 1
    FULL_HOUSE = 2
    THREE_OF_A_KIND = 3
    TWO_PAIR = 4
    ONE_PAIR = 5
    HIGH_CARD = 6


@dataclass(frozen=True)
class HandRound:
    hand: str
    bid: int


def card_value(card: str) -> int:
    return _FACE_VALUES.get(card, ord(card) - ord("0"))


def hand_type(hand: str) -> HandType:
    counts = Counter(Counter(hand).values())
    if counts[5]:
        return HandType.FIVE_OF_A_KIND
    if counts[4]:
        return HandType.FOUR_OF_A_KIND
    if counts[3] == 1 and counts[2] == 1:
        return HandType.FULL_HOUSE
    if counts[3] == 1:
        return HandType.THREE_OF_A_KIND
    if counts[2] == 2:
        return HandType.TWO_PAIR
    if counts[2] == 1:
        return HandType.ONE_PAIR
    return HandType.HIGH_CARD


def hand_type_with_jokers(hand: str) -> HandType:
    """The best type reachable when each J may stand for another card."""
    others = [card for card in hand if card != "J"]
    if len(others) == 5:
        return hand_type(hand)
    if not others:
        return HandType.FIVE_OF_A_KIND
    return min(hand_type(hand.replace("J", card)) for card in others)


def parse_hand_rounds(text: str) -> list[HandRound]:
    rounds = []
    for line in text.splitlines():
        fields = line.split()
        rounds.append(HandRound(fields[0], _to_int(fields[1])))
    return rounds


def _joker_value(card: str) -> int:
    return 0 if card == "J" else card_value(card)


def _winnings(
    rounds: Iterable[HandRound],
    typer: Callable[[str], HandType],
    value: Callable[[str], int],
) -> int:
    ranked = sorted(
        rounds,
        key=lambda r: (-typer(r.hand), [value(card) for card in r.hand]),
    )
    return sum(rank * r.bid for rank, r in enumerate(ranked, start=1))


def part01(rounds: Iterable[HandRound]) -> int:
    return _winnings(rounds, hand_type, card_value)


def part02(rounds: Iterable[HandRound]) -> int:
    return _winnings(rounds, hand_type_with_jokers, _joker_value)


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Total Camel Cards winnings.")
    parser.add_argument("input", nargs="?", default="input.txt")
    args = parser.parse_args(argv)

    rounds = parse_hand_rounds(Path(args.input).read_text(encoding="utf-8"))
    print(part01(rounds))
    print(part02(rounds))