"""Ordering pages of safety manual updates."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from functools import cmp_to_key
from itertools import combinations
from pathlib import Path
from typing import Iterable, Sequence

from adventpuzzles.inputs import parse_int


def _to_int(text: str) -> int:
    try:
        return parse_int(text.strip())
    except ValueError:
        return 0


@dataclass(frozen=True)
class PageOrder:
    """Page ``before`` must be printed before page ``after``."""

    before: int
    after: int


def parse_input(text: str) -> tuple[list[PageOrder], list[list[int]]]:
    lines = iter(text.splitlines())
    orders = []
    for line in lines:
        if line == "":
            break
        before, _, after = line.partition("|")
        orders.append(PageOrder(_to_int(before), _to_int(after)))

    updates = [[parse_int(page) for page in line.split(",")] for line in lines]
    return orders, updates


def _rules(page_orders: Iterable[PageOrder]) -> set[tuple[int, int]]:
    return {(po.before, po.after) for po in page_orders}


def _correct(update: Sequence[int], rules: set[tuple[int, int]]) -> bool:
    return not any((later, earlier) in rules for earlier, later in combinations(update, 2))


def is_correct_order(update: Sequence[int], page_orders: Iterable[PageOrder]) -> bool:
    """Whether no rule puts a later page of ``update`` before an earlier one."""
    return _correct(update, _rules(page_orders))


def part01(page_orders: Iterable[PageOrder], updates: Iterable[Sequence[int]]) -> int:
    rules = _rules(page_orders)
    return sum(u[len(u) // 2] for u in updates if _correct(u, rules))


def part02(page_orders: Iterable[PageOrder], updates: Iterable[Sequence[int]]) -> int:
    """Sum of middle pages of the incorrect updates once put in order."""
    rules = _rules(page_orders)

    def compare(a: int, b: int) -> int:
        if (a, b) in rules:
            return -1
        if (b, a) in rules:
            return 1
        return 0

    total = 0
    for update in updates:
        if _correct(update, rules):
            continue
        ordered = sorted(update, key=cmp_to_key(compare))
        total += ordered[len(ordered) // 2]
    return total


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Check manual update ordering.")
    parser.add_argument("input", nargs="?", default="input.txt")
    args = parser.parse_args(argv)

    page_orders, updates = parse_input(Path(args.input).read_text(encoding="utf-8"))
    print(part01(page_orders, updates))
    print(part02(page_orders, updates))