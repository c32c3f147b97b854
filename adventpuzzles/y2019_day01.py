"""Fuel requirements for spacecraft modules."""

from __future__ import annotations

import argparse
from typing import Iterable, Sequence

from adventpuzzles.inputs import read_numbers


def calculate_fuel(mass: int) -> int:
    """Fuel for ``mass``: a third of it, rounded toward zero, less two."""
    third = mass // 3 if mass >= 0 else -(-mass // 3)
    return third - 2


def calculate_fuel_with_overhead(mass: int) -> int:
    """Fuel for ``mass`` plus the fuel needed to carry that fuel."""
    fuel = calculate_fuel(mass)
    total = fuel
    while fuel > 0:
        fuel = calculate_fuel(fuel)
        if fuel > 0:
            total += fuel
    return total


def part01(masses: Iterable[int]) -> int:
    return sum(calculate_fuel(mass) for mass in masses)


def part02(masses: Iterable[int]) -> int:
    return sum(calculate_fuel_with_overhead(mass) for mass in masses)


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Sum module fuel requirements.")
    parser.add_argument("input", nargs="?", default="input.txt")
    args = parser.parse_args(argv)

    masses = read_numbers(args.input)
    print(part01(masses))
    print(part02(masses))