"""Restoring an intcode program to its alarm state."""

from __future__ import annotations

import argparse
from typing import Iterable, Sequence

from adventpuzzles.inputs import parse_int, read_lines
from adventpuzzles.intcode import Computer

_TARGET = 19690720


def _to_int(text: str) -> int:
    try:
        return parse_int(text)
    except ValueError:
        return 0


def to_program(values: Iterable[str]) -> list[int]:
    """Convert text values to a program; unparsable values become 0."""
    return [_to_int(value) for value in values]


def _run(program: Sequence[int], noun: int, verb: int) -> int:
    computer = Computer(program)
    computer.memory[1] = noun
    computer.memory[2] = verb
    computer.run()
    return computer.memory[0]


def part01(program: Sequence[int]) -> int:
    return _run(program, 12, 2)


def part02(program: Sequence[int]) -> int:
    for noun in range(101):
        for verb in range(101):
            if _run(program, noun, verb) == _TARGET:
                return 100 * noun + verb
    raise RuntimeError("could not find solution")


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Run the gravity assist program.")
    parser.add_argument("input", nargs="?", default="input.txt")
    args = parser.parse_args(argv)

    lines = read_lines(args.input)
    program = to_program(lines[0].split(","))
    print(part01(program))
    print(part02(program))