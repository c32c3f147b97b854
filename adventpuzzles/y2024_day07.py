"""Finding operators that make calibration equations true."""

from __future__ import annotations

import argparse
import operator
from dataclasses import dataclass
from itertools import product
from pathlib import Path
from typing import Callable, Iterable, Sequence

from adventpuzzles.inputs import parse_int


@dataclass(frozen=True)
class Equation:
    value: int
    operands: tuple[int, ...]


def parse_equation(line: str) -> Equation:
    value, sep, rest = line.partition(": ")
    if not sep:
        raise ValueError(f"malformed equation: {line!r}")
    return Equation(parse_int(value), tuple(parse_int(op) for op in rest.split(" ")))


def parse_input(text: str) -> list[Equation]:
    return [parse_equation(line) for line in text.splitlines()]


def _ndigits(n: int) -> int:
    return len(str(n)) if n > 0 else 0


def _concat(a: int, b: int) -> int:
    return a * 10 ** _ndigits(b) + b


_BASIC: tuple[Callable[[int, int], int], ...] = (operator.add, operator.mul)
_WITH_CONCAT = _BASIC + (_concat,)


def _evaluates_to(operands: Sequence[int], operators, target: int) -> bool:
    acc = operands[0]
    for op, operand in zip(operators, operands[1:]):
        acc = op(acc, operand)
        if acc > target:
            return False
    return acc == target


def has_solution(equation: Equation, concat: bool) -> bool:
    """Whether some choice of +, * (and || if ``concat``) yields the value.

    Operators apply left to right with no precedence.
    """
    if not equation.operands:
        raise ValueError("equation has no operands")
    choices = _WITH_CONCAT if concat else _BASIC
    return any(
        _evaluates_to(equation.operands, ops, equation.value)
        for ops in product(choices, repeat=len(equation.operands) - 1)
    )


def part01(equations: Iterable[Equation]) -> int:
    return sum(eq.value for eq in equations if has_solution(eq, False))


def part02(equations: Iterable[Equation]) -> int:
    return sum(eq.value for eq in equations if has_solution(eq, True))


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Total calibration results.")
    parser.add_argument("input", nargs="?", default="input.txt")
    args = parser.parse_args(argv)

    equations = parse_input(Path(args.input).read_text(encoding="utf-8"))
    print(part01(equations))
    print(part02(equations))