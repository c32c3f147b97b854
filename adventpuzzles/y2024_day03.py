"""Summing multiplications in corrupted memory."""

from __future__ import annotations

import argparse
import re
from pathlib import Path
from typing import Sequence

_MUL = rb"mul\(([0-9]{1,3}),([0-9]{1,3})\)"
_MUL_PATTERN = re.compile(_MUL)
_INSTRUCTION_PATTERN = re.compile(_MUL + rb"|do\(\)|don't\(\)")


def _as_bytes(memory: str | bytes) -> bytes:
    return memory.encode("utf-8") if isinstance(memory, str) else bytes(memory)


def part01(memory: str | bytes) -> int:
    """Sum of every well-formed mul(a,b)."""
    return sum(
        int(m.group(1)) * int(m.group(2))
        for m in _MUL_PATTERN.finditer(_as_bytes(memory))
    )


def part02(memory: str | bytes) -> int:
    """Like part01, but don't() disables and do() re-enables multiplications."""
    total = 0
    enabled = True
    for m in _INSTRUCTION_PATTERN.finditer(_as_bytes(memory)):
        token = m.group(0)
        if token == b"do()":
            enabled = True
        elif token == b"don't()":
            enabled = False
        elif enabled:
            total += int(m.group(1)) * int(m.group(2))
    return total


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Sum multiplications in memory.")
    parser.add_argument("input", nargs="?", default="input.txt")
    args = parser.parse_args(argv)

    memory = Path(args.input).read_bytes()
    print(part01(memory))
    print(part02(memory))