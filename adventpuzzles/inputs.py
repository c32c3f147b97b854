"""Reading puzzle input files and parsing integers."""

from __future__ import annotations

import re
from os import PathLike
from pathlib import Path

_INTEGER = re.compile(r"[+-]?[0-9]+")


def parse_int(text: str) -> int:
    """Parse a base-10 integer with an optional sign.

    Unlike ``int()``, surrounding whitespace, underscores and non-ASCII
    digits are rejected. Raises ValueError on anything else.
    """
    if not _INTEGER.fullmatch(text):
        raise ValueError(f"invalid integer: {text!r}")
    return int(text)


def _scan_lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def read_lines(filename: str | PathLike[str]) -> list[str]:
    """Return the lines of a file without their line terminators."""
    text = Path(filename).read_text(encoding="utf-8", errors="replace")
    return _scan_lines(text)


def read_numbers(filename: str | PathLike[str]) -> list[int]:
    """Return one integer per line of a file."""
    return [parse_int(line) for line in read_lines(filename)]