"""Compacting a disk map of files and free space."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Sequence

EMPTY = -1


def parse_input(text: str) -> list[int]:
    """Expand the dense disk map into one entry per block; free blocks are EMPTY."""
    blocks: list[int] = []
    file_id = 0
    free = False
    for char in text:
        count = ord(char) - ord("0")
        if count > 0:
            blocks.extend([EMPTY if free else file_id] * count)
        if not free:
            file_id += 1
        free = not free
    return blocks


def compact(blocks: list[int]) -> None:
    """Move file blocks one at a time from the end into the leftmost free block."""
    slot, file = 0, len(blocks) - 1
    while True:
        while slot < len(blocks) and blocks[slot] != EMPTY:
            slot += 1
        while file >= 0 and blocks[file] == EMPTY:
            file -= 1
        if slot >= file:
            return
        blocks[slot], blocks[file] = blocks[file], blocks[slot]
        slot += 1
        file -= 1


def compact_without_fragmentation(blocks: list[int]) -> None:
    """Move whole files, last first, into the leftmost free span that fits."""
    file_end = len(blocks) - 1
    while True:
        while file_end >= 0 and blocks[file_end] == EMPTY:
            file_end -= 1
        if file_end < 0:
            return

        file_id = blocks[file_end]
        file = file_end - 1
        while file >= 0 and blocks[file] == file_id:
            file -= 1
        file_len = file_end - file

        slot = 0
        while slot < file:
            while slot < len(blocks) and blocks[slot] != EMPTY:
                slot += 1
            if slot >= file:
                break
            slot_end = slot + 1
            while slot_end < len(blocks) and blocks[slot_end] == EMPTY:
                slot_end += 1
            if slot_end - slot >= file_len:
                blocks[slot : slot + file_len] = [file_id] * file_len
                blocks[file + 1 : file_end + 1] = [EMPTY] * file_len
                break
            slot = slot_end

        file_end = file


def checksum(blocks: Sequence[int]) -> int:
    return sum(i * file_id for i, file_id in enumerate(blocks) if file_id != EMPTY)


def part01(blocks: Sequence[int]) -> int:
    disk = list(blocks)
    compact(disk)
    return checksum(disk)


def part02(blocks: Sequence[int]) -> int:
    disk = list(blocks)
    compact_without_fragmentation(disk)
    return checksum(disk)


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Compact the amphipod disk.")
    parser.add_argument("input", nargs="?", default="input.txt")
    args = parser.parse_args(argv)

    blocks = parse_input(Path(args.input).read_text(encoding="utf-8"))
    print(part01(blocks))
    print(part02(blocks))