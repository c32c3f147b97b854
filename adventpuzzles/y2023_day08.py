"""Walking a network of left/right node pairs."""

from __future__ import annotations

import argparse
import math
import re
from dataclasses import dataclass, field
from itertools import cycle
from pathlib import Path
from typing import Sequence

_ELEMENT = re.compile(r"([A-Z1-9]+) = \(([A-Z1-9]+), ([A-Z1-9]+)\)")


@dataclass
class Network:
    instructions: str = ""
    pairs: dict[str, tuple[str, str]] = field(default_factory=dict)


def parse_network(text: str) -> Network:
    lines = text.splitlines()
    if not lines:
        return Network()

    pairs = {}
    for line in lines[2:]:
        match = _ELEMENT.search(line)
        if match is None:
            raise ValueError(f"malformed network line: {line!r}")
        node, left, right = match.groups()
        pairs[node] = (left, right)
    return Network(lines[0], pairs)


def network_cycle(network: Network, start: str) -> int:
    """Steps from ``start`` until reaching a node whose name ends in Z."""
    node = start
    if node.endswith("Z"):
        return 0
    if not network.instructions:
        raise ValueError("network has no instructions")

    for steps, instruction in enumerate(cycle(network.instructions), start=1):
        left, right = network.pairs[node]
        node = left if instruction == "L" else right
        if node.endswith("Z"):
            return steps
    raise AssertionError("unreachable")


def part01(network: Network) -> int:
    return network_cycle(network, "AAA")


def part02(network: Network) -> int:
    cycles = [network_cycle(network, node) for node in network.pairs if node.endswith("A")]
    if not cycles:
        raise ValueError("network has no starting nodes")
    return math.lcm(*cycles)


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Count steps through the network.")
    parser.add_argument("input", nargs="?", default="input.txt")
    args = parser.parse_args(argv)

    network = parse_network(Path(args.input).read_text(encoding="utf-8"))
    print(part01(network))
    print(part02(network))