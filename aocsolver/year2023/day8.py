"""Walking a network of left/right nodes."""

from __future__ import annotations

import math
from typing import Callable, Mapping

from ..puzzle import Solution


def count_steps(
    start: str,
    instructions: str,
    adjacency: Mapping[str, tuple[str, str]],
    finished: Callable[[str], bool],
) -> int:
    """Steps taken from `start`, repeating `instructions`, until `finished` holds."""
    if not instructions:
        raise ValueError("there must be at least one instruction")
    current = start
    steps = 0
    while True:
        instruction = instructions[steps % len(instructions)]
        try:
            left, right = adjacency[current]
        except KeyError:
            raise ValueError(f"{current} must exist in adjacency map") from None
        current = left if instruction == "L" else right
        steps += 1
        if finished(current):
            return steps


def _parse(text: str) -> tuple[str, dict[str, tuple[str, str]]]:
    instructions, sep, network = text.partition("\n\n")
    if not sep:
        raise ValueError("instructions must be followed by a blank line")
    adjacency: dict[str, tuple[str, str]] = {}
    for line in network.splitlines():
        node, sep, targets = line.partition(" = ")
        if not sep:
            raise ValueError(f"line must contain ' = ': {line!r}")
        left, sep, right = targets.lstrip("(").rstrip(")").partition(", ")
        if not sep:
            raise ValueError(f"targets must be separated by ', ': {line!r}")
        adjacency[node] = (left, right)
    return instructions, adjacency


class Day8(Solution):
    year = 2023
    day = 8

    def handle_input(self, text: str) -> None:
        instructions, adjacency = _parse(text)
        self.submit_part1(
            count_steps("AAA", instructions, adjacency, lambda node: node == "ZZZ")
        )

        starts = [node for node in adjacency if node.endswith("A")]
        if not starts:
            raise ValueError("there must be at least one starting node")
        self.submit_part2(
            math.lcm(
                *(
                    count_steps(start, instructions, adjacency, lambda n: n.endswith("Z"))
                    for start in starts
                )
            )
        )