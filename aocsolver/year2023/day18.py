"""Measuring the lagoon dug out along a trench plan."""

from __future__ import annotations

from itertools import pairwise
from typing import Sequence

from ..puzzle import Solution
from ..vec import Direction, Vec2

_LETTERS = {
    "U": Direction.UP,
    "D": Direction.DOWN,
    "L": Direction.LEFT,
    "R": Direction.RIGHT,
}

_HEX_DIRECTIONS = {
    0: Direction.RIGHT,
    1: Direction.DOWN,
    2: Direction.LEFT,
    3: Direction.UP,
}


def _edges(points: Sequence[Vec2]):
    return pairwise([*points, points[0]]) if points else iter(())


def shoelace(points: Sequence[Vec2]) -> int:
    """The area of the polygon through `points`, by the shoelace formula."""
    total = sum(a.x * b.y - b.x * a.y for a, b in _edges(points))
    return abs(total) // 2


def solve_points(points: Sequence[Vec2]) -> int:
    """Tiles inside or on the boundary of the polygon through `points`."""
    boundary = sum(a.manhattan_distance(b) for a, b in _edges(points))
    return shoelace(points) + boundary // 2 + 1


def solve_part1(text: str) -> int:
    """Lagoon size from the direction letters and distances."""
    pos = Vec2.origin()
    points: list[Vec2] = []
    for line in text.splitlines():
        parts = line.split(" ")
        if len(parts) < 2:
            raise ValueError(f"line must hold a direction and a distance: {line!r}")
        try:
            direction = _LETTERS[parts[0]]
        except KeyError:
            raise ValueError(f"invalid direction {parts[0]!r}") from None
        pos = pos.move_dir(direction, int(parts[1]))
        points.append(pos)
    return solve_points(points)


def solve_part2(text: str) -> int:
    """Lagoon size from the instructions hidden in the colour codes."""
    pos = Vec2.origin()
    points = [pos]
    for line in text.splitlines():
        code = line.split(" ")[-1]
        if not (code.startswith("(#") and code.endswith(")")):
            raise ValueError(f"invalid colour code {code!r}")
        try:
            value = int(code[2:-1], 16)
        except ValueError:
            raise ValueError(f"must be valid hex: {code!r}") from None
        try:
            direction = _HEX_DIRECTIONS[value % 16]
        except KeyError:
            raise ValueError(f"invalid direction in {code!r}") from None
        pos = pos.move_dir(direction, value // 16)
        points.append(pos)
    points.pop()
    return solve_points(points)


class Day18(Solution):
    year = 2023
    day = 18

    def handle_input(self, text: str) -> None:
        self.submit_part1(solve_part1(text))
        self.submit_part2(solve_part2(text))