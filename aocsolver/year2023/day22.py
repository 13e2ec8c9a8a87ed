"""Letting sand bricks fall and finding which can be taken away safely."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, replace
from itertools import product
from typing import Iterator

from ..puzzle import Solution
from ..vec import Vec3


@dataclass(frozen=True)
class Brick:
    """A brick filling every cell from `start` to `end`, both included."""

    id: int
    start: Vec3
    end: Vec3

    def intersects(self, other: Brick) -> bool:
        """Whether the two bricks share at least one cell."""
        for a_start, a_end, b_start, b_end in zip(self.start, self.end, other.start, other.end):
            if a_start > a_end or b_start > b_end:
                return False
            if max(a_start, b_start) > min(a_end, b_end):
                return False
        return True

    def _cells(self) -> Iterator[tuple[int, int, int]]:
        return product(
            range(self.start.x, self.end.x + 1),
            range(self.start.y, self.end.y + 1),
            range(self.start.z, self.end.z + 1),
        )

    def _lowered(self) -> Brick:
        return replace(
            self,
            start=self.start._replace(z=self.start.z - 1),
            end=self.end._replace(z=self.end.z - 1),
        )


def _parse_point(text: str) -> Vec3:
    values = [int(n) for n in text.split(",")]
    if len(values) != 3:
        raise ValueError(f"a point needs three coordinates: {text!r}")
    return Vec3(*values)


def _parse(text: str) -> list[Brick]:
    bricks = []
    for index, line in enumerate(text.splitlines(), start=1):
        start, sep, end = line.partition("~")
        if not sep:
            raise ValueError(f"line has to contain ~: {line!r}")
        bricks.append(Brick(index, _parse_point(start), _parse_point(end)))
    return bricks


def settle(bricks: list[Brick]) -> int:
    """Drop every brick as far as it goes, in place; return how many bricks moved."""
    occupied: dict[tuple[int, int, int], set[int]] = defaultdict(set)
    for brick in bricks:
        if min(brick.start.z, brick.end.z) < 1:
            raise ValueError(f"brick {brick.id} lies below the ground")
        for cell in brick._cells():
            occupied[cell].add(brick.id)

    def blocked(brick: Brick) -> bool:
        return any(occupied.get(cell, set()) - {brick.id} for cell in brick._cells())

    moved: set[int] = set()
    changes = True
    while changes:
        changes = False
        for index, current in enumerate(bricks):
            while current.start.z != 1 and current.end.z != 1:
                lowered = current._lowered()
                if blocked(lowered):
                    break
                for cell in current._cells():
                    occupied[cell].discard(current.id)
                for cell in lowered._cells():
                    occupied[cell].add(lowered.id)
                current = lowered
                bricks[index] = current
                moved.add(current.id)
                changes = True
    return len(moved)


def solve(text: str) -> tuple[int, int]:
    """Bricks that can be removed without others falling, and the total that would fall."""
    bricks = _parse(text)
    settle(bricks)

    safe = 0
    total = 0
    for removed in bricks:
        rest = [brick for brick in bricks if brick.id != removed.id]
        fallen = settle(rest)
        total += fallen
        if fallen == 0:
            safe += 1
    return safe, total


class Day22(Solution):
    year = 2023
    day = 22

    def handle_input(self, text: str) -> None:
        safe, total = solve(text)
        self.submit_part1(safe)
        self.submit_part2(total)