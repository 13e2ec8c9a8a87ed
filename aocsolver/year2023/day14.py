"""Tilting a platform of rolling rocks and measuring the load on its north side."""

from __future__ import annotations

from collections import defaultdict

from ..grid import Grid
from ..puzzle import Solution
from ..vec import Direction, Vec2

SPIN_CYCLES = 1_000_000_000
_SPIN = (Direction.UP, Direction.LEFT, Direction.DOWN, Direction.RIGHT)


def tilt(grid: Grid, direction: Direction) -> Grid:
    """Roll every round rock 'O' as far as it goes in `direction`; walls '#' stay put."""
    walls = {pos for pos, ch in grid if ch == "#"}
    rocks = sorted((pos for pos, ch in grid if ch == "O"), key=lambda p: (p.y, p.x))
    # Rocks nearest the edge they roll towards move first, so none blocks itself.
    if direction in (Direction.DOWN, Direction.RIGHT):
        rocks.reverse()

    moved: dict[Vec2, None] = {}
    for rock in rocks:
        best = rock
        while True:
            candidate = best.move_dir(direction)
            if candidate in walls or candidate in moved or grid.not_in_bound(candidate):
                break
            best = candidate
        moved[best] = None

    objects = [(pos, "O") for pos in moved] + [(pos, ch) for pos, ch in grid if ch == "#"]
    return Grid(grid.width, grid.height, objects)


def calc_load(grid: Grid) -> int:
    """Each rock adds its distance from the south edge, counting its own row."""
    return sum(grid.height - pos.y for pos, ch in grid if ch == "O")


def _pair_differences(values: list[int]) -> list[int]:
    pairs = iter(values)
    return [b - a for a, b in zip(pairs, pairs)]


class Day14(Solution):
    year = 2023
    day = 14

    def handle_input(self, text: str) -> None:
        grid = Grid.from_string(text, lambda c: c != ".")
        self.submit_part1(calc_load(tilt(grid, Direction.UP)))

        cycles = 0
        history: dict[int, list[int]] = defaultdict(list)
        while True:
            for direction in _SPIN:
                grid = tilt(grid, direction)
            cycles += 1
            load = calc_load(grid)

            seen = history.get(load)
            if seen is not None and len(seen) >= 4:
                diffs = _pair_differences(seen)
                head = diffs[0]
                if all(diff == head for diff in diffs):
                    cycles += (SPIN_CYCLES - cycles) // head * head

            if cycles == SPIN_CYCLES:
                self.submit_part2(load)
                return

            history[load].append(cycles)