"""Finding lines of reflection in patterns of ash and rocks."""

from __future__ import annotations

from typing import Callable

from ..grid import Grid
from ..puzzle import Solution
from ..vec import Vec2


def _mismatches(grid: Grid, mirrored: list[Vec2], axis: Callable[[Vec2], int]) -> int:
    """Cells that differ between the grid and its reflection, counted on both sides."""
    mirrored_set = set(mirrored)
    touched = {axis(point) for point in mirrored}
    missing = {point for point in mirrored if grid.get_object(point) is None}
    unmatched = {
        pos for pos, _ in grid if axis(pos) in touched and pos not in mirrored_set
    }
    return len(missing) + len(unmatched)


def find_fold(grid: Grid, error_margin: int) -> tuple[int | None, int | None]:
    """Find a vertical fold (x) or, failing that, a horizontal fold (y).

    A fold is accepted when exactly `error_margin` cells disagree with their reflection.
    The fold index is the column or row just before the line of reflection.
    """
    for mirror_x in range(grid.width - 1):
        mirrored = [
            Vec2(mirror_x - (pos.x - mirror_x - 1), pos.y)
            for pos, _ in grid
            if pos.x > mirror_x
        ]
        mirrored = [p for p in mirrored if p.x >= 0 and p.y >= 0]
        if _mismatches(grid, mirrored, lambda p: p.x) == error_margin:
            return mirror_x, None

    for mirror_y in range(grid.height - 1):
        mirrored = [
            Vec2(pos.x, mirror_y - (pos.y - mirror_y - 1))
            for pos, _ in grid
            if pos.y > mirror_y
        ]
        mirrored = [p for p in mirrored if p.x >= 0 and p.y >= 0]
        if _mismatches(grid, mirrored, lambda p: p.y) == error_margin:
            return None, mirror_y

    return None, None


def _summarise(fold: tuple[int | None, int | None]) -> int:
    x, y = fold
    if x is not None and y is None:
        return x + 1
    if x is None and y is not None:
        return 100 * (y + 1)
    raise ValueError("there must be exactly one line of reflection")


def solve_puzzle(text: str) -> tuple[int, int]:
    """Summaries of every pattern, without and with a single smudge."""
    part1 = 0
    part2 = 0
    for pattern in text.split("\n\n"):
        grid = Grid.from_string(pattern, lambda c: c == "#")
        part1 += _summarise(find_fold(grid, 0))
        part2 += _summarise(find_fold(grid, 1))
    return part1, part2


class Day13(Solution):
    year = 2023
    day = 13

    def handle_input(self, text: str) -> None:
        part1, part2 = solve_puzzle(text)
        self.submit_part1(part1)
        self.submit_part2(part2)