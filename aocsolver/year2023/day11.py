"""Summing distances between galaxies in an expanding universe."""

from __future__ import annotations

from itertools import combinations

from ..grid import Grid
from ..puzzle import Solution
from ..vec import Vec2


def get_positions(text: str, distance: int) -> list[Vec2]:
    """Galaxy positions after every empty row and column is widened to `distance`."""
    grid = Grid.from_string(text, lambda c: c == "#")
    empty_columns = set(grid.x_range()) - {pos.x for pos, _ in grid}

    positions: list[Vec2] = []
    row = 0
    for line in text.splitlines():
        col = 0
        row_is_empty = True
        for x, ch in enumerate(line):
            col += distance if x in empty_columns else 1
            if ch == "#":
                row_is_empty = False
                positions.append(Vec2(col, row))
        row += distance if row_is_empty else 1
    return positions


def sum_of_distances(text: str, distance: int) -> int:
    """The sum of Manhattan distances between every pair of galaxies."""
    return sum(
        a.manhattan_distance(b) for a, b in combinations(get_positions(text, distance), 2)
    )


class Day11(Solution):
    year = 2023
    day = 11

    def handle_input(self, text: str) -> None:
        self.submit_part1(sum_of_distances(text, 2))
        self.submit_part2(sum_of_distances(text, 1_000_000))