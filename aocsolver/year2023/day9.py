"""Extrapolating sequences by repeated differences."""

from __future__ import annotations

from itertools import pairwise

from ..puzzle import Solution


def differences(series: list[int]) -> list[int]:
    """The differences between neighbouring values."""
    return [b - a for a, b in pairwise(series)]


def _extrapolate(values: list[int]) -> tuple[int, int]:
    """Return the values before the first and after the last."""
    if len(values) < 2:
        raise ValueError("a sequence needs at least two values")
    rows = [values]
    current = values
    while True:
        current = differences(current)
        rows.append(current)
        if all(v == 0 for v in current):
            break
    if not rows[-1]:
        raise ValueError("sequence does not reduce to zeros")

    first = rows[-1][0]
    last = rows[-1][-1]
    for row in reversed(rows):
        last += row[-1]
        first = row[0] - first
    return first, last


class Day9(Solution):
    year = 2023
    day = 9

    def handle_input(self, text: str) -> None:
        before = 0
        after = 0
        for line in text.splitlines():
            first, last = _extrapolate([int(n) for n in line.split()])
            before += first
            after += last
        self.submit_part1(after)
        self.submit_part2(before)