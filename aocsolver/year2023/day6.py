"""Counting the ways to win boat races."""

from __future__ import annotations

import math

from ..puzzle import Solution
from ..strings import nums


def ways_to_win(max_time: int, max_dist: int) -> int:
    """Whole charge times between the roots of t * (max_time - t) = max_dist."""
    time = float(max_time)
    disc = time * time - 4.0 * float(max_dist)
    if disc < 0:
        return 0
    root = math.sqrt(disc)
    upper = (time + root) / 2.0
    lower = (time - root) / 2.0
    return max(0, int(math.ceil(upper) - math.ceil(lower)))


def _joined(line: str) -> int:
    _, sep, rest = line.partition(":")
    if not sep:
        raise ValueError(f"line must contain ':': {line!r}")
    return int(rest.replace(" ", ""))


class Day6(Solution):
    year = 2023
    day = 6

    def handle_input(self, text: str) -> None:
        lines = text.splitlines()
        if len(lines) < 2:
            raise ValueError("input must contain 2 lines")
        times, dists = lines[0], lines[1]

        self.submit_part1(
            math.prod(ways_to_win(t, d) for t, d in zip(nums(times), nums(dists)))
        )
        self.submit_part2(ways_to_win(_joined(times), _joined(dists)))