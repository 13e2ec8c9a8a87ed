"""Scoring scratchcards and counting won copies."""

from __future__ import annotations

from ..puzzle import Solution
from ..strings import nums


class Day4(Solution):
    year = 2023
    day = 4

    def handle_input(self, text: str) -> None:
        wins: list[int] = []
        for line in text.splitlines():
            _, colon, numbers = line.partition(":")
            if not colon:
                raise ValueError(f"line must contain ':': {line!r}")
            winning, bar, mine = numbers.partition(" | ")
            if not bar:
                raise ValueError(f"line must contain '|': {line!r}")
            wins.append(len(set(nums(winning)) & set(nums(mine))))

        self.submit_part1(sum(2 ** (count - 1) for count in wins if count))

        copies = [1] * len(wins)
        last = len(wins) - 1
        for card, count in enumerate(wins):
            for won in range(card + 1, min(card + count, last) + 1):
                copies[won] += copies[card]
        self.submit_part2(sum(copies))