"""Restoring the gravity assist program."""

from __future__ import annotations

from ..intcode import IntCodeComputer
from ..puzzle import Solution
from ..strings import nums

TARGET = 19690720


class Day2(Solution):
    year = 2019
    day = 2

    def handle_input(self, text: str) -> None:
        initial_state = list(nums(text))

        first = IntCodeComputer(initial_state)
        first.write(1, 12)
        first.write(2, 2)
        first.run_until_halt([])
        self.submit_part1(first.read(0))

        for noun in range(100):
            for verb in range(100):
                computer = IntCodeComputer(initial_state)
                computer.write(1, noun)
                computer.write(2, verb)
                computer.run_until_halt([])
                if computer.read(0) == TARGET:
                    self.submit_part2(100 * noun + verb)