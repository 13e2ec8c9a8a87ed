"""Running the BOOST program in test and sensor-boost modes."""

from __future__ import annotations

from ..intcode import IntCodeComputer
from ..puzzle import Solution


class Day9(Solution):
    year = 2019
    day = 9

    def handle_input(self, text: str) -> None:
        program = [int(num) for num in text.split(",")]

        output = IntCodeComputer(program).run_until_halt([1])
        if not output:
            raise ValueError("program produced no output")
        self.submit_part1(output[-1])

        output = IntCodeComputer(program).run_until_halt([2])
        if not output:
            raise ValueError("program produced no output")
        self.submit_part2(output[-1])