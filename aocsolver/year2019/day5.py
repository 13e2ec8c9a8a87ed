"""Running the diagnostic program of the thermal environment supervision terminal."""

from __future__ import annotations

from ..intcode import run_program
from ..puzzle import Solution


class Day5(Solution):
    year = 2019
    day = 5

    def handle_input(self, text: str) -> None:
        program = [int(num) for num in text.strip().split(",")]

        output = run_program(program, [1, 1])
        if not output:
            raise ValueError("program produced no output")
        self.submit_part1(output[-1])

        output = run_program(program, [5, 1])
        if not output:
            raise ValueError("program produced no output")
        self.submit_part2(output[0])