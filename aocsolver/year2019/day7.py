"""Chaining amplifiers for the greatest thruster signal."""

from __future__ import annotations

from itertools import permutations

from ..intcode import IntCodeComputer
from ..puzzle import Solution


def max_thruster_signal(program: list[int]) -> int:
    """The largest signal from five amplifiers run in series with phases 0 to 4."""
    best = 0
    for phases in permutations(range(5)):
        signal = 0
        for phase in phases:
            signal = IntCodeComputer(program).run_until_halt([phase, signal])[0]
        best = max(best, signal)
    return best


def max_feedback_signal(program: list[int]) -> int:
    """The largest signal from five amplifiers in a feedback loop with phases 5 to 9."""
    best = 0
    for phases in permutations(range(5, 10)):
        computers = [IntCodeComputer(program) for _ in phases]
        for computer, phase in zip(computers, phases):
            computer.run_with_input_until_halt([phase])

        signal = 0
        index = 0
        while True:
            computer = computers[index % len(computers)]
            if computer.halted:
                best = max(best, signal)
                break
            result = computer.run_with_input_until_halt([signal])
            if len(result) != 1:
                raise ValueError(f"expected exactly one output, got {len(result)}")
            signal = result[0]
            index += 1
    return best


class Day7(Solution):
    year = 2019
    day = 7

    def handle_input(self, text: str) -> None:
        program = [int(num) for num in text.split(",")]
        self.submit_part1(max_thruster_signal(program))
        self.submit_part2(max_feedback_signal(program))