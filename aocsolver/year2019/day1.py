"""Fuel needed for the modules of a spacecraft."""

from __future__ import annotations

from ..puzzle import Solution


def fuel(mass: int) -> int:
    """Fuel for a mass: a third of it, rounded towards zero, minus two."""
    third = abs(mass) // 3
    return (third if mass >= 0 else -third) - 2


def total_fuel(mass: int) -> int:
    """Fuel for a mass including the fuel for the fuel itself."""
    total = 0
    needed = fuel(mass)
    while needed > 0:
        total += needed
        needed = fuel(needed)
    return total


class Day1(Solution):
    year = 2019
    day = 1

    def handle_input(self, text: str) -> None:
        masses = [int(line) for line in text.splitlines()]
        self.submit_part1(sum(fuel(mass) for mass in masses))
        self.submit_part2(sum(total_fuel(mass) for mass in masses))