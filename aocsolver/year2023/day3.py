"""Finding part numbers and gears in an engine schematic."""

from __future__ import annotations

from collections import defaultdict

from ..grid import Grid
from ..puzzle import Solution


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


class Day3(Solution):
    year = 2023
    day = 3

    def handle_input(self, text: str) -> None:
        grid = Grid.from_string(text, lambda c: c != ".")
        gears: dict[tuple[int, int], list[int]] = defaultdict(list)

        total = 0
        digits = ""
        valid = False
        star: tuple[int, int] | None = None
        # A number still being read at the end of a line carries on into the next one.
        for y, line in enumerate(text.splitlines()):
            for x, ch in enumerate(line):
                if _is_digit(ch):
                    digits += ch
                    for nx, ny in grid.neighbours8((x, y)):
                        neighbour = grid.get_object((nx, ny))
                        if neighbour is None or neighbour == "." or _is_digit(neighbour):
                            continue
                        if neighbour == "*":
                            star = (ny, nx)
                        valid = True
                elif digits:
                    if valid:
                        number = int(digits)
                        total += number
                        if star is not None:
                            gears[star].append(number)
                        valid = False
                    star = None
                    digits = ""

        self.submit_part1(total)

        ratio_sum = 0
        for numbers in gears.values():
            if len(numbers) > 2:
                raise ValueError(f"a gear touches {len(numbers)} numbers")
            if len(numbers) == 2:
                ratio_sum += numbers[0] * numbers[1]
        self.submit_part2(ratio_sum)