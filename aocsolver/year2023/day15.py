"""The holiday hash and the lens-box initialisation sequence."""

from __future__ import annotations

from ..puzzle import Solution

BOX_COUNT = 256


def holiday_hash(text: str) -> int:
    """Hash a string to a box number between 0 and 255."""
    current = 0
    for ch in text:
        current = (current + ord(ch)) * 17 % BOX_COUNT
    return current


def solve(text: str) -> int:
    """The sum of the hashes of every comma-separated step."""
    return sum(holiday_hash(step) for step in text.split(","))


def solve_part2(text: str) -> int:
    """The focusing power of the lenses after running every step."""
    boxes: list[dict[str, int]] = [{} for _ in range(BOX_COUNT)]
    for step in text.split(","):
        if "-" in step:
            label = step.partition("-")[0]
            boxes[holiday_hash(label)].pop(label, None)
        elif "=" in step:
            label, _, focal = step.partition("=")
            try:
                length = int(focal)
            except ValueError:
                raise ValueError(f"focal length must be a number: {step!r}") from None
            boxes[holiday_hash(label)][label] = length
        else:
            raise ValueError(f"no = or - in step {step!r}")

    return sum(
        box_number * slot * length
        for box_number, box in enumerate(boxes, start=1)
        for slot, length in enumerate(box.values(), start=1)
    )


class Day15(Solution):
    year = 2023
    day = 15

    def handle_input(self, text: str) -> None:
        self.submit_part1(solve(text))
        self.submit_part2(solve_part2(text))