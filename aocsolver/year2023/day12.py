"""Counting arrangements of damaged springs that match their group records."""

from __future__ import annotations

from enum import Enum
from functools import lru_cache
from typing import Iterable

from ..puzzle import Solution
from ..strings import nums


class State(Enum):
    GOOD = "."
    BAD = "#"
    UNKNOWN = "?"


def _state_of(ch: str) -> State:
    if ch == "#":
        return State.BAD
    if ch == "?":
        return State.UNKNOWN
    return State.GOOD


def count_arrangements(
    states: Iterable[State], group_size: int | None, groups: Iterable[int]
) -> int:
    """Ways to fill in unknown springs so the damaged groups match `groups`.

    `group_size` is the length of a damaged group already under way, or None.
    """
    record = tuple(states)
    sizes = tuple(groups)
    end = len(record)

    @lru_cache(maxsize=None)
    def count(index: int, size: int | None, group: int) -> int:
        remaining = len(sizes) - group
        if index == end:
            if size is not None:
                return int(remaining == 1 and size == sizes[group])
            return int(remaining == 0)

        head = record[index]
        if head is State.GOOD:
            if size is None:
                return count(index + 1, None, group)
            if remaining == 0 or size != sizes[group]:
                return 0
            return count(index + 1, None, group + 1)
        if head is State.BAD:
            if size is None:
                return count(index + 1, 1, group)
            if remaining == 0 or size > sizes[group]:
                return 0
            return count(index + 1, size + 1, group)
        if size is None:
            return count(index + 1, 1, group) + count(index + 1, None, group)
        if remaining == 0:
            return 0
        bad = count(index + 1, size + 1, group)
        good = count(index + 1, None, group + 1) if size == sizes[group] else 0
        return bad + good

    return count(0, group_size, 0)


def run(text: str, expand: int) -> int:
    """Sum the arrangements of every line, each unfolded into `expand + 1` copies."""
    total = 0
    for line in text.splitlines():
        record, sep, numbers = line.partition(" ")
        if not sep:
            raise ValueError(f"line must hold a record and its groups: {line!r}")
        groups = list(nums(numbers))
        unfolded = "?".join([record] * (expand + 1))
        total += count_arrangements(
            (_state_of(ch) for ch in unfolded), None, groups * (expand + 1)
        )
    return total


class Day12(Solution):
    year = 2023
    day = 12

    def handle_input(self, text: str) -> None:
        self.submit_part1(run(text, 0))
        self.submit_part2(run(text, 4))