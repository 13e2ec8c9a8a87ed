"""Sorting machine parts through chains of workflow rules."""

from __future__ import annotations

from dataclasses import dataclass
from math import prod

from ..puzzle import Solution
from ..strings import nums

_CATEGORIES = ("x", "m", "a", "s")
_FULL_RANGE = range(1, 4001)

Part = tuple[int, int, int, int]
PartRanges = tuple[range, range, range, range]
Workflows = dict[str, list[tuple["Condition", str]]]


@dataclass(frozen=True)
class Condition:
    """A rule test such as ``a<2006``; with no comparison it always matches."""

    category: str | None = None
    comparison: str | None = None
    value: int = 0

    def __post_init__(self) -> None:
        if self.comparison is None:
            return
        if self.comparison not in ("<", ">"):
            raise ValueError(f"invalid comparison {self.comparison!r}")
        if self.category not in _CATEGORIES:
            raise ValueError(f"invalid identifier {self.category!r}")

    def _index(self) -> int:
        return _CATEGORIES.index(self.category)

    def matches(self, part: Part) -> bool:
        """Whether a part with ratings (x, m, a, s) passes this test."""
        if self.comparison is None:
            return True
        rating = part[self._index()]
        return rating < self.value if self.comparison == "<" else rating > self.value

    def split(self, ranges: PartRanges) -> tuple[PartRanges, PartRanges]:
        """Split rating ranges into the part that passes and the part that fails."""
        if self.comparison is None:
            raise ValueError("an unconditional rule does not split ranges")
        index = self._index()
        current = ranges[index]
        if self.value not in current:
            raise ValueError(f"{self.value} lies outside {current}")
        if self.comparison == "<":
            good = range(current.start, self.value)
            bad = range(self.value, current.stop)
        else:
            good = range(self.value + 1, current.stop)
            bad = range(current.start, self.value + 1)

        def replaced(new: range) -> PartRanges:
            items = list(ranges)
            items[index] = new
            return tuple(items)  # type: ignore[return-value]

        return replaced(good), replaced(bad)


def _parse_condition(text: str) -> Condition:
    for comparison in ("<", ">"):
        category, sep, value = text.partition(comparison)
        if sep:
            return Condition(category, comparison, int(value))
    raise ValueError(f"invalid condition {text!r}")


def _parse_workflows(text: str) -> Workflows:
    workflows: Workflows = {}
    for line in text.splitlines():
        name, sep, rest = line.partition("{")
        if not sep or not rest.endswith("}"):
            raise ValueError(f"invalid workflow {line!r}")
        rules: list[tuple[Condition, str]] = []
        for instruction in rest[:-1].split(","):
            test, sep, destination = instruction.partition(":")
            if sep:
                if "<" in test or ">" in test:
                    rules.append((_parse_condition(test), destination))
            else:
                rules.append((Condition(), instruction))
        workflows[name] = rules
    return workflows


def _parse_parts(text: str) -> list[Part]:
    parts: list[Part] = []
    for line in text.splitlines():
        ratings = list(nums(line))
        if len(ratings) != 4:
            raise ValueError(f"invalid part {line!r}")
        parts.append(tuple(ratings))  # type: ignore[arg-type]
    return parts


def _rules(workflows: Workflows, name: str) -> list[tuple[Condition, str]]:
    try:
        return workflows[name]
    except KeyError:
        raise ValueError(f"unknown workflow {name!r}") from None


def _accepted(part: Part, workflows: Workflows) -> bool:
    current = "in"
    while current not in ("A", "R"):
        for condition, destination in _rules(workflows, current):
            if condition.matches(part):
                current = destination
                break
        else:
            raise ValueError(f"no rule of workflow {current!r} matches {part}")
    return current == "A"


def _count_accepted(ranges: PartRanges, step: str, workflows: Workflows) -> int:
    if step == "A":
        return prod(len(r) for r in ranges)
    if step == "R":
        return 0
    total = 0
    current = ranges
    for condition, destination in _rules(workflows, step):
        if condition.comparison is None:
            total += _count_accepted(current, destination, workflows)
        else:
            good, current = condition.split(current)
            total += _count_accepted(good, destination, workflows)
    return total


def solve(text: str) -> tuple[int, int]:
    """Rating sum of accepted parts, and the number of accepted rating combinations."""
    rules_text, sep, parts_text = text.partition("\n\n")
    if not sep:
        raise ValueError("must have a double linebreak")
    workflows = _parse_workflows(rules_text)
    parts = _parse_parts(parts_text)

    rating_sum = sum(sum(part) for part in parts if _accepted(part, workflows))
    combinations = _count_accepted((_FULL_RANGE,) * 4, "in", workflows)
    return rating_sum, combinations


class Day19(Solution):
    year = 2023
    day = 19

    def handle_input(self, text: str) -> None:
        part1, part2 = solve(text)
        self.submit_part1(part1)
        self.submit_part2(part2)