"""Following seeds through a chain of almanac mappings."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import count

from ..puzzle import Solution
from ..strings import nums


@dataclass(frozen=True)
class _Range:
    source: int
    destination: int
    length: int


@dataclass
class _Mapping:
    source: str
    target: str
    ranges: list[_Range]

    def forward(self, value: int) -> int:
        for r in self.ranges:
            if r.source <= value < r.source + r.length:
                return value + r.destination - r.source
        return value

    def backward(self, value: int) -> int:
        for r in self.ranges:
            if r.destination <= value < r.destination + r.length:
                return value + r.source - r.destination
        return value


def _parse_mapping(group: str) -> _Mapping:
    header, *lines = group.splitlines()
    if not header.endswith(" map:"):
        raise ValueError(f"invalid mapping header {header!r}")
    source, sep, target = header[: -len(" map:")].partition("-to-")
    if not sep:
        raise ValueError(f"invalid mapping header {header!r}")
    ranges = []
    for line in lines:
        values = list(nums(line))
        if len(values) < 3:
            raise ValueError("mapping must have 3 numbers")
        destination, start, length = values[:3]
        ranges.append(_Range(start, destination, length))
    return _Mapping(source, target, ranges)


def _find(mappings: list[_Mapping], **criteria: str) -> _Mapping:
    for mapping in mappings:
        if all(getattr(mapping, key) == value for key, value in criteria.items()):
            return mapping
    raise ValueError(f"no mapping found for {criteria}")


class Day5(Solution):
    year = 2023
    day = 5

    def handle_input(self, text: str) -> None:
        first, *groups = text.split("\n\n")
        _, sep, seeds_text = first.partition(": ")
        if not sep:
            raise ValueError("first line must contain a colon ':'")
        seeds = list(nums(seeds_text))
        numbers = iter(seeds)
        seed_ranges = [range(start, start + length) for start, length in zip(numbers, numbers)]
        mappings = [_parse_mapping(group) for group in groups]

        locations = []
        for seed in seeds:
            value, kind = seed, "seed"
            while kind != "location":
                mapping = _find(mappings, source=kind)
                value = mapping.forward(value)
                kind = mapping.target
            locations.append(value)
        if not locations:
            raise ValueError("there must be at least one seed")
        self.submit_part1(min(locations))

        if not seed_ranges:
            raise ValueError("there must be at least one seed range")
        for location in count():
            value, kind = location, "location"
            while kind != "seed":
                mapping = _find(mappings, target=kind)
                value = mapping.backward(value)
                kind = mapping.source
            if any(value in seed_range for seed_range in seed_ranges):
                self.submit_part2(location)
                return