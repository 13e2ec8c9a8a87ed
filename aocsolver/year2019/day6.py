"""Counting orbits and orbital transfers in a map of the local system."""

from __future__ import annotations

from collections import defaultdict, deque

from ..puzzle import Solution

CENTER = "COM"


def _parse(text: str) -> list[tuple[str, str]]:
    orbits: list[tuple[str, str]] = []
    for line in text.splitlines():
        center, sep, satellite = line.partition(")")
        if not sep:
            raise ValueError(f"line must contain ')': {line!r}")
        orbits.append((center, satellite))
    return orbits


def _orbit_depths(orbits: list[tuple[str, str]]) -> dict[str, int]:
    """Number of direct and indirect orbits of every object, keyed by name."""
    children: dict[str, list[str]] = defaultdict(list)
    for center, satellite in orbits:
        children[center].append(satellite)

    depths = {CENTER: 0}
    queue = deque([CENTER])
    while queue:
        current = queue.popleft()
        for satellite in children[current]:
            if satellite not in depths:
                depths[satellite] = depths[current] + 1
                queue.append(satellite)

    missing = {satellite for _, satellite in orbits} - depths.keys()
    if missing:
        raise ValueError(f"objects not connected to {CENTER}: {sorted(missing)}")
    return depths


def _distance(orbits: list[tuple[str, str]], start: str, target: str) -> int | None:
    """Edges between two objects, or None when they are not connected."""
    adjacency: dict[str, list[str]] = defaultdict(list)
    for center, satellite in orbits:
        adjacency[center].append(satellite)
        adjacency[satellite].append(center)
    if start not in adjacency:
        raise ValueError(f"{start} must have adjacent objects")

    seen = {start}
    queue = deque([(start, 0)])
    while queue:
        current, dist = queue.popleft()
        if current == target:
            return dist
        for neighbour in adjacency[current]:
            if neighbour not in seen:
                seen.add(neighbour)
                queue.append((neighbour, dist + 1))
    return None


class Day6(Solution):
    year = 2019
    day = 6

    def handle_input(self, text: str) -> None:
        orbits = _parse(text)
        self.submit_part1(sum(_orbit_depths(orbits).values()))

        distance = _distance(orbits, "YOU", "SAN")
        if distance is not None:
            self.submit_part2(distance - 2)