"""Finding the longest hike through a forest of paths and slopes."""

from __future__ import annotations

from ..grid import Grid
from ..puzzle import Solution
from ..vec import Direction, Vec2

Graph = dict[Vec2, list[tuple[Vec2, int]]]

_SLOPES = {
    ">": (Direction.RIGHT,),
    "<": (Direction.LEFT,),
    "^": (Direction.UP,),
    "v": (Direction.DOWN,),
    "#": (),
}


def _find_opening(grid: Grid, y: int, name: str) -> Vec2:
    openings = [Vec2(x, y) for x in range(grid.width) if grid.object_at(x, y) is None]
    if len(openings) != 1:
        raise ValueError(f"must have exactly one {name} location, found {len(openings)}")
    return openings[0]


def parse_graph(text: str, climb_slopes: bool) -> tuple[Graph, Vec2, Vec2]:
    """Build the graph of steps between open tiles, with its start and end.

    When `climb_slopes` is set, slopes can be walked in every direction.
    """
    predicate = (lambda c: c == "#") if climb_slopes else (lambda c: c != ".")
    grid = Grid.from_string(text, predicate)
    start = _find_opening(grid, 0, "start")
    end = _find_opening(grid, grid.height - 1, "end")

    graph: Graph = {}
    for y in range(grid.height):
        for x in range(grid.width):
            tile = grid.object_at(x, y)
            if tile is None:
                directions = Direction.all()
            elif tile in _SLOPES:
                directions = _SLOPES[tile]
            else:
                raise ValueError(f"unexpected tile {tile!r} at {x},{y}")
            current = Vec2(x, y)
            for direction in directions:
                nxt = current.move_dir(direction)
                if grid.get_object(nxt) != "#" and grid.in_bound(nxt):
                    graph.setdefault(current, []).append((nxt, 1))
    return graph, start, end


def compress(graph: Graph) -> None:
    """Replace every node with exactly two neighbours by one longer edge, in place."""
    corridors = [node for node, edges in graph.items() if len(edges) == 2]
    for corridor in corridors:
        edges = graph.get(corridor)
        if edges is None:
            continue
        if len(edges) != 2:
            raise ValueError(f"corridor {corridor} no longer has two neighbours")
        (start, start_weight), (end, end_weight) = edges
        weight = start_weight + end_weight
        for node, other in ((start, end), (end, start)):
            if node not in graph:
                raise ValueError(f"node {node} is missing from the graph")
            kept = [(n, w) for n, w in graph[node] if n != corridor]
            kept.append((other, weight))
            graph[node] = kept
        del graph[corridor]


def longest_path(graph: Graph, start: Vec2, end: Vec2) -> int:
    """The longest walk from `start` to `end` that never visits a node twice."""
    stack: list[tuple[Vec2, frozenset[Vec2], int]] = [(start, frozenset(), 0)]
    best = 0
    while stack:
        current, path, distance = stack.pop()
        if current == end:
            best = max(best, distance)
        try:
            edges = graph[current]
        except KeyError:
            raise ValueError(f"{current} does not have an entry in the graph") from None
        for destination, weight in edges:
            if destination not in path:
                stack.append((destination, path | {destination}, distance + weight))
    return best


def solve(text: str) -> tuple[int, int]:
    """Longest hikes when slopes must be followed and when they can be climbed."""
    graph, start, end = parse_graph(text, False)
    part1 = longest_path(graph, start, end)

    graph, start, end = parse_graph(text, True)
    compress(graph)
    part2 = longest_path(graph, start, end)
    return part1, part2


class Day23(Solution):
    year = 2023
    day = 23

    def handle_input(self, text: str) -> None:
        part1, part2 = solve(text)
        self.submit_part1(part1)
        self.submit_part2(part2)