"""Following a loop of pipes and counting the tiles it encloses."""

from __future__ import annotations

from collections import deque

from ..grid import Grid
from ..puzzle import Solution
from ..vec import Direction, Vec2

_CONNECTS_RIGHT = frozenset("-LF")
_CONNECTS_UP = frozenset("|LJ")
_CONNECTS_DOWN = frozenset("|F7")
_CONNECTS_LEFT = frozenset("-J7")

_PAIRS = {
    Direction.RIGHT: (_CONNECTS_RIGHT, _CONNECTS_LEFT),
    Direction.DOWN: (_CONNECTS_DOWN, _CONNECTS_UP),
    Direction.LEFT: (_CONNECTS_LEFT, _CONNECTS_RIGHT),
    Direction.UP: (_CONNECTS_UP, _CONNECTS_DOWN),
}

_DIRECTIONS = (Direction.UP, Direction.LEFT, Direction.RIGHT, Direction.DOWN)

_SHAPES = {
    "7": "___\n##_\n_#_",
    "J": "_#_\n##_\n___",
    "L": "_#_\n_##\n___",
    "F": "___\n_##\n_#_",
    "|": "_#_\n_#_\n_#_",
    "-": "___\n###\n___",
}


def _shape_cells(shape: str) -> dict[tuple[int, int], str]:
    return {
        (dx, dy): ch
        for dy, row in enumerate(shape.split("\n"))
        for dx, ch in enumerate(row)
    }


_SHAPE_CELLS = {tile: _shape_cells(shape) for tile, shape in _SHAPES.items()}


def is_connected(source: str, target: str, direction: Direction) -> bool:
    """Whether a pipe `source` joins the pipe `target` lying in `direction` from it."""
    outgoing, incoming = _PAIRS[direction]
    return source in outgoing and target in incoming


class Day10(Solution):
    year = 2023
    day = 10

    def handle_input(self, text: str) -> None:
        grid = Grid.from_string(text, lambda c: c != ".")
        starts = [pos for pos, ch in grid if ch == "S"]
        if not starts:
            raise ValueError("no start position 'S' found")

        distances: dict[Vec2, int] = {pos: 0 for pos in starts}
        queue = deque((pos, 0) for pos in starts)

        # The start tile is taken to be a vertical pipe.
        grid = Grid.from_string(text.replace("S", "|"), lambda c: c != ".")

        while queue:
            current, dist = queue.popleft()
            here = grid.get_object(current)
            if here is None:
                continue
            for direction in _DIRECTIONS:
                nxt = current.move_dir(direction)
                there = grid.get_object(nxt)
                if there is None or not is_connected(here, there, direction):
                    continue
                known = distances.get(nxt)
                if known is None or known > dist + 1:
                    distances[nxt] = dist + 1
                    queue.append((nxt, dist + 1))

        self.submit_part1(max(distances.values()))

        expanded: dict[Vec2, str] = {}
        for point in distances:
            tile = grid.get_object(point)
            cells = _SHAPE_CELLS.get(tile) if tile is not None else None
            if cells is None:
                raise ValueError(f"tile {tile!r} at {point} has no shape")
            for (dx, dy), ch in cells.items():
                expanded[Vec2(point.x * 3 + dx, point.y * 3 + dy)] = ch

        big_width = grid.width * 3
        big_height = grid.height * 3
        origin = Vec2.origin()
        seen = {origin}
        stack = [origin]
        empty_count = 1
        while stack:
            current = stack.pop()
            for direction in _DIRECTIONS:
                nxt = current.move_dir(direction)
                if not (0 <= nxt.x < big_width and 0 <= nxt.y < big_height):
                    continue
                if nxt in seen:
                    continue
                cell = expanded.get(nxt, ".")
                if cell == "#":
                    continue
                if cell == ".":
                    empty_count += 1
                seen.add(nxt)
                stack.append(nxt)

        if empty_count % 9:
            raise ValueError("outside area does not cover whole tiles")

        self.submit_part2(grid.height * grid.width - len(distances) - empty_count // 9)