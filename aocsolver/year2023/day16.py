"""Tracing beams of light through mirrors and splitters."""

from __future__ import annotations

from ..grid import Grid
from ..puzzle import Solution
from ..vec import Direction, Vec2

_BACKSLASH = {
    Direction.RIGHT: Direction.DOWN,
    Direction.DOWN: Direction.RIGHT,
    Direction.LEFT: Direction.UP,
    Direction.UP: Direction.LEFT,
}

_SLASH = {
    Direction.RIGHT: Direction.UP,
    Direction.DOWN: Direction.LEFT,
    Direction.LEFT: Direction.DOWN,
    Direction.UP: Direction.RIGHT,
}

_HORIZONTAL = (Direction.LEFT, Direction.RIGHT)
_VERTICAL = (Direction.UP, Direction.DOWN)


def _parse(text: str) -> Grid:
    return Grid.from_string(text, lambda c: c != ".")


def _outgoing(tile: str | None, direction: Direction) -> tuple[Direction, ...]:
    if tile == "\\":
        return (_BACKSLASH[direction],)
    if tile == "/":
        return (_SLASH[direction],)
    if tile == "|" and direction in _HORIZONTAL:
        return (Direction.UP, Direction.DOWN)
    if tile == "-" and direction in _VERTICAL:
        return (Direction.LEFT, Direction.RIGHT)
    return (direction,)


def _energize(grid: Grid, start: Vec2, direction: Direction) -> int:
    stack = [(start, direction)]
    seen: set[tuple[Vec2, Direction]] = set()
    while stack:
        state = stack.pop()
        if state in seen:
            continue
        seen.add(state)
        pos, heading = state
        for new_dir in _outgoing(grid.get_object(pos), heading):
            new_pos = pos.move_dir(new_dir)
            if grid.in_bound(new_pos):
                stack.append((new_pos, new_dir))
    return len({pos for pos, _ in seen})


def energize(text: str, start: tuple[int, int], direction: Direction) -> int:
    """Number of tiles a beam entering at `start` heading `direction` passes through."""
    return _energize(_parse(text), Vec2(*start), direction)


def solve_p2(text: str) -> int:
    """The most tiles energized by a beam entering from any edge tile."""
    grid = _parse(text)
    last_x = grid.width - 1
    last_y = grid.height - 1
    starts = [
        *((Vec2(x, 0), Direction.DOWN) for x in range(grid.width)),
        *((Vec2(x, last_y), Direction.UP) for x in range(grid.width)),
        *((Vec2(0, y), Direction.RIGHT) for y in range(grid.height)),
        *((Vec2(last_x, y), Direction.LEFT) for y in range(grid.height)),
    ]
    return max(_energize(grid, pos, heading) for pos, heading in starts)


class Day16(Solution):
    year = 2023
    day = 16

    def handle_input(self, text: str) -> None:
        self.submit_part1(energize(text, Vec2.origin(), Direction.RIGHT))
        self.submit_part2(solve_p2(text))