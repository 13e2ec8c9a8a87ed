"""Two- and three-dimensional integer vectors and grid directions."""

from __future__ import annotations

from enum import IntEnum
from typing import NamedTuple


class Direction(IntEnum):
    """A direction on a grid where down is the positive y axis."""

    RIGHT = 0
    DOWN = 1
    LEFT = 2
    UP = 3

    def turn_left(self) -> Direction:
        """Return the direction a quarter turn counter-clockwise."""
        return _LEFT_OF[self]

    def turn_right(self) -> Direction:
        """Return the direction a quarter turn clockwise."""
        return self.turn_left().turn_left().turn_left()

    @classmethod
    def all(cls) -> tuple[Direction, ...]:
        """Return every direction, in the order down, left, right, up."""
        return (cls.DOWN, cls.LEFT, cls.RIGHT, cls.UP)


_LEFT_OF = {
    Direction.RIGHT: Direction.UP,
    Direction.DOWN: Direction.RIGHT,
    Direction.LEFT: Direction.DOWN,
    Direction.UP: Direction.LEFT,
}

_STEP = {
    Direction.RIGHT: (1, 0),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.UP: (0, -1),
}


class Vec2(NamedTuple):
    """A point on a two-dimensional integer grid; compares equal to a plain (x, y) tuple."""

    x: int
    y: int

    @classmethod
    def origin(cls) -> Vec2:
        return cls(0, 0)

    def manhattan_distance(self, other: tuple[int, int]) -> int:
        ox, oy = other
        return abs(self.x - ox) + abs(self.y - oy)

    def move_dir(self, direction: Direction, distance: int = 1) -> Vec2:
        """Return this point moved `distance` steps in `direction`; down is positive y."""
        dx, dy = _STEP[direction]
        return Vec2(self.x + dx * distance, self.y + dy * distance)

    def mirror_between_x(self, axis: tuple[int, int]) -> Vec2:
        x1, x2 = axis
        return Vec2(x1 + x2 - self.x, self.y)

    def mirror_between_y(self, axis: tuple[int, int]) -> Vec2:
        y1, y2 = axis
        return Vec2(self.x, y1 + y2 - self.y)

    def mirror_x(self, x_axis: int) -> Vec2:
        """Mirror over an axis lying at the value of `x_axis`."""
        return self.mirror_between_x((x_axis, x_axis))

    def mirror_y(self, y_axis: int) -> Vec2:
        """Mirror over an axis lying at the value of `y_axis`."""
        return self.mirror_between_y((y_axis, y_axis))

    def adjust_to_grid_size(self, width: int, height: int) -> Vec2:
        """Map this point into a grid of the given size that repeats in every direction."""
        return Vec2(self.x % width, self.y % height)

    def __str__(self) -> str:
        return f"{self.x},{self.y}"


class Vec3(NamedTuple):
    """A point in three-dimensional integer space."""

    x: int
    y: int
    z: int