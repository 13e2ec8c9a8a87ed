"""A sparse character grid of objects at integer positions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterator

from .vec import Vec2

GridObject = tuple[Vec2, str]


def _as_vec2(pos: tuple[int, int]) -> Vec2:
    return pos if isinstance(pos, Vec2) else Vec2(*pos)


def _lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


@dataclass
class Grid:
    """A rectangle of known size holding the objects placed on it."""

    width: int
    height: int
    objects: list[GridObject] = field(default_factory=list)
    _index: dict[Vec2, str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self.objects = [(_as_vec2(pos), ch) for pos, ch in self.objects]
        self._reindex()

    def _reindex(self) -> None:
        self._index = {}
        for pos, ch in self.objects:
            self._index.setdefault(pos, ch)

    @classmethod
    def from_dimension(cls, width: int, height: int) -> Grid:
        return cls(width, height)

    @classmethod
    def from_string(cls, text: str, predicate: Callable[[str], bool]) -> Grid:
        """Read a grid from text, keeping the characters for which `predicate` holds."""
        lines = _lines(text)
        if not lines:
            raise ValueError("input does not have a first line")
        width = len(lines[0])
        if any(len(line) != width for line in lines):
            raise ValueError("all lines must be the same length")
        objects = [
            (Vec2(x, y), ch)
            for y, line in enumerate(lines)
            for x, ch in enumerate(line)
            if predicate(ch)
        ]
        return cls(width, len(lines), objects)

    def in_bound(self, point: tuple[int, int]) -> bool:
        x, y = point
        return 0 <= x < self.width and 0 <= y < self.height

    def not_in_bound(self, point: tuple[int, int]) -> bool:
        return not self.in_bound(point)

    def neighbours4(self, pos: tuple[int, int]) -> list[Vec2]:
        x, y = pos
        candidates = [Vec2(x, y - 1), Vec2(x - 1, y), Vec2(x + 1, y), Vec2(x, y + 1)]
        return [p for p in candidates if self.in_bound(p)]

    def neighbours8(self, pos: tuple[int, int]) -> list[Vec2]:
        """Return the eight surrounding points, dropping those past the right or bottom edge."""
        x, y = pos
        candidates = [
            Vec2(x + dx, y + dy)
            for dy in (-1, 0, 1)
            for dx in (-1, 0, 1)
            if (dx, dy) != (0, 0)
        ]
        return [p for p in candidates if p.x < self.width and p.y < self.height]

    def get_object(self, pos: tuple[int, int]) -> str | None:
        return self._index.get(_as_vec2(pos))

    def object_at(self, x: int, y: int) -> str | None:
        return self._index.get(Vec2(x, y))

    def x_range(self) -> range:
        return range(self.width)

    def y_range(self) -> range:
        return range(self.height)

    def __iter__(self) -> Iterator[GridObject]:
        return iter(self.objects)

    def __contains__(self, obj: object) -> bool:
        return obj in self.objects

    def remove(self, obj: GridObject) -> None:
        """Remove every occurrence of `obj`."""
        pos, ch = obj
        target = (_as_vec2(pos), ch)
        self.objects = [o for o in self.objects if o != target]
        self._reindex()

    def add(self, obj: GridObject) -> None:
        pos, ch = obj
        pos = _as_vec2(pos)
        self.objects.append((pos, ch))
        self._index.setdefault(pos, ch)

    def __str__(self) -> str:
        rows = (
            "".join(self.object_at(x, y) or "." for x in range(self.width))
            for y in range(self.height)
        )
        return "".join(row + "\n" for row in rows)