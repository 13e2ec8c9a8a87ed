"""Finding the path of least heat loss for a crucible that must turn."""

from __future__ import annotations

import heapq

from ..grid import Grid
from ..puzzle import Solution
from ..vec import Direction, Vec2


def find_shortest_path(text: str, min_travel: int, max_travel: int) -> int:
    """Least heat lost reaching the bottom-right corner from the top-left.

    The crucible moves between `min_travel` and `max_travel` tiles straight,
    then turns left or right.
    """
    if min_travel > max_travel:
        raise ValueError("min_travel must not exceed max_travel")
    grid = Grid.from_string(text, lambda _: True)
    end = Vec2(grid.width - 1, grid.height - 1)
    origin = Vec2.origin()

    best: dict[tuple[Vec2, Direction], int] = {}
    heap: list[tuple[int, Direction, Vec2]] = [
        (0, Direction.RIGHT, origin),
        (0, Direction.DOWN, origin),
    ]
    while heap:
        heat, last_dir, pos = heapq.heappop(heap)
        known = best.get((pos, last_dir))
        if known is not None and known < heat:
            continue
        for new_dir in (last_dir.turn_left(), last_dir.turn_right()):
            new_pos = pos
            total = heat
            for offset in range(1, max_travel + 1):
                new_pos = new_pos.move_dir(new_dir)
                if not grid.in_bound(new_pos):
                    break
                total += int(grid.get_object(new_pos) or "")
                if offset < min_travel:
                    continue
                key = (new_pos, new_dir)
                previous = best.get(key)
                if previous is None or total < previous:
                    best[key] = total
                    heapq.heappush(heap, (total, new_dir, new_pos))

    arrivals = [heat for (pos, _), heat in best.items() if pos == end]
    if not arrivals:
        raise ValueError("the end cannot be reached")
    return min(arrivals)


class Day17(Solution):
    year = 2023
    day = 17

    def handle_input(self, text: str) -> None:
        self.submit_part1(find_shortest_path(text, 1, 3))
        self.submit_part2(find_shortest_path(text, 4, 10))