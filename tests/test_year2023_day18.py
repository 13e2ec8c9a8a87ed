import pytest

from aocsolver.vec import Vec2
from aocsolver.year2023.day18 import (
    Day18,
    shoelace,
    solve_part1,
    solve_part2,
    solve_points,
)

STEPS = [
    ("R", 6, "70c710"),
    ("D", 5, "0dc571"),
    ("L", 2, "5713f0"),
    ("D", 2, "d2c081"),
    ("R", 2, "59c680"),
    ("D", 2, "411b91"),
    ("L", 5, "8ceee2"),
    ("U", 2, "caa173"),
    ("L", 1, "1b58a2"),
    ("U", 2, "caa171"),
    ("R", 2, "7807d2"),
    ("U", 3, "a77fa3"),
    ("L", 2, "015232"),
    ("U", 2, "7a21e3"),
]
EXAMPLE = "\n".join(f"{d} {n} (#{colour})" for d, n, colour in STEPS)

POLYGON = [Vec2(x, y) for x, y in [(3, 4), (5, 11), (12, 8), (9, 5), (5, 6)]]


def _plan(*moves):
    return "\n".join(f"{d} {n} _" for d, n in moves)


def test_shoelace():
    assert shoelace(POLYGON) == 30


def test_shoelace_ignores_orientation():
    assert shoelace(list(reversed(POLYGON))) == shoelace(POLYGON)


def test_sanity():
    assert solve_part1(_plan(("U", 3), ("R", 5), ("D", 3), ("L", 5))) == 24


def test_example():
    assert solve_part1(EXAMPLE) == 62
    assert solve_part2(EXAMPLE) == 952408144115


def test_solve_points_matches_part1():
    points = [Vec2(0, -3), Vec2(5, -3), Vec2(5, 0), Vec2(0, 0)]
    assert solve_points(points) == 24


def test_day_submits_both_parts():
    answer = Day18().run(EXAMPLE)
    assert (answer.part1, answer.part2) == ("62", "952408144115")


def test_invalid_letter_raises():
    with pytest.raises(ValueError):
        solve_part1("X 3 (#000000)")


def test_invalid_hex_direction_raises():
    with pytest.raises(ValueError):
        solve_part2("R 1 (#000014)")


def test_missing_colour_code_raises():
    with pytest.raises(ValueError):
        solve_part2("R 1 000010")