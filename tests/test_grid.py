import pytest

from aocsolver.grid import Grid
from aocsolver.vec import Vec2


def test_from_string():
    grid = Grid.from_string("x....\n.....\n..y..\n.....\n....z", lambda c: c != ".")

    assert grid.width == 5
    assert grid.height == 5
    assert (Vec2(0, 0), "x") in grid.objects
    assert (Vec2(2, 2), "y") in grid.objects
    assert (Vec2(4, 4), "z") in grid.objects


def test_neighbours8():
    grid = Grid.from_dimension(100, 100)

    assert grid.neighbours8((50, 50)) == [
        Vec2(49, 49),
        Vec2(50, 49),
        Vec2(51, 49),
        Vec2(49, 50),
        Vec2(51, 50),
        Vec2(49, 51),
        Vec2(50, 51),
        Vec2(51, 51),
    ]

    assert grid.neighbours8((99, 99)) == [Vec2(98, 98), Vec2(99, 98), Vec2(98, 99)]


def test_neighbours4_at_corner():
    grid = Grid.from_dimension(10, 10)
    assert grid.neighbours4((0, 0)) == [Vec2(1, 0), Vec2(0, 1)]
    assert len(grid.neighbours4((5, 5))) == 4


def test_display_round_trip():
    text = "x....\n.....\n..y..\n.....\n....z"
    grid = Grid.from_string(text, lambda c: c != ".")
    assert str(grid) == text + "\n"


def test_lookup():
    grid = Grid.from_string("#.\n.#", lambda c: c == "#")
    assert grid.get_object(Vec2(0, 0)) == "#"
    assert grid.get_object((1, 1)) == "#"
    assert grid.object_at(1, 0) is None
    assert grid.object_at(5, 5) is None


def test_bounds():
    grid = Grid.from_dimension(3, 2)
    assert grid.in_bound(Vec2(2, 1))
    assert not grid.in_bound(Vec2(3, 1))
    assert not grid.in_bound(Vec2(-1, 0))
    assert grid.not_in_bound(Vec2(0, 2))
    assert list(grid.x_range()) == [0, 1, 2]
    assert list(grid.y_range()) == [0, 1]


def test_add_remove_contains():
    grid = Grid.from_dimension(4, 4)
    grid.add((Vec2(1, 2), "O"))
    assert (Vec2(1, 2), "O") in grid
    assert grid.get_object(Vec2(1, 2)) == "O"
    grid.remove((Vec2(1, 2), "O"))
    assert (Vec2(1, 2), "O") not in grid
    assert grid.get_object(Vec2(1, 2)) is None


def test_iteration_yields_objects():
    grid = Grid.from_string("ab\ncd", lambda c: c in "ad")
    assert sorted(ch for _, ch in grid) == ["a", "d"]


def test_crlf_lines():
    grid = Grid.from_string("#.\r\n.#\r\n", lambda c: c == "#")
    assert (grid.width, grid.height) == (2, 2)


def test_empty_input_rejected():
    with pytest.raises(ValueError):
        Grid.from_string("", lambda c: True)


def test_ragged_input_rejected():
    with pytest.raises(ValueError):
        Grid.from_string("...\n..", lambda c: True)