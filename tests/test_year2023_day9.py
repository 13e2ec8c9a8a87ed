import pytest

from aocsolver.year2023.day9 import Day9, differences

EXAMPLE = "0 3 6 9 12 15\n1 3 6 10 15 21\n10 13 16 21 30 45"


def test_example():
    answer = Day9().run(EXAMPLE)
    assert answer.part1 == "114"
    assert answer.part2 == "2"


def test_constant_sequence():
    answer = Day9().run("5 5 5")
    assert answer.part1 == "5"
    assert answer.part2 == "5"


def test_differences_of_constant_are_zero():
    assert differences([4, 4, 4]) == [0, 0]


@pytest.mark.parametrize("series", [[1, 2], [3, 1, 4, 1, 5], [0, 0, 0, 0, 0, 0]])
def test_differences_length(series):
    assert len(differences(series)) == len(series) - 1


def test_lines_add_up():
    lines = EXAMPLE.splitlines()
    total = Day9().run(EXAMPLE)
    parts = [Day9().run(line) for line in lines]
    assert int(total.part1) == sum(int(p.part1) for p in parts)
    assert int(total.part2) == sum(int(p.part2) for p in parts)


def test_single_value_raises():
    with pytest.raises(ValueError):
        Day9().run("7")