import pytest

from aocsolver.year2019.day8 import HEIGHT, WIDTH, Day8, render

SIZE = WIDTH * HEIGHT


def test_render_example():
    assert render([int(c) for c in "0222112222120000"], 2, 2) == " █\n█ \n"


def test_render_front_layer_wins():
    digits = [1] * 6 + [0] * 6
    assert render(digits, 3, 2) == ("█" * 3 + "\n") * 2


def test_render_has_one_line_per_row():
    digits = [0, 1, 2] * 8
    assert render(digits, 4, 3).count("\n") == 3


def test_render_skips_transparent_pixels():
    assert render([2, 2, 2, 2], 2, 2) == "\n\n"


def test_render_rejects_partial_layer():
    with pytest.raises(ValueError):
        render([0, 1, 2], 2, 2)


def test_layer_with_fewest_zeros_is_scored():
    layer0 = "0" * SIZE
    layer1 = "1" * 3 + "2" * 4 + "0" * (SIZE - 7)
    answer = Day8().run(layer0 + layer1)
    assert answer.part1 == "12"
    assert answer.part2 == "ZPZUB"


def test_rejects_incomplete_layer():
    with pytest.raises(ValueError):
        Day8().run("0" * (SIZE + 1))


def test_rejects_unknown_digit():
    with pytest.raises(ValueError):
        Day8().run("3" * SIZE)