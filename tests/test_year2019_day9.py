import pytest

from aocsolver.year2019.day9 import Day9


def test_quine_last_output():
    answer = Day9().run("109,1,204,-1,1001,100,1,100,1008,100,16,101,1006,101,0,99")
    assert answer.part1 == "99"
    assert answer.part2 == "99"


def test_large_number_output():
    answer = Day9().run("104,1125899906842624,99")
    assert answer.part1 == "1125899906842624"
    assert answer.part2 == "1125899906842624"


def test_echo_uses_mode_inputs():
    answer = Day9().run("3,0,4,0,99")
    assert answer.part1 == "1"
    assert answer.part2 == "2"


def test_no_output_raises():
    with pytest.raises(ValueError):
        Day9().run("99")