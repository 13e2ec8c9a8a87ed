import pytest

from aocsolver.year2023.day1 import Day1, string_to_digit

EXAMPLE = "1abc2\npqr3stu8vwx\na1b2c3d4e5f\ntreb7uchet"


def test_example_digits_only():
    answer = Day1().run(EXAMPLE)
    assert answer.part1 == "142"
    assert answer.part2 == answer.part1


def test_spelled_digits_count_in_part2():
    answer = Day1().run("two1nine")
    assert answer.part1 == "11"
    assert answer.part2 == "29"


@pytest.mark.parametrize(
    "word, numeral",
    [("one", "1"), ("two", "2"), ("three", "3"), ("four", "4"), ("five", "5"),
     ("six", "6"), ("seven", "7"), ("eight", "8"), ("nine", "9")],
)
def test_words_and_numerals_agree(word, numeral):
    assert string_to_digit(word) == string_to_digit(numeral) == int(numeral)


@pytest.mark.parametrize("text", ["zero", "0", "ten", ""])
def test_unknown_strings(text):
    assert string_to_digit(text) is None


def test_line_without_digits_raises():
    with pytest.raises(ValueError):
        Day1().run("abc")