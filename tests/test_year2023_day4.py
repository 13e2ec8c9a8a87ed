import pytest

from aocsolver.year2023.day4 import Day4

EXAMPLE = """Card 1: 41 48 83 86 17 | 83 86  6 31 17  9 48 53
Card 2: 13 32 20 16 61 | 61 30 68 82 17 32 24 19
Card 3:  1 21 53 59 44 | 69 82 63 72 16 21 14  1
Card 4: 41 92 73 84 69 | 59 84 76 51 58  5 54 83
Card 5: 87 83 26 28 32 | 88 30 70 12 93 22 82 36
Card 6: 31 18 13 56 72 | 74 77 10 23 35 67 36 11"""


def test_example():
    answer = Day4().run(EXAMPLE)
    assert answer.part1 == "13"
    assert answer.part2 == "30"


def test_cards_without_wins_stay_single():
    text = "Card 1: 1 2 | 3 4\nCard 2: 5 6 | 7 8\nCard 3: 9 | 10"
    answer = Day4().run(text)
    assert answer.part1 == "0"
    assert answer.part2 == str(len(text.splitlines()))


def test_missing_separator_raises():
    with pytest.raises(ValueError):
        Day4().run("Card 1: 1 2 3 4")