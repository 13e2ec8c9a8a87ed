import pytest

from aocsolver.year2023.day12 import Day12, State, count_arrangements, run

PART1_CASES = [
    ("???.### 1,1,3", 1),
    (".??..??...?##. 1,1,3", 4),
    ("?#?#?#?#?#?#?#? 1,3,1,6", 1),
    ("????.#...#... 4,1,1", 1),
    ("????.######..#####. 1,6,5", 4),
    ("?###???????? 3,2,1", 10),
]

PART2_CASES = [
    ("???.### 1,1,3", 1),
    (".??..??...?##. 1,1,3", 16384),
    ("?#?#?#?#?#?#?#? 1,3,1,6", 1),
    ("????.#...#... 4,1,1", 16),
    ("????.######..#####. 1,6,5", 2500),
    ("?###???????? 3,2,1", 506250),
]


@pytest.mark.parametrize("line, expected", PART1_CASES)
def test_example_part_1(line, expected):
    assert run(line, 0) == expected


@pytest.mark.parametrize("line, expected", PART2_CASES)
def test_example_part_2(line, expected):
    assert run(line, 4) == expected


def test_solution_sums_lines():
    text = "\n".join(line for line, _ in PART1_CASES)
    answer = Day12().run(text)
    assert answer.part1 == str(sum(expected for _, expected in PART1_CASES))
    assert answer.part2 == str(sum(expected for _, expected in PART2_CASES))


def test_count_arrangements_with_open_group():
    assert count_arrangements([State.BAD], 1, [2]) == 1
    assert count_arrangements([State.GOOD], 1, [2]) == 0
    assert count_arrangements([State.UNKNOWN, State.UNKNOWN], None, [1]) == 2


def test_line_without_groups_raises():
    with pytest.raises(ValueError):
        run("???.###", 0)