from aocsolver.intcode import IntCodeComputer
from aocsolver.year2019.day2 import Day2

PROGRAM = "1,0,0,0,99,19690720"


def test_part1_uses_noun_12_verb_2():
    answer = Day2().run(PROGRAM)
    assert answer.part1 == "2"


def test_part2_reproduces_target():
    answer = Day2().run(PROGRAM)
    noun, verb = divmod(int(answer.part2), 100)
    computer = IntCodeComputer([1, 0, 0, 0, 99, 19690720])
    computer.write(1, noun)
    computer.write(2, verb)
    computer.run_until_halt([])
    assert computer.read(0) == 19690720


def test_no_match_leaves_part2_unanswered():
    answer = Day2().run("99")
    assert answer.part1 == "99"
    assert answer.part2 is None