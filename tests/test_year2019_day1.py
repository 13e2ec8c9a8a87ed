import pytest

from aocsolver.year2019.day1 import Day1, fuel, total_fuel


def test_fuel_example():
    assert fuel(1969) == 654


def test_total_fuel_example():
    assert total_fuel(100756) == 50346


def test_total_fuel_small_mass_is_zero():
    assert total_fuel(5) == 0


@pytest.mark.parametrize("mass", [12, 14, 1969, 100756, 54321])
def test_total_fuel_recurrence(mass):
    assert total_fuel(mass) == fuel(mass) + total_fuel(fuel(mass))
    assert total_fuel(mass) >= fuel(mass)


def test_handle_input_sums_lines():
    answer = Day1().run("12\n14\n1969\n")
    assert answer.part1 == str(fuel(12) + fuel(14) + fuel(1969))
    assert answer.part2 == str(total_fuel(12) + total_fuel(14) + total_fuel(1969))


def test_invalid_line_raises():
    with pytest.raises(ValueError):
        Day1().run("12\nabc")