"""Recovering calibration values from lines of text."""

from __future__ import annotations

from ..puzzle import Solution

_WORDS = ("one", "two", "three", "four", "five", "six", "seven", "eight", "nine")
_TOKENS = _WORDS + tuple("123456789")
_VALUES = {
    **{word: value for value, word in enumerate(_WORDS, start=1)},
    **{str(value): value for value in range(1, 10)},
}


def string_to_digit(text: str) -> int | None:
    """The digit a word or numeral names, or None."""
    return _VALUES.get(text)


def _digit_value(line: str) -> int:
    digits = [ch for ch in line if "0" <= ch <= "9"]
    if not digits:
        raise ValueError(f"no digit found in {line!r}")
    return int(digits[0] + digits[-1])


def _token_at(line: str, index: int) -> int:
    token = next(t for t in _TOKENS if line.startswith(t, index))
    value = string_to_digit(token)
    assert value is not None
    return value


def _spelled_value(line: str) -> int:
    firsts = [i for token in _TOKENS if (i := line.find(token)) != -1]
    if not firsts:
        raise ValueError(f"no digit found in {line!r}")
    lasts = [line.rfind(token) for token in _TOKENS]
    first = _token_at(line, min(firsts))
    last = _token_at(line, max(lasts))
    return 10 * first + last


class Day1(Solution):
    year = 2023
    day = 1

    def handle_input(self, text: str) -> None:
        lines = text.splitlines()
        self.submit_part1(sum(_digit_value(line) for line in lines))
        self.submit_part2(sum(_spelled_value(line) for line in lines))