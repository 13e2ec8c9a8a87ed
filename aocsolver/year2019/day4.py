"""Counting possible passwords in a range."""

from __future__ import annotations

from collections import Counter
from itertools import pairwise

from ..puzzle import Solution


def is_valid(code: int, exact_pair: bool) -> bool:
    """Digits never decrease and some digit repeats (exactly twice if `exact_pair`)."""
    digits = str(code)
    if any(b < a for a, b in pairwise(digits)):
        return False
    counts = Counter(digits).values()
    if exact_pair:
        return any(count == 2 for count in counts)
    return any(count >= 2 for count in counts)


class Day4(Solution):
    year = 2019
    day = 4

    def handle_input(self, text: str) -> None:
        start_text, sep, end_text = text.partition("-")
        if not sep:
            raise ValueError("expected a range of the form start-end")
        start, end = int(start_text.strip()), int(end_text.strip())
        codes = range(start, end + 1)
        self.submit_part1(sum(is_valid(code, False) for code in codes))
        self.submit_part2(sum(is_valid(code, True) for code in codes))