"""The shape shared by every daily solution."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from .download import Downloader


@dataclass
class Answer:
    """The answers submitted for the two parts of a puzzle, as text."""

    part1: str | None = None
    part2: str | None = None


class Solution(ABC):
    """A solution for one day; subclasses set `year` and `day` and implement handle_input."""

    year: ClassVar[int]
    day: ClassVar[int]

    def __init__(self) -> None:
        self.answer = Answer()

    @abstractmethod
    def handle_input(self, text: str) -> None:
        """Solve the puzzle for `text`, submitting answers as they are found."""

    def submit_part1(self, value: object) -> None:
        self.answer.part1 = str(value)

    def submit_part2(self, value: object) -> None:
        self.answer.part2 = str(value)

    def run(self, text: str) -> Answer:
        """Normalise line endings and surrounding whitespace, then solve."""
        self.handle_input(text.replace("\r\n", "\n").strip())
        return self.answer


def execute(solution: Solution, downloader: Downloader) -> Answer:
    """Get the input for `solution`'s day and run it."""
    return solution.run(downloader.day(solution.year, solution.day))