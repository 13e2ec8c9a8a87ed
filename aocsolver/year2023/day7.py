"""Ranking hands of Camel Cards, with and without jokers."""

from __future__ import annotations

from dataclasses import dataclass

from ..puzzle import Solution

_TALLY_ORDER = "23456789TJQKA"
_ORDER_PART1 = "23456789TJQKA"
_ORDER_PART2 = "J23456789TQKA"
_JOKER = _TALLY_ORDER.index("J")

_SCORES = {
    (5,): 7,
    (1, 4): 6,
    (2, 3): 5,
    (1, 1, 3): 4,
    (1, 2, 2): 3,
    (1, 1, 1, 2): 2,
    (1, 1, 1, 1, 1): 1,
}


def _score_tally(tally: list[int]) -> int:
    shape = tuple(sorted(count for count in tally if count))
    try:
        return _SCORES[shape]
    except KeyError:
        raise ValueError(f"not a valid hand shape: {shape}") from None


def _card_values(cards: str, order: str) -> tuple[int, ...]:
    try:
        return tuple(order.index(card) for card in cards)
    except ValueError:
        raise ValueError(f"invalid card in hand {cards!r}") from None


@dataclass(frozen=True)
class Hand:
    """Five cards, written as a string such as "32T3K"."""

    cards: str

    def _tally(self) -> list[int]:
        tally = [0] * len(_TALLY_ORDER)
        for card in self.cards:
            index = _TALLY_ORDER.find(card)
            if index < 0:
                raise ValueError(f"invalid card {card!r}")
            tally[index] += 1
        return tally

    def score_part1(self) -> int:
        """The strength of the hand's type, from 1 (high card) to 7 (five of a kind)."""
        return _score_tally(self._tally())

    def score_part2(self) -> int:
        """The strength of the hand's type when jokers join the largest group."""
        tally = self._tally()
        jokers = tally[_JOKER]
        tally[_JOKER] = 0
        tally.sort()
        tally[-1] += jokers
        return _score_tally(tally)

    def sort_key_part1(self) -> tuple[int, tuple[int, ...]]:
        return self.score_part1(), _card_values(self.cards, _ORDER_PART1)

    def sort_key_part2(self) -> tuple[int, tuple[int, ...]]:
        return self.score_part2(), _card_values(self.cards, _ORDER_PART2)


def _winnings(hands: list[tuple[Hand, int]]) -> int:
    return sum(rank * bid for rank, (_, bid) in enumerate(hands, start=1))


class Day7(Solution):
    year = 2023
    day = 7

    def handle_input(self, text: str) -> None:
        hands: list[tuple[Hand, int]] = []
        for line in text.splitlines():
            cards, sep, bid = line.partition(" ")
            if not sep:
                raise ValueError(f"line must hold a hand and a bid: {line!r}")
            hands.append((Hand(cards), int(bid)))

        hands.sort(key=lambda entry: entry[0].sort_key_part1())
        self.submit_part1(_winnings(hands))

        hands.sort(key=lambda entry: entry[0].sort_key_part2())
        self.submit_part2(_winnings(hands))