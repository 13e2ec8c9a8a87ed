"""Checking games of cubes drawn from a bag."""

from __future__ import annotations

from ..puzzle import Solution

LIMITS = {"red": 12, "green": 13, "blue": 14}


class Day2(Solution):
    year = 2023
    day = 2

    def handle_input(self, text: str) -> None:
        possible_ids = 0
        total_power = 0
        for line in text.splitlines():
            game, sep, cubes = line.partition(": ")
            if not sep:
                raise ValueError(f"game id must be followed by a colon: {line!r}")
            _, sep, game_id = game.partition(" ")
            if not sep:
                raise ValueError(f"game must be followed by its id: {line!r}")

            maxima = dict.fromkeys(LIMITS, 0)
            possible = True
            for round_ in cubes.strip().split(";"):
                for cube_set in round_.split(","):
                    count_text, sep, colour = cube_set.strip().partition(" ")
                    if not sep:
                        raise ValueError(f"invalid cube set {cube_set!r}")
                    colour = colour.strip()
                    count = int(count_text.strip())
                    if colour in LIMITS:
                        if count > LIMITS[colour]:
                            possible = False
                        maxima[colour] = max(maxima[colour], count)

            if possible:
                possible_ids += int(game_id)
            total_power += maxima["red"] * maxima["green"] * maxima["blue"]

        self.submit_part1(possible_ids)
        self.submit_part2(total_power)