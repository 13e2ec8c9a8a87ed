"""Solutions for 2023 Advent of Code puzzles: days 1 to 19, 22 and 23."""