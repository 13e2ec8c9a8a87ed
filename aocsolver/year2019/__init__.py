"""Solutions for 2019 Advent of Code puzzles: days 1, 2, 4, 5, 6, 7, 8 and 9."""