import pytest

from aocsolver.vec import Vec2
from aocsolver.year2023.day23 import compress, longest_path, parse_graph, solve

EXAMPLE = """#.#####################
#.......#########...###
#######.#########.#.###
###.....#.>.>.###.#.###
###v#####.#v#.###.#.###
###.>...#.#.#.....#...#
###v###.#.#.#########.#
###...#.#.#.......#...#
#####.#.#.#######.#.###
#.....#.#.#.......#...#
#.#####.#.#.#########v#
#.#...#...#...###...>.#
#.#.#v#######v###.###v#
#...#.>.#...>.>.#.###.#
#####v#.#.###v#.#.###.#
#.....#...#...#.#.#...#
#.#########.###.#.#.###
#...###...#...#...#.###
###.###.#.###v#####v###
#...#...#.#.>.>.#.>.###
#.###.###.#.###.#.#v###
#.....###...###...#...#
#####################.#"""


def test_example():
    assert solve(EXAMPLE) == (94, 154)


def test_parse_straight_corridor():
    graph, start, end = parse_graph("#.#\n#.#\n#.#", False)
    assert start == Vec2(1, 0)
    assert end == Vec2(1, 2)
    assert graph[Vec2(1, 1)] == [(Vec2(1, 2), 1), (Vec2(1, 0), 1)]
    assert longest_path(graph, start, end) == 2


def test_slope_allows_one_direction():
    graph, _, _ = parse_graph("#.#\n#v#\n#.#", False)
    assert graph[Vec2(1, 1)] == [(Vec2(1, 2), 1)]


def test_slope_climbed_in_part_two():
    graph, _, _ = parse_graph("#.#\n#v#\n#.#", True)
    assert sorted(graph[Vec2(1, 1)]) == [(Vec2(1, 0), 1), (Vec2(1, 2), 1)]


def test_compress_merges_corridor():
    graph, start, end = parse_graph("#.#\n#.#\n#.#", True)
    compress(graph)
    assert graph == {
        Vec2(1, 0): [(Vec2(1, 2), 2)],
        Vec2(1, 2): [(Vec2(1, 0), 2)],
    }
    assert longest_path(graph, start, end) == 2


def test_missing_start_raises():
    with pytest.raises(ValueError):
        parse_graph("###\n#.#\n#.#", False)