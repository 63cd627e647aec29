import pytest

from aocsolve.y2024_d06 import solve

EXAMPLE = """....#.....
.........#
..........
..#.......
.......#..
..........
.#..^.....
........#.
#.........
......#...
"""


def test_example_answers():
    assert solve(EXAMPLE) == (41, 6)


def test_guard_leaving_at_once():
    assert solve("..^..\n") == (1, 0)


def test_visited_cells_do_not_exceed_open_cells():
    visited, traps = solve(EXAMPLE)
    open_cells = sum(char != "#" for char in EXAMPLE if char != "\n")
    assert visited <= open_cells
    assert traps < open_cells


def test_missing_guard_is_an_error():
    with pytest.raises(ValueError):
        solve("...\n.#.\n")


def test_trapped_guard_is_an_error():
    with pytest.raises(ValueError):
        solve(".#.\n#^#\n.#.\n")