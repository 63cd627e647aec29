import pytest

from aocsolve.y2024_d18 import shortest_path, solve


def test_open_grid_is_manhattan():
    assert shortest_path(set(), 5) == 8


def test_blocked():
    assert shortest_path({(1, 0), (0, 1)}, 3) is None


def test_solve_small():
    text = "1,0\n1,1\n1,2\n"
    steps, index = solve(text, size=3, first=1)
    assert steps == shortest_path({(1, 0)}, 3)
    assert index == 2


def test_cut_index_invariant():
    pts = [(1, 0), (2, 2), (1, 1), (0, 2), (1, 2), (2, 0)]
    text = "\n".join(f"{x},{y}" for x, y in pts)
    _, index = solve(text, size=3, first=1)
    assert shortest_path(pts[:index], 3) is not None
    assert shortest_path(pts[: index + 1], 3) is None


def test_never_cut():
    with pytest.raises(ValueError):
        solve("1,0\n", size=3, first=0)