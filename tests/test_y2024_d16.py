import pytest

from aocsolve.y2024_d16 import solve

LOOP = "#####\n#...#\n#S#E#\n#...#\n#####\n"


def _flip(text):
    return "\n".join(reversed([line for line in text.splitlines() if line]))


def _open_cells(text):
    return sum(char in ".SE" for char in text)


def test_turn_then_step():
    assert solve("####\n#.E#\n#S##\n####\n") == (2002, 3)


@pytest.mark.parametrize("gap", [0, 1, 4, 9])
def test_straight_corridor(gap):
    wall = "#" * (gap + 4)
    text = f"{wall}\n#S{'.' * gap}E#\n{wall}\n"
    cost, tiles = solve(text)
    assert tiles == _open_cells(text)
    assert cost == tiles - 1


def test_two_equal_routes_cover_every_tile():
    cost, tiles = solve(LOOP)
    assert tiles == _open_cells(LOOP)
    assert cost >= 3000


def test_vertical_flip_keeps_result():
    maze = "#######\n#...#E#\n#.#.#.#\n#S....#\n#######\n"
    assert solve(_flip(maze)) == solve(maze)
    assert solve(_flip(LOOP)) == solve(LOOP)


def test_unreachable_end_rejected():
    with pytest.raises(ValueError):
        solve("#####\n#S#E#\n#####\n")


def test_missing_start_rejected():
    with pytest.raises(ValueError):
        solve("#####\n#..E#\n#####\n")