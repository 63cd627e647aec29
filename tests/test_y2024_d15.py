import pytest

from aocsolve.y2024_d15 import solve

SMALL = """\
########
#..O.O.#
##@.O..#
#...O..#
#.#.O..#
#...O..#
#......#
########

<^^>>>vv<v>>v<<
"""

COLUMN = "#####\n#...#\n#.O.#\n#.@.#\n#####"
ROW = "######\n#@O..#\n######"


def _with_moves(layout, moves):
    return f"{layout}\n\n{moves}\n"


def test_small_example_part_one():
    assert solve(SMALL)[0] == 2028


def test_push_up_moves_box_one_row():
    base = solve(_with_moves(COLUMN, ""))
    moved = solve(_with_moves(COLUMN, "^"))
    assert (moved[0] - base[0], moved[1] - base[1]) == (-100, -100)


def test_box_against_wall_stays():
    assert solve(_with_moves(COLUMN, "^^")) == solve(_with_moves(COLUMN, "^"))


def test_push_right_in_both_widths():
    base = solve(_with_moves(ROW, ""))
    moved = solve(_with_moves(ROW, ">>"))
    assert (moved[0] - base[0], moved[1] - base[1]) == (2, 1)


def test_walking_into_wall_changes_nothing():
    assert solve(_with_moves(ROW, "<<")) == solve(_with_moves(ROW, ""))


def test_enclosed_robot_cannot_move():
    layout = "#####\n#O#O#\n##@##\n#####"
    assert solve(_with_moves(layout, "^v<>^")) == solve(_with_moves(layout, ""))


def test_missing_separator_rejected():
    with pytest.raises(ValueError):
        solve(COLUMN)


def test_unknown_move_rejected():
    with pytest.raises(ValueError):
        solve(_with_moves(COLUMN, "^x"))