from aocsolve.y2024_d10 import solve

EXAMPLE = """\
89010123
78121874
87430965
96549874
45678903
32019012
01329801
10456732
"""


def _transpose(text):
    rows = [line for line in text.splitlines() if line]
    return "\n".join("".join(column) for column in zip(*rows))


def test_example():
    assert solve(EXAMPLE) == (36, 81)


def test_single_trail_score():
    assert solve("0123\n1234\n8765\n9876\n")[0] == 1


def test_no_trailheads():
    assert solve("99\n99\n") == (0, 0)


def test_rating_never_below_score():
    score, rating = solve("0123\n1234\n8765\n9876\n")
    assert rating >= score


def test_transposed_map_gives_same_result():
    assert solve(_transpose(EXAMPLE)) == solve(EXAMPLE)