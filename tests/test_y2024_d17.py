import pytest

from aocsolve.y2024_d17 import find_quine, run, solve

QUINE = [0, 3, 5, 4, 3, 0]


def test_example_output():
    assert run([729, 0, 0], [0, 1, 5, 4, 3, 0]) == [4, 6, 3, 5, 6, 3, 5, 2, 1, 0]


def test_quine_value():
    assert find_quine(QUINE) == 117440


def test_quine_reproduces_program():
    a = find_quine(QUINE)
    assert run([a, 0, 0], QUINE) == QUINE
    assert all(run([b, 0, 0], QUINE) != QUINE for b in range(0, a, 997))


def test_output_digits_are_octal():
    out = run([123456, 0, 0], [0, 1, 5, 4, 3, 0])
    assert out and all(0 <= d < 8 for d in out)


def test_bxl_and_out():
    assert run([0, 0, 0], [1, 7, 5, 5]) == [7]


def test_invalid_combo():
    with pytest.raises(ValueError):
        run([1, 0, 0], [5, 7])


def test_solve():
    text = "Register A: 2024\nRegister B: 0\nRegister C: 0\n\nProgram: 0,3,5,4,3,0\n"
    out, a = solve(text)
    assert out == ",".join(map(str, run([2024, 0, 0], QUINE)))
    assert a == find_quine(QUINE)


def test_solve_needs_separator():
    with pytest.raises(ValueError):
        solve("Register A: 1\nProgram: 0,3")