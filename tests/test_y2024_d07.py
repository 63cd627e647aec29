import pytest

from aocsolve.y2024_d07 import can_make, solve

EXAMPLE = """190: 10 19
3267: 81 40 27
83: 17 5
156: 15 6
7290: 6 8 6 15
161011: 16 10 13
192: 17 8 14
21037: 9 7 18 13
292: 11 6 16 20
"""


def test_example_answers():
    assert solve(EXAMPLE) == (3749, 11387)


def test_multiplication_reaches_target():
    assert can_make(190, [10, 19], False) is True


def test_concatenation_needed():
    assert can_make(156, [15, 6], False) is False
    assert can_make(156, [15, 6], True) is True


def test_concatenation_only_adds_options():
    assert can_make(7290, [6, 8, 6, 15], False) is False
    assert can_make(7290, [6, 8, 6, 15], True) is True


def test_leading_multiplication_starts_from_zero():
    assert can_make(0, [5], False) is True


def test_zero_later_resets_value():
    assert can_make(3, [100, 0, 3], False) is True


def test_empty_numbers():
    assert can_make(5, [], False) is False
    assert can_make(0, [], True) is True


def test_missing_separator_is_an_error():
    with pytest.raises(ValueError):
        solve("190 10 19\n")