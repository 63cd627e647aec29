import pytest

from aocsolve.y2024_d05 import solve

EXAMPLE = """47|53
97|13
97|61
97|47
75|29
61|13
75|53
29|13
97|29
53|29
61|53
97|53
61|29
47|13
75|47
97|75
47|61
75|61
47|29
75|13
53|13

75,47,61,53,29
97,61,53,29,13
75,29,13
75,97,47,61,53
61,13,29
97,13,75,29,47
"""


def test_example_answers():
    assert solve(EXAMPLE) == (143, 123)


def test_single_page_update_is_ordered():
    assert solve("1|2\n\n5\n") == (5, 0)


def test_only_ordered_updates():
    rules, updates = EXAMPLE.split("\n\n")
    ordered_only = rules + "\n\n" + "\n".join(updates.splitlines()[:3])
    assert solve(ordered_only)[0] == solve(EXAMPLE)[0]


def test_missing_separator_is_an_error():
    with pytest.raises(ValueError):
        solve("1|2\n5\n")