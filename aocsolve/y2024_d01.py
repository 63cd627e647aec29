"""Comparing two lists of location identifiers."""

from collections import Counter


def parse_lists(text: str) -> tuple[list[int], list[int]]:
    """Split space-separated pairs into a left and a right list."""
    left: list[int] = []
    right: list[int] = []
    for line in text.splitlines():
        fields = [field for field in line.split(" ") if field]
        if not fields:
            continue
        if len(fields) < 2:
            raise ValueError(f"expected two numbers in {line!r}")
        left.append(int(fields[0]))
        right.append(int(fields[1]))
    return left, right


def total_distance(left: list[int], right: list[int]) -> int:
    """Sum of distances between the lists paired off in sorted order."""
    return sum(abs(a - b) for a, b in zip(sorted(left), sorted(right)))


def similarity(left: list[int], right: list[int]) -> int:
    """Sum of each left number times how often it occurs on the right."""
    counts = Counter(right)
    return sum(value * counts[value] for value in left)


def solve(text: str) -> tuple[int, int]:
    """Return the answers to both parts."""
    left, right = parse_lists(text)
    return total_distance(left, right), similarity(left, right)