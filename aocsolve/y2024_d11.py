"""Counting stones that split and multiply each time you blink."""

from collections import Counter
from collections.abc import Iterable, Mapping


def blink(counts: Mapping[int, int]) -> Counter[int]:
    """Apply one blink to a multiset of stones given as value -> count."""
    result: Counter[int] = Counter()
    for stone, count in counts.items():
        digits = str(stone)
        if len(digits) % 2 == 0:
            half = len(digits) // 2
            result[int(digits[:half])] += count
            result[int(digits[half:])] += count
        elif stone == 0:
            result[1] += count
        else:
            result[stone * 2024] += count
    return result


def count_stones(stones: Iterable[int], blinks: int) -> int:
    """Number of stones after the given number of blinks."""
    counts = Counter(stones)
    for _ in range(blinks):
        counts = blink(counts)
    return sum(counts.values())


def _parse(text: str) -> list[int]:
    stones = [int(token) for token in text.split()]
    if any(stone < 0 for stone in stones):
        raise ValueError("stones carry non-negative numbers")
    return stones


def solve(text: str) -> tuple[int, int]:
    """Return the stone counts after 25 and after 75 blinks."""
    counts = Counter(_parse(text))
    for _ in range(25):
        counts = blink(counts)
    first = sum(counts.values())
    for _ in range(50):
        counts = blink(counts)
    return first, sum(counts.values())