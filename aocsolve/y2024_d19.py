"""Counting the ways towel patterns make up designs."""

from functools import cache


def count_arrangements(design: str, towels) -> int:
    """Number of ways to build the design from the towel patterns."""
    patterns = set(towels)
    longest = max((len(p) for p in patterns), default=0)

    @cache
    def ways(start: int) -> int:
        if start == len(design):
            return 1
        return sum(
            ways(start + size)
            for size in range(1, min(longest, len(design) - start) + 1)
            if design[start:start + size] in patterns
        )

    return ways(0)


def solve(text: str) -> tuple[int, int]:
    """Return how many designs are possible and the total number of ways."""
    towels_text, separator, designs_text = text.partition("\n\n")
    if not separator:
        raise ValueError("expected a blank line between towels and designs")
    towels = towels_text.strip().split(", ")
    counts = [count_arrangements(d, towels) for d in designs_text.splitlines() if d]
    return sum(1 for c in counts if c > 0), sum(counts)