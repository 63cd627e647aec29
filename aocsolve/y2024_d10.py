"""Scoring and rating hiking trails on a topographic map."""

from collections.abc import Iterator
from functools import cache

Cell = tuple[int, int]


def _climbs(grid: list[str], row: int, col: int) -> Iterator[Cell]:
    """Yield neighbours exactly one step higher than the given cell."""
    height = ord(grid[row][col])
    for dr, dc in ((-1, 0), (0, 1), (1, 0), (0, -1)):
        nr, nc = row + dr, col + dc
        if 0 <= nr < len(grid) and 0 <= nc < len(grid[row]) and nc < len(grid[nr]):
            if ord(grid[nr][nc]) == height + 1:
                yield nr, nc


def _score(grid: list[str], start: Cell) -> int:
    """Count the distinct peaks reachable from a trailhead."""
    seen = {start}
    stack = [start]
    peaks = 0
    while stack:
        row, col = stack.pop()
        if grid[row][col] == "9":
            peaks += 1
            continue
        for cell in _climbs(grid, row, col):
            if cell not in seen:
                seen.add(cell)
                stack.append(cell)
    return peaks


def solve(text: str) -> tuple[int, int]:
    """Return the summed trailhead scores and ratings."""
    grid = [line for line in text.splitlines() if line]

    @cache
    def trails(row: int, col: int) -> int:
        if grid[row][col] == "9":
            return 1
        return sum(trails(*cell) for cell in _climbs(grid, row, col))

    heads = [
        (row, col)
        for row, line in enumerate(grid)
        for col, char in enumerate(line)
        if char == "0"
    ]
    return (
        sum(_score(grid, head) for head in heads),
        sum(trails(*head) for head in heads),
    )