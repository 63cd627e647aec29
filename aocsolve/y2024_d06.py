"""Tracing a patrolling guard and finding obstacles that trap it."""

from collections.abc import Iterator

_TURNS = {
    "^": ((-1, 0), ">"),
    ">": ((0, 1), "v"),
    "v": ((1, 0), "<"),
    "<": ((0, -1), "^"),
}

Position = tuple[int, int]


def _find_guard(grid: list[str]) -> tuple[Position, str]:
    for row, line in enumerate(grid):
        for col, char in enumerate(line):
            if char in _TURNS:
                return (row, col), char
    raise ValueError("no guard on the map")


def _patrol(
    grid: list[str], start: Position, facing: str, block: Position | None
) -> Iterator[tuple[Position, str]]:
    """Yield the guard's state after each step until it walks off the map."""
    row, col = start
    while True:
        (dr, dc), right = _TURNS[facing]
        nr, nc = row + dr, col + dc
        if nr < 0 or nr >= len(grid) or nc < 0 or nc >= len(grid[row]):
            return
        if grid[nr][nc] == "#" or (nr, nc) == block:
            facing = right
        else:
            row, col = nr, nc
        yield (row, col), facing


def _run(
    grid: list[str], start: Position, facing: str, block: Position | None = None
) -> tuple[set[Position], int, bool]:
    """Return visited cells, steps taken (leaving counts as one) and whether it cycles."""
    seen = {(start, facing)}
    visited = {start}
    steps = 0
    for state in _patrol(grid, start, facing, block):
        steps += 1
        if state in seen:
            return visited, steps, True
        seen.add(state)
        visited.add(state[0])
    return visited, steps + 1, False


def _trapped(
    grid: list[str], start: Position, facing: str, limit: int, block: Position | None
) -> bool:
    _, steps, cycles = _run(grid, start, facing, block)
    return cycles or steps >= limit


def solve(text: str) -> tuple[int, int]:
    """Return the cells the guard visits and the obstacle spots that trap it."""
    grid = [line for line in text.splitlines() if line]
    start, facing = _find_guard(grid)
    visited, _, cycles = _run(grid, start, facing)
    if cycles:
        raise ValueError("the guard never leaves the map")

    limit = len(grid) * len(grid[0])
    baseline = _trapped(grid, start, facing, limit, None)
    traps = 0
    for row, line in enumerate(grid):
        for col, char in enumerate(line):
            cell = (row, col)
            if cell == start or char == "#":
                continue
            if cell in visited:
                traps += _trapped(grid, start, facing, limit, cell)
            else:
                # An obstacle off the route never changes the patrol.
                traps += baseline
    return len(visited), traps