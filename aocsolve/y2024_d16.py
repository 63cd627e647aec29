"""Cheapest routes for a reindeer through a maze, and the tiles on them."""

from collections import deque


def _find(grid: list[str], target: str) -> tuple[int, int]:
    found = [
        (row, col)
        for row, line in enumerate(grid)
        for col, char in enumerate(line)
        if char == target
    ]
    if not found:
        raise ValueError(f"no {target!r} in the maze")
    return found[-1]


def _wall(grid: list[str], row: int, col: int) -> bool:
    if not (0 <= row < len(grid) and 0 <= col < len(grid[row])):
        return True
    return grid[row][col] == "#"


def solve(text: str) -> tuple[int, int]:
    """Return the lowest score (step 1, turn 1000) and the tiles on best paths.

    The reindeer starts on S facing east.  Raises ValueError if E cannot be
    reached.
    """
    grid = [line for line in text.splitlines() if line]
    start = _find(grid, "S")
    best: int | None = None
    tiles: set[tuple[int, int]] = set()
    cost_at: dict[tuple[int, int, int, int], int] = {}
    queue = deque([(start, (0, 1), 0, frozenset())])

    while queue:
        (y, x), (dy, dx), cost, path = queue.popleft()
        if _wall(grid, y, x) or (best is not None and cost > best):
            continue
        known = cost_at.get((y, x, dy, dx))
        if known is not None and known < cost:
            continue
        path = path | {(y, x)}
        if grid[y][x] == "E":
            if best is None or cost < best:
                best = cost
                tiles = set(path)
            elif cost == best:
                tiles |= path
        cost_at[(y, x, dy, dx)] = cost

        queue.append(((y, x), (dx, -dy), cost + 1000, path))
        queue.append(((y, x), (-dx, dy), cost + 1000, path))
        queue.append(((y + dy, x + dx), (dy, dx), cost + 1, path))

    if best is None:
        raise ValueError("the end cannot be reached")
    return best, len(tiles)