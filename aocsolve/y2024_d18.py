"""Shortest walk through a memory grid as bytes fall onto it."""

from collections import deque

Point = tuple[int, int]


def shortest_path(walls, size: int) -> int | None:
    """Steps from the top-left to the bottom-right corner, or None if cut off."""
    walls = set(walls)
    goal = (size - 1, size - 1)
    seen = {(0, 0)}
    queue = deque([((0, 0), 0)])
    while queue:
        (x, y), steps = queue.popleft()
        if (x, y) == goal:
            return steps
        for dx, dy in ((1, 0), (0, 1), (-1, 0), (0, -1)):
            nxt = (x + dx, y + dy)
            if 0 <= nxt[0] < size and 0 <= nxt[1] < size and nxt not in walls and nxt not in seen:
                seen.add(nxt)
                queue.append((nxt, steps + 1))
    return None


def _parse(text: str) -> list[Point]:
    points = []
    for line in text.splitlines():
        if not line:
            continue
        x, y = (int(n) for n in line.split(","))
        points.append((x, y))
    return points


def solve(text: str, size: int = 71, first: int = 1024) -> tuple[int | None, int]:
    """Return steps after the first bytes fall and the index of the byte that cuts the way."""
    points = _parse(text)
    walls = set(points[:first])
    steps = shortest_path(walls, size)
    for index in range(first, len(points)):
        walls.add(points[index])
        if shortest_path(walls, size) is None:
            return steps, index
    raise ValueError("no byte ever cuts off the exit")