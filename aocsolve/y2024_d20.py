"""Counting wall-skipping cheats on a race track."""

from collections import deque


def _find(grid: list[str], target: str) -> tuple[int, int]:
    for row, line in enumerate(grid):
        col = line.find(target)
        if col != -1:
            return row, col
    raise ValueError(f"no {target!r} on the track")


def solve(text: str, threshold: int = 100) -> tuple[int, int]:
    """Return cheats of length 2 and of up to 20 that save at least threshold steps."""
    grid = [line for line in text.splitlines() if line]
    start = _find(grid, "S")
    end = _find(grid, "E")
    dist: dict[tuple[int, int], int] = {}
    queue = deque([(start, 0)])
    while queue:
        cell, steps = queue.popleft()
        if cell in dist:
            continue
        dist[cell] = steps
        if cell == end:
            break
        y, x = cell
        for dy, dx in ((0, 1), (1, 0), (0, -1), (-1, 0)):
            ny, nx = y + dy, x + dx
            if 0 <= ny < len(grid) and 0 <= nx < len(grid[ny]) and grid[ny][nx] != "#":
                queue.append(((ny, nx), steps + 1))

    short = 0
    long = 0
    for (fy, fx), here in dist.items():
        for ty in range(-20, 21):
            for tx in range(-20 + abs(ty), 21 - abs(ty)):
                if ty == 0 and tx == 0:
                    continue
                there = dist.get((fy + ty, fx + tx))
                if there is None:
                    continue
                length = abs(ty) + abs(tx)
                if there - here - length >= threshold:
                    long += 1
                    if length == 2:
                        short += 1
    return short, long