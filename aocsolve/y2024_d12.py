"""Fence prices for garden regions, by perimeter and by number of sides."""

Cell = tuple[int, int]


def _flood(
    grid: list[str], start: Cell, seen: set[Cell], width: int
) -> tuple[set[Cell], int]:
    """Collect the region holding start and its perimeter."""
    plant = grid[start[0]][start[1]]
    region: set[Cell] = set()
    perimeter = 0
    stack = [start]
    while stack:
        cell = stack.pop()
        if cell in seen:
            continue
        seen.add(cell)
        region.add(cell)
        row, col = cell
        for dr, dc in ((0, 1), (1, 0), (0, -1), (-1, 0)):
            nr, nc = row + dr, col + dc
            if not (0 <= nr < len(grid) and 0 <= nc < width) or grid[nr][nc] != plant:
                perimeter += 1
                continue
            stack.append((nr, nc))
    return region, perimeter


def _corners(region: set[Cell]) -> int:
    """Count corners of a region; the number of sides equals it."""
    # Each lattice point is named by the cell to its lower right's upper-left.
    points = {
        (row + dr, col + dc)
        for row, col in region
        for dr in (-1, 0)
        for dc in (-1, 0)
    }
    corners = 0
    for row, col in points:
        inside = tuple(
            cell in region
            for cell in ((row, col + 1), (row + 1, col + 1), (row + 1, col), (row, col))
        )
        filled = sum(inside)
        if filled in (1, 3):
            corners += 1
        elif inside in ((True, False, True, False), (False, True, False, True)):
            corners += 2
    return corners


def solve(text: str) -> tuple[int, int]:
    """Return total prices using perimeters and using side counts."""
    grid = [line for line in text.splitlines() if line]
    width = len(grid[0]) if grid else 0
    seen: set[Cell] = set()
    by_perimeter = 0
    by_sides = 0
    for row, line in enumerate(grid):
        for col in range(len(line)):
            if (row, col) in seen:
                continue
            region, perimeter = _flood(grid, (row, col), seen, width)
            by_perimeter += len(region) * perimeter
            by_sides += len(region) * _corners(region)
    return by_perimeter, by_sides