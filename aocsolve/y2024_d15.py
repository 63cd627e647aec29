"""A robot pushing boxes around a warehouse, at normal and double width."""

Grid = list[list[str]]
Step = tuple[int, int]

_STEPS = {"^": (-1, 0), "v": (1, 0), "<": (0, -1), ">": (0, 1)}
_BOX_SIDES = ("[", "]")


def _parse(text: str) -> tuple[Grid, list[Step]]:
    layout, separator, moves = text.partition("\n\n")
    if not separator:
        raise ValueError("expected a blank line between the map and the moves")
    grid = [list(line) for line in layout.splitlines()]
    steps = []
    for line in moves.splitlines():
        for char in line:
            if char not in _STEPS:
                raise ValueError(f"unknown move {char!r}")
            steps.append(_STEPS[char])
    return grid, steps


def _robot(grid: Grid) -> tuple[int, int]:
    found = [
        (row, col)
        for row, line in enumerate(grid)
        for col, char in enumerate(line)
        if char == "@"
    ]
    if not found:
        raise ValueError("no robot on the map")
    return found[-1]


def _gps(grid: Grid, box: str) -> int:
    return sum(
        100 * row + col
        for row, line in enumerate(grid)
        for col, char in enumerate(line)
        if char == box
    )


def _narrow(grid: Grid, steps: list[Step]) -> int:
    grid = [line[:] for line in grid]
    y, x = _robot(grid)
    for dy, dx in steps:
        ny, nx = y + dy, x + dx
        ahead = grid[ny][nx]
        if ahead == "O":
            oy, ox = ny, nx
            while grid[oy][ox] == "O":
                oy, ox = oy + dy, ox + dx
            if grid[oy][ox] == "#":
                continue
            grid[oy][ox] = grid[ny][nx]
            grid[ny][nx] = grid[y][x]
            grid[y][x] = "."
            y, x = ny, nx
        elif ahead == ".":
            grid[y][x] = "."
            grid[ny][nx] = "@"
            y, x = ny, nx
    return _gps(grid, "O")


def _widen(grid: Grid) -> Grid:
    width = len(grid[0]) * 2 if grid else 0
    wide = [["."] * width for _ in grid]
    for row, line in enumerate(grid):
        for col, char in enumerate(line):
            if char == "O":
                wide[row][2 * col:2 * col + 2] = ["[", "]"]
            elif char == "@":
                wide[row][2 * col] = "@"
            elif char == "#":
                wide[row][2 * col:2 * col + 2] = ["#", "#"]
    return wide


def _vertical_targets(grid: Grid, start: tuple[int, int], dy: int) -> set | None:
    """Cells that pushed box halves move into, or None if a wall blocks."""
    targets: set[tuple[int, int]] = set()
    seen: set[tuple[int, int]] = set()
    stack = [start]
    while stack:
        cell = stack.pop()
        if cell in seen:
            continue
        seen.add(cell)
        sy, sx = cell
        char = grid[sy][sx]
        oy = sy + dy
        if char == "[":
            pair = [(oy, sx), (oy, sx + 1)]
        elif char == "]":
            pair = [(oy, sx), (oy, sx - 1)]
        elif char == ".":
            continue
        elif char == "#":
            return None
        else:
            raise ValueError(f"unexpected {char!r} in the path of a box")
        stack.extend(pair)
        targets.update(pair)
    return targets


def _wide(grid: Grid, steps: list[Step]) -> int:
    grid = _widen(grid)
    y, x = _robot(grid)
    for dy, dx in steps:
        ny, nx = y + dy, x + dx
        ahead = grid[ny][nx]
        if ahead in _BOX_SIDES:
            if dx == 0:
                targets = _vertical_targets(grid, (ny, nx), dy)
                if targets is None:
                    continue
                for ty, tx in sorted(targets, reverse=dy > 0):
                    grid[ty][tx] = grid[ty - dy][tx]
                    grid[ty - dy][tx] = "."
                grid[y][x] = "."
                grid[ny][nx] = "@"
            else:
                ox = nx
                while grid[y][ox] in _BOX_SIDES:
                    ox += dx
                if grid[y][ox] == "#":
                    continue
                while ox != x:
                    grid[y][ox] = grid[y][ox - dx]
                    ox -= dx
                grid[y][x] = "."
            y, x = ny, nx
        elif ahead == ".":
            grid[y][x] = "."
            grid[ny][nx] = "@"
            y, x = ny, nx
    return _gps(grid, "[")


def solve(text: str) -> tuple[int, int]:
    """Return the box GPS sums for the normal and the double-width warehouse."""
    grid, steps = _parse(text)
    return _narrow(grid, steps), _wide(grid, steps)