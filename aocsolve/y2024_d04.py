"""Word search for XMAS and crossed MAS patterns."""

_DIRECTIONS = [
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1), (0, 1),
    (1, -1), (1, 0), (1, 1),
]


def _at(grid: list[str], row: int, col: int) -> str | None:
    if 0 <= row < len(grid) and 0 <= col < len(grid[row]):
        return grid[row][col]
    return None


def _cells(grid: list[str]):
    # The scan covers a square region as wide as the grid is tall.
    size = len(grid)
    for row in range(size):
        for col in range(size):
            yield row, col


def count_xmas(grid: list[str]) -> int:
    """Count XMAS in any of the eight directions."""
    return sum(
        all(
            _at(grid, row + k * dr, col + k * dc) == letter
            for k, letter in enumerate("XMAS")
        )
        for row, col in _cells(grid)
        for dr, dc in _DIRECTIONS
    )


def count_x_mas(grid: list[str]) -> int:
    """Count two MAS words crossing diagonally on a shared A."""
    wanted = {"M", "S"}
    return sum(
        _at(grid, row + 1, col + 1) == "A"
        and {_at(grid, row, col), _at(grid, row + 2, col + 2)} == wanted
        and {_at(grid, row, col + 2), _at(grid, row + 2, col)} == wanted
        for row, col in _cells(grid)
    )


def solve(text: str) -> tuple[int, int]:
    """Return the answers to both parts."""
    grid = [line for line in text.splitlines() if line]
    return count_xmas(grid), count_x_mas(grid)