"""Fewest tokens needed to win prizes from claw machines."""

Vector = tuple[int, int]

_FAR_OFFSET = 10000000000000


def tokens(a: Vector, b: Vector, prize: Vector) -> int:
    """Tokens for the unique integer solution (A costs 3, B costs 1), or 0.

    Raises ZeroDivisionError when the buttons are parallel or B moves no X.
    """
    determinant = a[0] * b[1] - a[1] * b[0]
    numerator = prize[0] * b[1] - prize[1] * b[0]
    if numerator % determinant:
        return 0
    presses_a = numerator // determinant
    rest = prize[0] - a[0] * presses_a
    if rest % b[0]:
        return 0
    return presses_a * 3 + rest // b[0]


def _after_sign(field: str, trailing_comma: bool) -> int:
    return int(field[2:-1] if trailing_comma else field[2:])


def parse_machines(text: str) -> list[tuple[Vector, Vector, Vector]]:
    """Parse blocks of button A, button B and prize lines."""
    machines = []
    for entry in text.split("\n\n"):
        if not entry.strip():
            continue
        try:
            lines = entry.splitlines()
            button_a = lines[0].split(" ")
            button_b = lines[1].split(" ")
            prize = lines[2].split(" ")
            machines.append(
                (
                    (_after_sign(button_a[2], True), _after_sign(button_a[3], False)),
                    (_after_sign(button_b[2], True), _after_sign(button_b[3], False)),
                    (_after_sign(prize[1], True), _after_sign(prize[2], False)),
                )
            )
        except (IndexError, ValueError) as error:
            raise ValueError(f"malformed machine description {entry!r}") from error
    return machines


def solve(text: str) -> tuple[int, int]:
    """Return the token totals for near and for far prizes."""
    near = 0
    far = 0
    for a, b, (x, y) in parse_machines(text):
        near += tokens(a, b, (x, y))
        far += tokens(a, b, (x + _FAR_OFFSET, y + _FAR_OFFSET))
    return near, far