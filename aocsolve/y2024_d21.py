"""Chains of robots typing door codes through directional keypads."""

from functools import cache
from itertools import permutations, product

_NUMERIC = {
    "7": (0, 0), "8": (0, 1), "9": (0, 2),
    "4": (1, 0), "5": (1, 1), "6": (1, 2),
    "1": (2, 0), "2": (2, 1), "3": (2, 2),
    "0": (3, 1), "A": (3, 2),
}
_GAP = (3, 0)
_STEP = {"v": (1, 0), "^": (-1, 0), "<": (0, -1), ">": (0, 1)}

# Best key sequences on a directional keypad between two of its keys.
_LOOKUP = {
    ("A", ">"): ("vA",),
    ("A", "^"): ("<A",),
    ("A", "v"): ("v<A", "<vA"),
    ("A", "<"): ("v<<A", "<v<A"),
    ("A", "A"): ("A",),
    ("^", "A"): (">A",),
    ("^", "v"): ("vA",),
    ("^", "<"): ("v<A",),
    ("^", ">"): ("v>A", ">vA"),
    ("^", "^"): ("A",),
    ("v", "A"): (">^A", "^>A"),
    ("v", "^"): ("^A",),
    ("v", "<"): ("<A",),
    ("v", ">"): (">A",),
    ("v", "v"): ("A",),
    (">", "A"): ("^A",),
    (">", "^"): ("^<A", "<^A"),
    (">", "<"): ("<<A",),
    (">", "v"): ("<A",),
    (">", ">"): ("A",),
    ("<", "A"): (">>^A", ">^>A"),
    ("<", "^"): (">^A",),
    ("<", ">"): (">>A",),
    ("<", "v"): (">A",),
    ("<", "<"): ("A",),
}


def _moves(src: str, dst: str) -> list[str]:
    (sy, sx), (ty, tx) = _NUMERIC[src], _NUMERIC[dst]
    keys = ("v" * max(ty - sy, 0) + "^" * max(sy - ty, 0)
            + "<" * max(sx - tx, 0) + ">" * max(tx - sx, 0))
    result = []
    for order in sorted(set(permutations(keys))):
        y, x = sy, sx
        for key in order:
            dy, dx = _STEP[key]
            y, x = y + dy, x + dx
            if (y, x) == _GAP:
                break
        else:
            result.append("".join(order) + "A")
    return result


def keypad_paths(code: str) -> list[str]:
    """All shortest key sequences that type the code on the numeric keypad."""
    unknown = [c for c in code if c not in _NUMERIC]
    if unknown:
        raise ValueError(f"{unknown[0]!r} is not on the numeric keypad")
    segments = [_moves(a, b) for a, b in zip("A" + code, code)]
    return ["".join(parts) for parts in product(*segments)]


@cache
def _length(seq: str, depth: int) -> int:
    total = 0
    previous = "A"
    for key in seq:
        try:
            options = _LOOKUP[(previous, key)]
        except KeyError:
            raise ValueError(f"{key!r} is not on the directional keypad") from None
        if depth == 1:
            total += len(options[0])
        else:
            total += min(_length(option, depth - 1) for option in options)
        previous = key
    return total


def sequence_length(seq: str, depth: int) -> int:
    """Keys pressed by a human for seq typed through depth directional keypads."""
    if depth < 1:
        raise ValueError("depth must be at least 1")
    return _length(seq, depth)


def solve(text: str) -> tuple[int, int]:
    """Return complexity sums with two and with twenty-five robot keypads."""
    first = 0
    second = 0
    for code in text.splitlines():
        if not code:
            continue
        value = int("".join(c for c in code if c.isdigit()))
        paths = keypad_paths(code)
        first += min(sequence_length(p, 2) for p in paths) * value
        second += min(sequence_length(p, 25) for p in paths) * value
    return first, second