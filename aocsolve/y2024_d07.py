"""Finding operators that make calibration equations true."""


def can_make(target: int, numbers: list[int], concat: bool) -> bool:
    """Whether +, * (and digit concatenation if allowed) applied left to right,
    starting from 0, can produce the target."""
    numbers = list(numbers)
    last_zero = max((i for i, n in enumerate(numbers) if n == 0), default=-1)
    values = {0}
    for index, number in enumerate(numbers):
        following = set()
        for value in values:
            following.add(value + number)
            following.add(value * number)
            if concat:
                following.add(int(f"{value}{number}"))
        if index >= last_zero:
            # Without a zero ahead, values can only grow.
            following = {value for value in following if value <= target}
        values = following
    return target in values


def solve(text: str) -> tuple[int, int]:
    """Sum the targets reachable without and with concatenation."""
    plain = 0
    joined = 0
    for line in text.splitlines():
        if not line:
            continue
        head, separator, tail = line.partition(": ")
        if not separator:
            raise ValueError(f"malformed equation {line!r}")
        target = int(head)
        numbers = [int(n) for n in tail.split(" ")]
        if can_make(target, numbers, False):
            plain += target
        if can_make(target, numbers, True):
            joined += target
    return plain, joined