"""Safety checks for reactor level reports."""


def first_violation(levels: list[int]) -> int | None:
    """Return the index after the first pair that is not a decrease of 1 to 3."""
    if not levels:
        raise ValueError("a report needs at least one level")
    for index, (a, b) in enumerate(zip(levels, levels[1:]), start=1):
        if not (a > b and a - b <= 3):
            return index
    return None


def is_safe(levels: list[int]) -> bool:
    """A report is safe if it steadily decreases or steadily increases."""
    levels = list(levels)
    return first_violation(levels) is None or first_violation(levels[::-1]) is None


def _valid_without(levels: list[int], index: int) -> bool:
    return first_violation(levels[:index] + levels[index + 1:]) is None


def is_tolerable(levels: list[int]) -> bool:
    """A report is tolerable if it is safe or one level next to a fault can go."""
    levels = list(levels)
    if is_safe(levels):
        return True
    backwards = levels[::-1]
    forward_fault = first_violation(levels)
    backward_fault = first_violation(backwards)
    return (
        _valid_without(levels, forward_fault)
        or _valid_without(levels, forward_fault - 1)
        or _valid_without(backwards, backward_fault)
        or _valid_without(backwards, backward_fault - 1)
    )


def solve(text: str) -> tuple[int, int]:
    """Return the number of safe and of tolerable reports."""
    reports = [
        [int(n) for n in line.split(" ")] for line in text.splitlines() if line
    ]
    return (
        sum(is_safe(report) for report in reports),
        sum(is_tolerable(report) for report in reports),
    )