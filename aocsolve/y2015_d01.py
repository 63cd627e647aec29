"""Floor counting for a stream of parenthesis instructions."""


def part_one(text: str) -> int:
    """Return the floor reached: each '(' goes up one, each ')' down one."""
    return text.count("(") - text.count(")")


def part_two(text: str) -> int:
    """Return the 1-based position of the character that first enters the basement.

    Every character other than '(' moves down a floor.  If the basement is
    never entered, the floor reached at the end is returned instead.
    """
    level = 0
    for position, char in enumerate(text, start=1):
        level += 1 if char == "(" else -1
        if level < 0:
            return position
    return level


def solve(text: str) -> tuple[int, int]:
    """Return the answers to both parts."""
    return part_one(text), part_two(text)