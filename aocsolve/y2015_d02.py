"""Wrapping paper and ribbon for a list of boxes."""


def parse_boxes(text: str) -> list[tuple[int, ...]]:
    """Parse 'LxWxH' lines into tuples of dimensions sorted smallest first."""
    boxes = []
    for line in text.splitlines():
        if not line:
            continue
        dims = sorted(int(n) for n in line.split("x"))
        if len(dims) < 3:
            raise ValueError(f"expected three dimensions in {line!r}")
        boxes.append(tuple(dims))
    return boxes


def paper(text: str) -> int:
    """Total surface area plus the smallest side of every box."""
    total = 0
    for box in parse_boxes(text):
        a, b, c = box[:3]
        total += 2 * a * b + 2 * b * c + 2 * a * c + a * b
    return total


def ribbon(text: str) -> int:
    """Total smallest perimeter plus volume of every box."""
    total = 0
    for box in parse_boxes(text):
        a, b, c = box[:3]
        total += 2 * a + 2 * b + a * b * c
    return total


def solve(text: str) -> tuple[int, int]:
    """Return the answers to both parts."""
    return paper(text), ribbon(text)