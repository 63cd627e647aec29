"""Summing multiplication instructions hidden in corrupted memory."""

import re

_INTEGER = re.compile(r"[+-]?[0-9]+")


def _parse_int(text: str) -> int | None:
    return int(text) if _INTEGER.fullmatch(text) else None


def _lines(text: str) -> list[str]:
    return [line for line in text.splitlines() if line]


def _find(line: str, char: str, start: int) -> int:
    index = line.find(char, start)
    return index if index != -1 else max(start, len(line))


def part_one(text: str) -> int:
    """Sum every mul(a,b) with operands of up to three or four characters."""
    total = 0
    for line in _lines(text):
        for piece in line.split("mul"):
            fields = piece.split(",")
            if len(fields) < 2:
                continue
            first, second = fields[0], fields[1]
            if len(first) <= 1 or not first.startswith("("):
                continue
            close = second.find(")")
            if close == -1:
                close = len(second)
            if len(first) > 4 or close == 0 or close > 4:
                continue
            if close >= len(second):
                continue
            left = _parse_int(first[1:])
            right = _parse_int(second[:close])
            if left is not None and right is not None:
                total += left * right
    return total


def part_two(text: str) -> int:
    """Sum mul(a,b) instructions, honouring do() and don't() switches."""
    total = 0
    enabled = True
    for line in _lines(text):
        size = len(line)
        i = 0
        while i < size:
            char = line[i]
            if char == "d":
                if i + 4 < size and line.startswith("do()", i):
                    enabled = True
                    i += 4
                    continue
                if i + 7 < size and line.startswith("don't()", i):
                    enabled = False
                    i += 6
                i += 1
            elif char == "m":
                if not enabled or (i + 4 < size and not line.startswith("mul(", i)):
                    i += 1
                    continue
                i += 4
                start = i
                comma = _find(line, ",", i)
                left = _parse_int(line[i:comma])
                if comma - i > 3 or left is None:
                    continue
                i = comma + 1
                close = _find(line, ")", i)
                right = _parse_int(line[i:close])
                if close - i > 3 or right is None:
                    i = start
                    continue
                total += left * right
                i = close
            else:
                i += 1
    return total


def solve(text: str) -> tuple[int, int]:
    """Return the answers to both parts."""
    return part_one(text), part_two(text)