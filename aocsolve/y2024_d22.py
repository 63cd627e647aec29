"""Pseudo-random secret numbers and the best price-change sequence."""

from collections import Counter

_MODULUS = 16777216


def next_secret(secret: int) -> int:
    """Advance a secret number one step."""
    secret = (secret ^ (secret * 64)) % _MODULUS
    secret = (secret ^ (secret // 32)) % _MODULUS
    return (secret ^ (secret * 2048)) % _MODULUS


def solve(text: str) -> tuple[int, int]:
    """Return the sum of 2000th secrets and the most bananas one sequence buys."""
    total = 0
    bananas: Counter[tuple[int, ...]] = Counter()
    for line in text.splitlines():
        if not line.strip():
            continue
        secret = int(line.strip())
        changes: tuple[int, ...] = (0, 0, 0, 0)
        seen = set()
        for step in range(2000):
            nxt = next_secret(secret)
            changes = changes[1:] + (nxt % 10 - secret % 10,)
            if step > 2 and changes not in seen:
                seen.add(changes)
                bananas[changes] += nxt % 10
            secret = nxt
        total += secret
    if not bananas:
        raise ValueError("no buyers")
    return total, max(bananas.values())