"""Mining MD5 hashes with leading zeros."""

import hashlib
import itertools


def solve(text: str) -> tuple[int, int]:
    """Return the lowest nonce giving five leading hex zeros, then the next giving six."""
    secret = text.strip()
    first = None
    for nonce in itertools.count(1):
        digest = hashlib.md5(f"{secret}{nonce}".encode()).digest()
        if digest[0] or digest[1]:
            continue
        if first is None:
            if digest[2] & 0xF0 == 0:
                first = nonce
        elif digest[2] == 0:
            return first, nonce
    raise AssertionError("unreachable")