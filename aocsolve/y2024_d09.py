"""Compacting a fragmented disk map, block by block and file by file."""

from itertools import takewhile

Layout = list[int | None]

_DIGITS = "0123456789"


def _parse_disk(disk: str) -> list[int]:
    digits = [char for char in disk if char != "\n"]
    bad = [char for char in digits if char not in _DIGITS]
    if bad:
        raise ValueError(f"disk map holds a non-digit {bad[0]!r}")
    return [int(char) for char in digits]


def _layout(disk: str) -> Layout:
    """Expand the dense map: file ids on even positions, free space (None) on odd."""
    blocks: Layout = []
    for index, length in enumerate(_parse_disk(disk)):
        blocks.extend([index // 2 if index % 2 == 0 else None] * length)
    return blocks


def compact_blocks(disk: str) -> Layout:
    """Move single blocks from the end into the leftmost free space."""
    blocks = _layout(disk)
    left, right = 0, len(blocks) - 1
    while left < right:
        while left < right and blocks[left] is not None:
            left += 1
        while right > left and blocks[right] is None:
            right -= 1
        if left >= right:
            break
        blocks[left], blocks[right] = blocks[right], None
        left += 1
    return blocks


def compact_files(disk: str) -> Layout:
    """Move whole files, highest id first, into the first free span that fits.

    A span is searched for only before the original start of the file
    handled previously.
    """
    blocks = _layout(disk)
    size = len(blocks)
    bound = size - 1
    for file_id in range(len(_parse_disk(disk)) // 2, -1, -1):
        try:
            start = blocks.index(file_id)
        except ValueError:
            start = size
        end = start
        while end < size and blocks[end] == file_id:
            end += 1
        length = end - start

        pos = 0
        while pos < bound:
            while pos < bound and blocks[pos] is not None:
                pos += 1
            gap = pos
            while pos < bound and blocks[pos] is None:
                pos += 1
            if pos - gap >= length:
                blocks[gap:gap + length] = [file_id] * length
                blocks[start:start + length] = [None] * length
                break
        bound = start
    return blocks


def solve(text: str) -> tuple[int, int]:
    """Return the checksums after block and after file compaction."""
    packed = compact_blocks(text)
    first = sum(
        position * block
        for position, block in enumerate(takewhile(lambda b: b is not None, packed))
    )
    second = sum(
        position * block
        for position, block in enumerate(compact_files(text))
        if block is not None
    )
    return first, second