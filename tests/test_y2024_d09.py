from collections import Counter

import pytest

from aocsolve.y2024_d09 import compact_blocks, compact_files, solve

EXAMPLE = "2333133121414131402\n"


def _files(blocks):
    return Counter(block for block in blocks if block is not None)


def test_example_checksums():
    assert solve(EXAMPLE) == (1928, 2858)


def test_compact_blocks_small_map():
    assert compact_blocks("12345") == [0, 2, 2, 1, 1, 1, 2, 2, 2] + [None] * 6


def test_compact_blocks_keeps_every_block():
    before = compact_blocks("2" + "0" * 0)
    assert before == [0, 0]
    packed = compact_blocks(EXAMPLE)
    assert _files(packed) == _files(compact_files("".join(EXAMPLE)))
    assert len(packed) == sum(int(c) for c in EXAMPLE.strip())


def test_compact_blocks_leaves_no_file_after_free_space():
    packed = compact_blocks(EXAMPLE)
    first_free = packed.index(None)
    assert all(block is None for block in packed[first_free:])


def test_compact_files_keeps_files_whole():
    packed = compact_files(EXAMPLE)
    for file_id in _files(packed):
        positions = [i for i, block in enumerate(packed) if block == file_id]
        assert positions == list(range(positions[0], positions[-1] + 1))


def test_disk_without_free_space_is_unchanged():
    assert compact_blocks("3") == [0, 0, 0]
    assert compact_files("3") == [0, 0, 0]


def test_non_digit_rejected():
    with pytest.raises(ValueError):
        solve("12a4")