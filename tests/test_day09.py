import pytest

from aoc2024.common import ParseIntError
from aoc2024.day09 import (
    Block,
    Defragment,
    Disk,
    checksum,
    defragmented_checksum,
    parse_input,
    solve_a,
    solve_b,
)

EXAMPLE = "2333133121414131402"


def test_solve_a_example():
    assert solve_a(EXAMPLE) == 1928


def test_solve_b_example():
    assert solve_b(EXAMPLE) == 2858


def test_checksums_match_solvers():
    diskmap = parse_input(EXAMPLE)
    assert checksum(diskmap) == solve_a(EXAMPLE)
    assert defragmented_checksum(diskmap) == solve_b(EXAMPLE)


def test_small_disk_compacts():
    assert list(Disk([1, 2, 3, 4, 5])) == [0, 2, 2, 1, 1, 1, 2, 2, 2]


def test_disk_yields_every_file_cell():
    diskmap = parse_input(EXAMPLE)
    blocks = list(Disk(diskmap))
    assert len(blocks) == sum(diskmap[::2])
    for file_id, width in enumerate(diskmap[::2]):
        assert blocks.count(file_id) == width


def test_defragment_keeps_total_width():
    diskmap = parse_input(EXAMPLE)
    blocks = list(Defragment(diskmap))
    assert sum(block.width for block in blocks) == sum(diskmap)
    files = [block for block in blocks if not block.is_free() and block.width]
    assert sorted(block.file_id for block in files) == list(
        range(len(diskmap[::2]))
    )


def test_block_str():
    assert str(Block(3, 7)) == "777"
    assert str(Block(2)) == ".."
    assert Block(2).is_free()
    assert not Block(1, 0).is_free()


def test_parse_input_digits():
    assert parse_input("12345\n") == [1, 2, 3, 4, 5]


def test_parse_input_rejects_letters():
    with pytest.raises(ParseIntError):
        parse_input("12a")