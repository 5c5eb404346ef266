"""Day 9: Disk Fragmenter."""

from __future__ import annotations

import dataclasses
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from .common import ParseIntError

TITLE = "Day 9: Disk Fragmenter"


@dataclass
class Block:
    """A run of ``width`` cells holding one file, or free when ``file_id`` is None."""

    width: int
    file_id: int | None = None

    def is_free(self) -> bool:
        return self.file_id is None

    def __str__(self) -> str:
        mark = "." if self.file_id is None else str(self.file_id)
        return mark * self.width


class Disk:
    """Iterate file ids cell by cell, filling gaps from the end of the disk."""

    def __init__(self, diskmap: Sequence[int]) -> None:
        self._map = list(diskmap)
        self._left = 0
        self._loffset = 0
        self._right = len(self._map) - 1
        self._roffset = self._map[self._right]

    def __iter__(self) -> Iterator[int]:
        return self

    @staticmethod
    def _is_free(index: int) -> bool:
        return index % 2 == 1

    def _step_left(self) -> None:
        self._loffset += 1
        while self._left < len(self._map) and self._loffset >= self._map[self._left]:
            self._left += 1
            self._loffset = 0

    def _step_right(self) -> None:
        self._roffset -= 1
        while self._right != 0 and (
            self._roffset == 0 or self._is_free(self._right)
        ):
            self._right -= 1
            self._roffset = self._map[self._right]

    def _is_end(self) -> bool:
        if self._left != self._right:
            return self._left > self._right
        return self._loffset >= self._roffset

    def __next__(self) -> int:
        if self._is_end():
            raise StopIteration
        if self._is_free(self._left):
            block = self._right // 2
            self._step_right()
            self._step_left()
            return block
        block = self._left // 2
        self._step_left()
        return block


class Defragment:
    """Iterate blocks after moving whole files into free space to their left."""

    def __init__(self, diskmap: Sequence[int]) -> None:
        self._blocks = [
            Block(width, i // 2) if i % 2 == 0 else Block(width)
            for i, width in enumerate(diskmap)
        ]
        self._i = 0

    def __iter__(self) -> Iterator[Block]:
        return self

    def _find_block_index(self, width: int) -> int | None:
        for index in range(len(self._blocks) - 1, self._i - 1, -1):
            block = self._blocks[index]
            if not block.is_free() and block.width <= width:
                return index
        return None

    def __next__(self) -> Block:
        if self._i >= len(self._blocks):
            raise StopIteration
        current = self._blocks[self._i]
        if not current.is_free():
            self._i += 1
            return dataclasses.replace(current)
        found = self._find_block_index(current.width)
        if found is not None and found > self._i:
            moved = self._blocks[found]
            current.width -= moved.width
            removed = dataclasses.replace(moved)
            moved.file_id = None
            return removed
        self._i += 1
        return dataclasses.replace(current)


def parse_input(text: str) -> list[int]:
    """Parse the dense disk map into a list of digit widths."""
    digits = text.rstrip("\r\n")
    for char in digits:
        if char not in "0123456789":
            raise ParseIntError(char)
    return [int(char) for char in digits]


def checksum(diskmap: Sequence[int]) -> int:
    """Checksum after compacting block by block."""
    return sum(position * block for position, block in enumerate(Disk(diskmap)))


def defragmented_checksum(diskmap: Sequence[int]) -> int:
    """Checksum after moving whole files."""
    total = 0
    position = 0
    for block in Defragment(diskmap):
        file_id = block.file_id or 0
        for _ in range(block.width):
            total += file_id * position
            position += 1
    return total


def solve_a(text: str) -> int:
    return checksum(parse_input(text))


def solve_b(text: str) -> int:
    return defragmented_checksum(parse_input(text))