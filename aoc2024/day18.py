"""Day 18: RAM Run."""

from __future__ import annotations

import re
from collections import deque
from collections.abc import Iterable

from .common import FileFormatError, ParseIntError

TITLE = "Day 18: RAM Run"

SIZE = 70
FIRST_KILOBYTE = 1024

_INT = re.compile(r"[+-]?[0-9]+")
_NEIGHBOURS = ((1, 0), (-1, 0), (0, 1), (0, -1))

Pos = tuple[int, int]


class Memory:
    """Memory space where bytes fall one per time step."""

    def __init__(self, bytes_: Iterable[Pos]) -> None:
        self._bytes = list(bytes_)
        self._arrival: dict[Pos, int] = {}
        for index, pos in enumerate(self._bytes):
            self._arrival.setdefault(pos, index)
        self.time = len(self)

    def set_time(self, time: int) -> None:
        """Look at memory once ``time`` bytes have fallen (clamped to the end)."""
        self.time = min(time, len(self))

    def is_wall(self, x: int, y: int) -> bool:
        arrival = self._arrival.get((x, y))
        return arrival is not None and arrival < self.time

    def __len__(self) -> int:
        return len(self._bytes) + 1

    def get_byte(self, time: int) -> Pos | None:
        if 0 <= time < len(self._bytes):
            return self._bytes[time]
        return None


def _open(memory: Memory, x: int, y: int) -> bool:
    return 0 <= x <= SIZE and 0 <= y <= SIZE and not memory.is_wall(x, y)


def _enqueue(
    memory: Memory,
    visited: set[Pos],
    queue: deque[tuple[int, int, int]],
    x: int,
    y: int,
    d: int,
) -> None:
    if not _open(memory, x, y) or (x, y) in visited:
        return
    position = None
    for index, (ox, oy, od) in enumerate(queue):
        if (ox, oy) == (x, y):
            return
        if od >= d:
            position = index
    if position is None:
        queue.append((x, y, d))
    else:
        queue.insert(position, (x, y, d))


def find_path(memory: Memory, sx: int, sy: int) -> int | None:
    """Fewest steps from (sx, sy) to the exit corner, or None."""
    queue: deque[tuple[int, int, int]] = deque([(sx, sy, 0)])
    visited: set[Pos] = set()
    while queue:
        x, y, d = queue.popleft()
        if x == SIZE and y == SIZE:
            return d
        for dx, dy in _NEIGHBOURS:
            _enqueue(memory, visited, queue, x + dx, y + dy, d + 1)
        visited.add((x, y))
    return None


def has_path(memory: Memory) -> bool:
    """Whether the exit corner can be reached from the origin."""
    stack: list[Pos] = [(0, 0)]
    visited: set[Pos] = set()
    while stack:
        x, y = stack.pop()
        if x == SIZE and y == SIZE:
            return True
        for dx, dy in _NEIGHBOURS:
            cell = (x + dx, y + dy)
            if _open(memory, *cell) and cell not in visited and cell not in stack:
                stack.append(cell)
        visited.add((x, y))
    return False


def find_latest_second(memory: Memory, start: int, end: int) -> int:
    """Binary search for the last time at which a path still exists."""
    while True:
        time = (start + end) // 2
        memory.set_time(time)
        path = has_path(memory)
        if end - start <= 1:
            return time if path else time - 1
        if path:
            start = time
        else:
            end = time


def parse_byte(line: str) -> Pos:
    """Parse ``x,y``."""
    x, sep, y = line.partition(",")
    if not sep:
        raise FileFormatError(line)
    for part in (x, y):
        if not _INT.fullmatch(part):
            raise ParseIntError(part)
    return int(x), int(y)


def parse_input(text: str) -> list[Pos]:
    return [parse_byte(line) for line in text.splitlines()]


def solve_a(text: str) -> int | None:
    memory = Memory(parse_input(text))
    memory.set_time(FIRST_KILOBYTE)
    return find_path(memory, 0, 0)


def solve_b(text: str) -> Pos | None:
    """Position of the first byte that cuts off the exit."""
    memory = Memory(parse_input(text))
    second = find_latest_second(memory, 0, len(memory))
    return memory.get_byte(second)