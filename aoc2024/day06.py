"""Day 6: Guard Gallivant."""

from __future__ import annotations

import dataclasses
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from .common import GuardNotFoundError, MultipleGuardsError, UnknownTileError

TITLE = "Day 6: Guard Gallivant"


class Tile(Enum):
    GROUND = "."
    WALL = "#"

    def __str__(self) -> str:
        return self.value


class Dir(Enum):
    UP = "^"
    RIGHT = ">"
    DOWN = "v"
    LEFT = "<"

    def turn_right(self) -> Dir:
        return _RIGHT_TURNS[self]

    def delta(self) -> tuple[int, int]:
        return _DELTAS[self]

    def __str__(self) -> str:
        return self.value


_RIGHT_TURNS = {
    Dir.UP: Dir.RIGHT,
    Dir.RIGHT: Dir.DOWN,
    Dir.DOWN: Dir.LEFT,
    Dir.LEFT: Dir.UP,
}
_DELTAS = {
    Dir.UP: (0, -1),
    Dir.DOWN: (0, 1),
    Dir.LEFT: (-1, 0),
    Dir.RIGHT: (1, 0),
}


class Map:
    """A lab floor of ground and wall tiles."""

    def __init__(self, tiles: Sequence[Tile], width: int, height: int) -> None:
        self.tiles = list(tiles)
        self.width = width
        self.height = height

    def xy_index(self, x: int, y: int) -> int | None:
        if x < 0 or y < 0 or x >= self.width or y >= self.height:
            return None
        return x + self.width * y

    def get(self, x: int, y: int) -> Tile | None:
        index = self.xy_index(x, y)
        if index is None or index >= len(self.tiles):
            return None
        return self.tiles[index]

    def add_wall(self, position: int) -> Map:
        """Return a copy of the map with a wall at ``position``."""
        tiles = list(self.tiles)
        tiles[position] = Tile.WALL
        return Map(tiles, self.width, self.height)

    def __str__(self) -> str:
        rows = (
            self.tiles[start : start + self.width]
            for start in range(0, len(self.tiles), self.width)
        )
        return "\n".join("".join(str(tile) for tile in row) for row in rows)


@dataclass
class Guard:
    x: int
    y: int
    direction: Dir = Dir.UP

    def next_pos(self) -> tuple[int, int]:
        dx, dy = self.direction.delta()
        return self.x + dx, self.y + dy

    def step(self) -> None:
        self.x, self.y = self.next_pos()

    def turn_right(self) -> None:
        self.direction = self.direction.turn_right()


def parse_input(text: str) -> tuple[Guard, Map]:
    """Read the map and the guard's starting position."""
    guard: Guard | None = None
    tiles: list[Tile] = []
    width = 0
    height = 0
    for y, line in enumerate(text.splitlines()):
        height += 1
        for x, char in enumerate(line):
            if char == ".":
                tiles.append(Tile.GROUND)
            elif char == "#":
                tiles.append(Tile.WALL)
            elif char == "^":
                if guard is not None:
                    raise MultipleGuardsError(f"second guard at {x},{y}")
                guard = Guard(x, y, Dir.UP)
                tiles.append(Tile.GROUND)
            else:
                raise UnknownTileError(char)
        width = len(line)
    if guard is None:
        raise GuardNotFoundError("no guard on the map")
    return guard, Map(tiles, width, height)


def _advance(guard: Guard, map_: Map) -> bool:
    """Move or turn the guard once; False when it walks off the map."""
    tile = map_.get(*guard.next_pos())
    if tile is Tile.WALL:
        guard.turn_right()
    elif tile is Tile.GROUND:
        guard.step()
    else:
        return False
    return True


def get_visited_tiles(guard: Guard, map_: Map) -> set[int]:
    """Walk the guard off the map and return the indices it stood on."""
    visited: set[int] = set()
    while True:
        visited.add(map_.xy_index(guard.x, guard.y))
        if not _advance(guard, map_):
            return visited


def is_loop(guard: Guard, map_: Map) -> bool:
    """Whether the guard walks forever on this map."""
    guard = dataclasses.replace(guard)
    seen: set[tuple[Dir, int]] = set()
    while True:
        key = (guard.direction, map_.xy_index(guard.x, guard.y))
        if key in seen:
            return True
        seen.add(key)
        if not _advance(guard, map_):
            return False


def count_loop_walls(guard: Guard, map_: Map) -> int:
    """Count the single walls that would trap the guard in a loop."""
    candidates = get_visited_tiles(dataclasses.replace(guard), map_)
    candidates.discard(map_.xy_index(guard.x, guard.y))
    for dx, dy in ((1, 0), (-1, 0), (0, 1), (0, -1)):
        index = map_.xy_index(guard.x + dx, guard.y + dy)
        if index is not None:
            candidates.add(index)
    return sum(1 for tile in candidates if is_loop(guard, map_.add_wall(tile)))


def solve_a(text: str) -> int:
    guard, map_ = parse_input(text)
    return len(get_visited_tiles(guard, map_))


def solve_b(text: str) -> int:
    guard, map_ = parse_input(text)
    return count_loop_walls(guard, map_)