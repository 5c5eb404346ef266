"""Day 16: Reindeer Maze."""

from __future__ import annotations

import dataclasses
from collections import deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum

from .common import FileFormatError, MissingEndError, MissingStartError, UnknownTileError

TITLE = "Day 16: Reindeer Maze"

STEP_COST = 1
TURN_COST = 1000

Pos = tuple[int, int]


class Tile(Enum):
    WALL = "#"
    FLOOR = "."


class Dir(Enum):
    RIGHT = ">"
    LEFT = "<"
    UP = "^"
    DOWN = "v"

    def delta(self) -> Pos:
        return _DELTAS[self]

    def turn_left(self) -> Dir:
        return _LEFT_TURNS[self]

    def turn_right(self) -> Dir:
        return _RIGHT_TURNS[self]

    def __str__(self) -> str:
        return self.value


_DELTAS = {
    Dir.RIGHT: (1, 0),
    Dir.LEFT: (-1, 0),
    Dir.UP: (0, -1),
    Dir.DOWN: (0, 1),
}
_LEFT_TURNS = {
    Dir.UP: Dir.LEFT,
    Dir.LEFT: Dir.DOWN,
    Dir.DOWN: Dir.RIGHT,
    Dir.RIGHT: Dir.UP,
}
_RIGHT_TURNS = {
    Dir.UP: Dir.RIGHT,
    Dir.LEFT: Dir.UP,
    Dir.DOWN: Dir.LEFT,
    Dir.RIGHT: Dir.DOWN,
}


class Maze:
    """A grid of walls and floor."""

    def __init__(self, tiles: Sequence[Tile], width: int, height: int) -> None:
        self.tiles = list(tiles)
        self.width = width
        self.height = height

    def xy(self, x: int, y: int) -> int | None:
        if x < 0 or y < 0 or x >= self.width or y >= self.height:
            return None
        return x + y * self.width

    def get(self, x: int, y: int) -> Tile | None:
        index = self.xy(x, y)
        if index is None or index >= len(self.tiles):
            return None
        return self.tiles[index]

    def is_wall(self, x: int, y: int) -> bool:
        """Anything that is not floor, including the outside, blocks the way."""
        return self.get(x, y) is not Tile.FLOOR

    def __str__(self) -> str:
        rows = []
        for y in range(self.height):
            cells = (self.get(x, y) for x in range(self.width))
            rows.append("".join("?" if tile is None else tile.value for tile in cells))
        return "".join(f"{row}\n" for row in rows)


@dataclass(eq=False)
class State:
    """A position and facing reached at some cost.

    Two states are equal when they share position and facing, whatever the cost.
    """

    cost: int
    x: int
    y: int
    facing: Dir

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, State):
            return NotImplemented
        return (self.x, self.y, self.facing) == (other.x, other.y, other.facing)

    def __hash__(self) -> int:
        return hash((self.x, self.y, self.facing))

    @classmethod
    def start(cls, start: Pos, facing: Dir) -> State:
        return cls(0, start[0], start[1], facing)

    def step(self, maze: Maze) -> State | None:
        """Move one tile forward, or None when a wall is in the way."""
        dx, dy = self.facing.delta()
        nx, ny = self.x + dx, self.y + dy
        if maze.is_wall(nx, ny):
            return None
        return State(self.cost + STEP_COST, nx, ny, self.facing)

    def turn_left(self, maze: Maze) -> State | None:
        turned = State(self.cost + TURN_COST, self.x, self.y, self.facing.turn_left())
        return turned.step(maze)

    def turn_right(self, maze: Maze) -> State | None:
        turned = State(self.cost + TURN_COST, self.x, self.y, self.facing.turn_right())
        return turned.step(maze)

    def step_back(self, visited: Iterable[State], queue: list[State]) -> None:
        """Queue the state one tile behind if a visited state there fits the cost."""
        dx, dy = self.facing.delta()
        nx, ny = self.x - dx, self.y - dy
        for v in visited:
            if v.x != nx or v.y != ny:
                continue
            if v.cost + STEP_COST != self.cost:
                continue
            queue.append(dataclasses.replace(self, x=nx, y=ny, cost=self.cost - STEP_COST))

    def _turn_back(self, facing: Dir, visited: Iterable[State], queue: list[State]) -> None:
        if self.cost < TURN_COST + STEP_COST:
            return
        dx, dy = self.facing.delta()
        new = State(self.cost - TURN_COST - STEP_COST, self.x - dx, self.y - dy, facing)
        for v in visited:
            if v.x != new.x or v.y != new.y:
                continue
            if v.cost != new.cost:
                continue
            queue.append(dataclasses.replace(new))

    def turn_left_back(self, visited: Iterable[State], queue: list[State]) -> None:
        self._turn_back(self.facing.turn_left(), visited, queue)

    def turn_right_back(self, visited: Iterable[State], queue: list[State]) -> None:
        self._turn_back(self.facing.turn_right(), visited, queue)


def _add_state(queue: deque[State], visited: set[State], state: State | None) -> None:
    if state is None or state in visited or state in queue:
        return
    for index, queued in enumerate(queue):
        if not queued.cost < state.cost:
            queue.insert(index, state)
            return
    queue.append(state)


def find_shortest_path(
    maze: Maze, start: Pos, end: Pos, facing: Dir
) -> tuple[int, set[State]] | None:
    """Lowest cost to reach ``end`` and every state explored, or None."""
    queue: deque[State] = deque([State.start(start, facing)])
    visited: set[State] = set()
    max_cost: int | None = None
    while queue:
        state = queue.popleft()
        if max_cost is not None and max_cost > state.cost:
            continue
        visited.add(state)
        if (state.x, state.y) == end and max_cost is None:
            max_cost = state.cost
            continue
        _add_state(queue, visited, state.step(maze))
        _add_state(queue, visited, state.turn_left(maze))
        _add_state(queue, visited, state.turn_right(maze))
    if max_cost is None:
        return None
    return max_cost, visited


def find_places_to_sit(visited: set[State], end: Pos, cost: int) -> set[Pos]:
    """Tiles on some best path, found by walking back from the end."""
    seats: set[Pos] = set()
    queue = [
        dataclasses.replace(v)
        for v in visited
        if (v.x, v.y) == end and v.cost == cost
    ]
    while queue:
        state = queue.pop()
        state.step_back(visited, queue)
        state.turn_left_back(visited, queue)
        state.turn_right_back(visited, queue)
        seats.add((state.x, state.y))
    return seats


def parse_input(text: str) -> tuple[Maze, Pos, Pos]:
    """Read the maze; ``S`` and ``E`` mark start and end on floor tiles."""
    lines = text.splitlines()
    if not lines:
        raise FileFormatError("empty maze")
    tiles: list[Tile] = []
    start: Pos | None = None
    end: Pos | None = None
    for y, line in enumerate(lines):
        for x, char in enumerate(line):
            if char == "S":
                tiles.append(Tile.FLOOR)
                start = (x, y)
            elif char == "E":
                tiles.append(Tile.FLOOR)
                end = (x, y)
            elif char == "#":
                tiles.append(Tile.WALL)
            elif char == ".":
                tiles.append(Tile.FLOOR)
            else:
                raise UnknownTileError(char)
    height = len(lines)
    if start is None:
        raise MissingStartError("no start tile")
    if end is None:
        raise MissingEndError("no end tile")
    return Maze(tiles, len(tiles) // height, height), start, end


def solve_a(text: str) -> int | None:
    maze, start, end = parse_input(text)
    found = find_shortest_path(maze, start, end, Dir.RIGHT)
    return None if found is None else found[0]


def solve_b(text: str) -> int | None:
    maze, start, end = parse_input(text)
    found = find_shortest_path(maze, start, end, Dir.RIGHT)
    if found is None:
        return None
    cost, visited = found
    return len(find_places_to_sit(visited, end, cost))