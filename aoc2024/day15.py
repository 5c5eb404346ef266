"""Day 15: Warehouse Woes."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from .common import (
    FileFormatError,
    RobotNotFoundError,
    UnknownActionError,
    UnknownTileError,
)

TITLE = "Day 15: Warehouse Woes"


class Tile(Enum):
    WALL = "#"
    FLOOR = "."
    BOX = "O"


class Action(Enum):
    UP = "^"
    DOWN = "v"
    LEFT = "<"
    RIGHT = ">"

    def delta(self) -> tuple[int, int]:
        return _DELTAS[self]


_DELTAS = {
    Action.UP: (0, -1),
    Action.LEFT: (-1, 0),
    Action.RIGHT: (1, 0),
    Action.DOWN: (0, 1),
}


@dataclass
class Robot:
    x: int
    y: int


class Warehouse:
    """A warehouse of walls, floor and single-width boxes."""

    def __init__(self, tiles: Sequence[Tile], height: int, width: int) -> None:
        self.tiles = list(tiles)
        self.height = height
        self.width = width

    def _index(self, x: int, y: int) -> int | None:
        if x < 0 or y < 0 or x >= self.width or y >= self.height:
            return None
        index = x + y * self.width
        return index if index < len(self.tiles) else None

    def get(self, x: int, y: int) -> Tile | None:
        index = self._index(x, y)
        return None if index is None else self.tiles[index]

    def set(self, x: int, y: int, tile: Tile) -> None:
        index = self._index(x, y)
        if index is not None:
            self.tiles[index] = tile

    def gps(self) -> int:
        """Sum of 100 * row + column over every box."""
        return sum(
            (i // self.width) * 100 + i % self.width
            for i, tile in enumerate(self.tiles)
            if tile is Tile.BOX
        )

    def render(self, robot: Robot) -> str:
        rows = []
        for y in range(self.height):
            row = []
            for x in range(self.width):
                if (x, y) == (robot.x, robot.y):
                    row.append("@")
                else:
                    tile = self.get(x, y)
                    row.append("?" if tile is None else tile.value)
            rows.append("".join(row))
        return "\n".join(rows)


class WTile(Enum):
    FLOOR = "."
    WALL = "#"
    LBOX = "["
    RBOX = "]"


_BOX_HALVES = (WTile.LBOX, WTile.RBOX)


class WideWarehouse:
    """A warehouse where every tile is twice as wide and boxes span two cells."""

    def __init__(self, tiles: Sequence[WTile], width: int, height: int) -> None:
        self.tiles = list(tiles)
        self.width = width
        self.height = height

    @classmethod
    def from_warehouse(cls, warehouse: Warehouse) -> WideWarehouse:
        widened = {
            Tile.BOX: (WTile.LBOX, WTile.RBOX),
            Tile.FLOOR: (WTile.FLOOR, WTile.FLOOR),
            Tile.WALL: (WTile.WALL, WTile.WALL),
        }
        tiles: list[WTile] = []
        for y in range(warehouse.height):
            for x in range(warehouse.width):
                tile = warehouse.get(x, y)
                if tile is not None:
                    tiles.extend(widened[tile])
        return cls(tiles, warehouse.width * 2, warehouse.height)

    def _index(self, x: int, y: int) -> int | None:
        if x < 0 or y < 0 or x >= self.width or y >= self.height:
            return None
        index = x + y * self.width
        return index if index < len(self.tiles) else None

    def get(self, x: int, y: int) -> WTile | None:
        index = self._index(x, y)
        return None if index is None else self.tiles[index]

    def set(self, x: int, y: int, tile: WTile) -> None:
        index = self._index(x, y)
        if index is not None:
            self.tiles[index] = tile

    def gps(self) -> int:
        """Sum of 100 * row + column over the left half of every box."""
        return sum(
            (i // self.width) * 100 + i % self.width
            for i, tile in enumerate(self.tiles)
            if tile is WTile.LBOX
        )

    def render(self, robot: Robot) -> str:
        rows = []
        for y in range(self.height):
            row = []
            for x in range(self.width):
                if (x, y) == (robot.x, robot.y):
                    row.append("@")
                else:
                    tile = self.get(x, y)
                    row.append("?" if tile is None else tile.value)
            rows.append("".join(row))
        return "\n".join(rows)


def _find_free_floor(warehouse: Warehouse, x: int, y: int, dx: int, dy: int) -> tuple[int, int] | None:
    """First floor beyond a row of boxes starting at (x, y), or None at a wall."""
    while True:
        x += dx
        y += dy
        tile = warehouse.get(x, y)
        if tile is Tile.FLOOR:
            return x, y
        if tile is not Tile.BOX:
            return None


def step(warehouse: Warehouse, robot: Robot, action: Action) -> None:
    """Move the robot once, pushing any line of boxes in front of it."""
    dx, dy = action.delta()
    new_x, new_y = robot.x + dx, robot.y + dy
    tile = warehouse.get(new_x, new_y)
    if tile is Tile.FLOOR:
        robot.x, robot.y = new_x, new_y
    elif tile is Tile.BOX:
        floor = _find_free_floor(warehouse, new_x, new_y, dx, dy)
        if floor is not None:
            warehouse.set(*floor, Tile.BOX)
            warehouse.set(new_x, new_y, Tile.FLOOR)
            robot.x, robot.y = new_x, new_y


def _find_free_floor_wide(warehouse: WideWarehouse, x: int, y: int, dx: int) -> int | None:
    while True:
        x += dx
        tile = warehouse.get(x, y)
        if tile is WTile.FLOOR:
            return x
        if tile not in _BOX_HALVES:
            return None


def _boxes_to_push(warehouse: WideWarehouse, x: int, y: int, dy: int) -> list[tuple[int, int]] | None:
    """Box cells moved by a vertical push, in push order, or None if blocked."""
    boxes: list[tuple[int, int]] = []
    queue: deque[tuple[int, int]] = deque([(x, y)])
    tile = warehouse.get(x, y)
    if tile is WTile.LBOX:
        queue.append((x + 1, y))
    elif tile is WTile.RBOX:
        queue.append((x - 1, y))

    def enqueue(cell: tuple[int, int]) -> None:
        if cell not in boxes and cell not in queue:
            queue.append(cell)

    while queue:
        cx, cy = queue.popleft()
        ahead = warehouse.get(cx, cy + dy)
        if ahead is WTile.LBOX:
            enqueue((cx, cy + dy))
            enqueue((cx + 1, cy + dy))
        elif ahead is WTile.RBOX:
            enqueue((cx, cy + dy))
            enqueue((cx - 1, cy + dy))
        elif ahead is not WTile.FLOOR:
            return None
        boxes.append((cx, cy))
    return boxes


def wide_step(warehouse: WideWarehouse, robot: Robot, action: Action) -> None:
    """Move the robot once in the wide warehouse, pushing connected boxes."""
    dx, dy = action.delta()
    new_x, new_y = robot.x + dx, robot.y + dy
    tile = warehouse.get(new_x, new_y)
    if tile is WTile.FLOOR:
        robot.x, robot.y = new_x, new_y
    elif tile in _BOX_HALVES and dx != 0:
        floor_x = _find_free_floor_wide(warehouse, new_x, new_y, dx)
        if floor_x is not None:
            x = floor_x
            while x != robot.x:
                warehouse.set(x, new_y, warehouse.get(x - dx, new_y))
                x -= dx
            robot.x, robot.y = new_x, new_y
    elif tile in _BOX_HALVES and dy != 0:
        boxes = _boxes_to_push(warehouse, new_x, new_y, dy)
        if boxes is not None:
            for bx, by in reversed(boxes):
                warehouse.set(bx, by + dy, warehouse.get(bx, by))
                warehouse.set(bx, by, WTile.FLOOR)
            robot.x, robot.y = new_x, new_y


def parse_warehouse(text: str) -> tuple[Warehouse, Robot]:
    """Read the warehouse map; ``@`` marks the robot standing on floor."""
    lines = text.splitlines()
    robot: Robot | None = None
    tiles: list[Tile] = []
    for y, line in enumerate(lines):
        for x, char in enumerate(line):
            if char == "@":
                tiles.append(Tile.FLOOR)
                robot = Robot(x, y)
            elif char in "#O.":
                tiles.append(Tile(char))
            else:
                raise UnknownTileError(char)
    if robot is None:
        raise RobotNotFoundError("no robot in the warehouse")
    height = len(lines)
    return Warehouse(tiles, height, len(tiles) // height), robot


def parse_action(char: str) -> Action:
    try:
        return Action(char)
    except ValueError as err:
        raise UnknownActionError(char) from err


def parse_actions(text: str) -> list[Action]:
    return [parse_action(char) for line in text.splitlines() for char in line]


def parse_input(text: str) -> tuple[Warehouse, Robot, list[Action]]:
    warehouse_text, sep, actions_text = text.partition("\n\n")
    if not sep:
        raise FileFormatError("missing blank line between map and moves")
    warehouse, robot = parse_warehouse(warehouse_text)
    return warehouse, robot, parse_actions(actions_text)


def solve_a(text: str) -> int:
    warehouse, robot, actions = parse_input(text)
    for action in actions:
        step(warehouse, robot, action)
    return warehouse.gps()


def solve_b(text: str) -> int:
    warehouse, robot, actions = parse_input(text)
    wide = WideWarehouse.from_warehouse(warehouse)
    robot.x *= 2
    for action in actions:
        wide_step(wide, robot, action)
    return wide.gps()