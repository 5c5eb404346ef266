"""Day 10: Hoof It."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence

from .common import FileFormatError, ParseIntError

TITLE = "Day 10: Hoof It"

PEAK = 9
IMPASSABLE = 11
_NEIGHBOURS = ((-1, 0), (1, 0), (0, -1), (0, 1))

TrailHead = list[Counter[int]]


class HikeMap:
    """A topographic map of heights from 0 to 9."""

    def __init__(self, tiles: Sequence[int], width: int, height: int) -> None:
        self.tiles = list(tiles)
        self.width = width
        self.height = height

    def xy_index(self, x: int, y: int) -> int | None:
        if x < 0 or y < 0 or x >= self.width or y >= self.height:
            return None
        return x + y * self.width

    def get(self, x: int, y: int) -> int | None:
        index = self.xy_index(x, y)
        if index is None or index >= len(self.tiles):
            return None
        return self.tiles[index]

    def __len__(self) -> int:
        return len(self.tiles)


def parse_input(text: str) -> HikeMap:
    """Read the map; ``.`` marks a tile that no trail can cross."""
    lines = text.splitlines()
    if not lines:
        raise FileFormatError("empty map")
    tiles: list[int] = []
    for line in lines:
        for char in line:
            if char == ".":
                tiles.append(IMPASSABLE)
            elif char in "0123456789":
                tiles.append(int(char))
            else:
                raise ParseIntError(line)
    height = len(lines)
    return HikeMap(tiles, len(tiles) // height, height)


def build_trailhead(map_: HikeMap) -> TrailHead:
    """For every tile, count the distinct trails to each reachable peak.

    Each entry maps the index of a peak to the number of trails from the
    tile to that peak.
    """
    trailhead: TrailHead = [Counter() for _ in map_.tiles]
    for index, tile in enumerate(map_.tiles):
        if tile == PEAK:
            trailhead[index][index] = 1

    for level in range(PEAK, -1, -1):
        for y in range(map_.height):
            for x in range(map_.width):
                if map_.get(x, y) != level:
                    continue
                source = trailhead[map_.xy_index(x, y)]
                if not source:
                    continue
                for dx, dy in _NEIGHBOURS:
                    neighbour = map_.get(x + dx, y + dy)
                    if neighbour is None or neighbour >= level or level - neighbour != 1:
                        continue
                    trailhead[map_.xy_index(x + dx, y + dy)].update(source)
    return trailhead


def _starts(map_: HikeMap, trailhead: TrailHead) -> list[Counter[int]]:
    return [trailhead[i] for i, tile in enumerate(map_.tiles) if tile == 0]


def trailhead_scores(map_: HikeMap) -> int:
    """Sum over every trailhead of the number of peaks it reaches."""
    return sum(len(peaks) for peaks in _starts(map_, build_trailhead(map_)))


def trailhead_ratings(map_: HikeMap) -> int:
    """Sum over every trailhead of the number of distinct trails it starts."""
    return sum(sum(peaks.values()) for peaks in _starts(map_, build_trailhead(map_)))


def solve_a(text: str) -> int:
    return trailhead_scores(parse_input(text))


def solve_b(text: str) -> int:
    return trailhead_ratings(parse_input(text))