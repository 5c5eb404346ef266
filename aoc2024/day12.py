"""Day 12: Garden Groups."""

from __future__ import annotations

from collections.abc import Sequence

from .common import FileFormatError

TITLE = "Day 12: Garden Groups"

Position = tuple[int, int]
Area = set[Position]

_NEIGHBOURS = ((1, 0), (-1, 0), (0, 1), (0, -1))


class Garden:
    """A grid of garden plots, each labelled with its plant."""

    def __init__(self, plots: Sequence[str], width: int, height: int) -> None:
        self.plots = list(plots)
        self.width = width
        self.height = height

    def __len__(self) -> int:
        return len(self.plots)

    def index_xy(self, index: int) -> Position:
        return index % self.width, index // self.width

    def xy_index(self, x: int, y: int) -> int | None:
        if x < 0 or y < 0 or x >= self.width or y >= self.height:
            return None
        return x + y * self.width

    def get(self, x: int, y: int) -> str | None:
        index = self.xy_index(x, y)
        if index is None or index >= len(self.plots):
            return None
        return self.plots[index]

    def is_plot(self, x: int, y: int, plot: str) -> bool:
        return self.get(x, y) == plot


def perimeter_count(area: Area, x: int, y: int) -> int:
    """Number of fence pieces around one cell of the area."""
    return sum((x + dx, y + dy) not in area for dx, dy in _NEIGHBOURS)


def get_area_from(garden: Garden, x: int, y: int, plot: str) -> Area:
    """The connected region of ``plot`` containing (x, y)."""
    stack = [(x, y)]
    visited: Area = {(x, y)}
    while stack:
        cx, cy = stack.pop()
        for dx, dy in _NEIGHBOURS:
            new = (cx + dx, cy + dy)
            if new not in visited and garden.is_plot(*new, plot):
                visited.add(new)
                stack.append(new)
    return visited


def get_areas(garden: Garden) -> list[Area]:
    """Every region of the garden, in reading order of their first cell."""
    areas: list[Area] = []
    claimed: Area = set()
    for index in range(len(garden)):
        x, y = garden.index_xy(index)
        if (x, y) in claimed:
            continue
        plot = garden.get(x, y)
        if plot is None:
            continue
        area = get_area_from(garden, x, y, plot)
        areas.append(area)
        claimed |= area
    return areas


def _start_position(area: Area) -> Position:
    return min(x for x, _ in area), min(y for _, y in area)


def _end_position(area: Area) -> Position:
    return max(0, *(x for x, _ in area)) + 2, max(0, *(y for _, y in area)) + 2


def _sides_on_line(
    area: Area, sx: int, sy: int, ex: int, ey: int, dx: int, dy: int
) -> set[tuple[int, bool]]:
    """Edges crossed when walking from (sx, sy) in steps of (dx, dy)."""
    edges: set[tuple[int, bool]] = set()
    x, y = sx, sy
    inside = False
    offset = 0
    while x <= ex and y <= ey:
        contains = (x, y) in area
        if inside != contains:
            edges.add((offset, contains))
            inside = contains
        x += dx
        y += dy
        offset += 1
    return edges


def get_area_sides(area: Area, dx: int, dy: int) -> int:
    """Count the straight sides of the area met while sweeping along (dx, dy)."""
    sx, sy = _start_position(area)
    ex, ey = _end_position(area)
    sides = 0
    current: set[tuple[int, bool]] = set()
    while ex >= sx and ey >= sy:
        edges = _sides_on_line(area, sx, sy, ex, ey, dy, dx)
        sides += len(edges - current)
        current = edges
        sx += dx
        sy += dy
    return sides


def fence_cost(garden: Garden) -> int:
    """Sum of area times perimeter over every region."""
    return sum(
        len(area) * sum(perimeter_count(area, x, y) for x, y in area)
        for area in get_areas(garden)
    )


def discounted_cost(garden: Garden) -> int:
    """Sum of area times number of sides over every region."""
    return sum(
        len(area) * (get_area_sides(area, 1, 0) + get_area_sides(area, 0, 1))
        for area in get_areas(garden)
    )


def parse_input(text: str) -> Garden:
    lines = text.splitlines()
    if not lines:
        raise FileFormatError("empty garden")
    plots = [char for line in lines for char in line]
    height = len(lines)
    return Garden(plots, len(plots) // height, height)


def solve_a(text: str) -> int:
    return fence_cost(parse_input(text))


def solve_b(text: str) -> int:
    return discounted_cost(parse_input(text))