"""Day 8: Resonant Collinearity."""

from __future__ import annotations

import itertools
from collections import defaultdict
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

TITLE = "Day 8: Resonant Collinearity"

Position = tuple[int, int]


@dataclass(frozen=True)
class Antenna:
    freq: str
    x: int
    y: int

    def delta(self, other: Antenna) -> Position:
        return other.x - self.x, other.y - self.y

    def antinode(self, other: Antenna) -> Position:
        """The point beyond ``other`` at the same distance as ``self``."""
        dx, dy = self.delta(other)
        return other.x + dx, other.y + dy


def parse_input(text: str) -> tuple[int, int, list[Antenna]]:
    """Return the map width, height and every antenna on it."""
    lines = text.splitlines()
    width = len(lines[-1]) if lines else 0
    antennas = [
        Antenna(char, x, y)
        for y, line in enumerate(lines)
        for x, char in enumerate(line)
        if char != "."
    ]
    return width, len(lines), antennas


def group_antennas(antennas: Iterable[Antenna]) -> dict[str, list[Antenna]]:
    groups: dict[str, list[Antenna]] = defaultdict(list)
    for antenna in antennas:
        groups[antenna.freq].append(antenna)
    return dict(groups)


def get_antinodes(antennas: Sequence[Antenna]) -> set[Position]:
    """Antinodes of every pair, including those off the map."""
    nodes: set[Position] = set()
    for left, right in itertools.combinations(antennas, 2):
        nodes.add(left.antinode(right))
        nodes.add(right.antinode(left))
    return nodes


def in_world(x: int, y: int, world: Position) -> bool:
    return 0 <= x < world[0] and 0 <= y < world[1]


def _harmonics(start: Position, delta: Position, world: Position) -> Iterable[Position]:
    x, y = start[0] + delta[0], start[1] + delta[1]
    while in_world(x, y, world):
        yield x, y
        x += delta[0]
        y += delta[1]


def get_harmonics(antennas: Sequence[Antenna], world: Position) -> set[Position]:
    """Every in-world point in line with a pair of antennas."""
    nodes: set[Position] = set()
    for left, right in itertools.combinations(antennas, 2):
        nodes.update(_harmonics((right.x, right.y), right.delta(left), world))
        nodes.update(_harmonics((left.x, left.y), left.delta(right), world))
    return nodes


def count_antinodes(width: int, height: int, antennas: Iterable[Antenna]) -> int:
    world = (width, height)
    nodes: set[Position] = set()
    for group in group_antennas(antennas).values():
        nodes |= get_antinodes(group)
    return sum(1 for x, y in nodes if in_world(x, y, world))


def count_harmonics(width: int, height: int, antennas: Iterable[Antenna]) -> int:
    world = (width, height)
    nodes: set[Position] = set()
    for group in group_antennas(antennas).values():
        nodes |= get_harmonics(group, world)
    return len(nodes)


def solve_a(text: str) -> int:
    return count_antinodes(*parse_input(text))


def solve_b(text: str) -> int:
    return count_harmonics(*parse_input(text))