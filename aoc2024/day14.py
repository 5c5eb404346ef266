"""Day 14: Restroom Redoubt."""

from __future__ import annotations

import dataclasses
import math
import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from .common import FileFormatError, ParseIntError

TITLE = "Day 14: Restroom Redoubt"

WIDTH = 101
HEIGHT = 103

_ROBOT = re.compile(r"p=(-?\d+),(-?\d+) v=(-?\d+),(-?\d+)", re.ASCII)


@dataclass
class Robot:
    """A security robot on the wrapping floor of the bathroom."""

    x: int
    y: int
    vx: int
    vy: int

    def step(self) -> None:
        """Move one second forward, wrapping around the edges."""
        self.x = (self.x + self.vx + WIDTH) % WIDTH
        self.y = (self.y + self.vy + HEIGHT) % HEIGHT

    def back(self) -> None:
        """Move one second backward, wrapping around the edges."""
        self.x = (self.x - self.vx + WIDTH) % WIDTH
        self.y = (self.y - self.vy + HEIGHT) % HEIGHT


def parse_robot(line: str) -> Robot:
    """Parse ``p=x,y v=vx,vy``."""
    match = _ROBOT.search(line)
    if match is None:
        raise FileFormatError(line)
    try:
        x, y, vx, vy = (int(group) for group in match.groups())
    except ValueError as err:
        raise ParseIntError(line) from err
    return Robot(x, y, vx, vy)


def parse_input(text: str) -> list[Robot]:
    return [parse_robot(line) for line in text.splitlines()]


def get_quadrants(robots: Iterable[Robot]) -> tuple[int, int, int, int]:
    """Robots in the top-left, top-right, bottom-left and bottom-right quadrants.

    Robots on the middle row or column belong to no quadrant.
    """
    cx = WIDTH // 2
    cy = HEIGHT // 2
    tl = tr = bl = br = 0
    for robot in robots:
        if robot.x == cx or robot.y == cy:
            continue
        left = robot.x < cx
        top = robot.y < cy
        if left and top:
            tl += 1
        elif left:
            bl += 1
        elif top:
            tr += 1
        else:
            br += 1
    return tl, tr, bl, br


def safety_factor(robots: Sequence[Robot], seconds: int) -> int:
    """Product of the quadrant counts after ``seconds`` seconds.

    The given robots are left untouched.
    """
    moved = [dataclasses.replace(robot) for robot in robots]
    for robot in moved:
        for _ in range(seconds):
            robot.step()
    return math.prod(get_quadrants(moved))


def solve_a(text: str) -> int:
    return safety_factor(parse_input(text), 100)