"""Command line entry point that runs the daily puzzles."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path

from . import (
    day01,
    day02,
    day03,
    day04,
    day05,
    day06,
    day07,
    day08,
    day09,
    day10,
    day11,
    day12,
    day13,
    day14,
    day15,
    day16,
    day17,
    day18,
    day19,
)
from .common import AdventError, read_input

ALL_TITLE = "Advent of Code"
DEFAULT_DAY = 19


class Advent(IntEnum):
    ADVENT_OF_CODE = 0
    DAY1 = 1
    DAY2 = 2
    DAY3 = 3
    DAY4 = 4
    DAY5 = 5
    DAY6 = 6
    DAY7 = 7
    DAY8 = 8
    DAY9 = 9
    DAY10 = 10
    DAY11 = 11
    DAY12 = 12
    DAY13 = 13
    DAY14 = 14
    DAY15 = 15
    DAY16 = 16
    DAY17 = 17
    DAY18 = 18
    DAY19 = 19
    DAY20 = 20
    DAY21 = 21
    DAY22 = 22
    DAY23 = 23
    DAY24 = 24
    DAY25 = 25


class _DayMissing(LookupError):
    """The requested day has no solution."""


@dataclass(frozen=True)
class _Part:
    label: str
    solve: Callable[[str], object]
    missing: str = "Not found."


@dataclass(frozen=True)
class _Day:
    title: str
    parts: tuple[_Part, ...]


def _day(title: str, *parts: _Part) -> _Day:
    return _Day(title, parts)


_DAYS: dict[Advent, _Day] = {
    Advent.DAY1: _day(
        "Day 1: Historian Hysteria",
        _Part("distance", day01.solve_a),
        _Part("Similarity", day01.solve_b),
    ),
    Advent.DAY2: _day(
        "Day 2: Red-Nosed Reports",
        _Part("Safe reports", day02.solve_a),
        _Part("Safe reports with dampener", day02.solve_b),
    ),
    Advent.DAY3: _day(
        "Day 3: Mull It Over", _Part("Sum", day03.solve_a), _Part("Sum", day03.solve_b)
    ),
    Advent.DAY4: _day(
        "Day 4: Ceres Search",
        _Part("Solutions", day04.solve_a),
        _Part("X-MAS Solutions", day04.solve_b),
    ),
    Advent.DAY5: _day(
        "Day 5: Print Queue", _Part("Sum", day05.solve_a), _Part("Sum", day05.solve_b)
    ),
    Advent.DAY6: _day(
        "Day 6: Guard Gallivant",
        _Part("Visited places", day06.solve_a),
        _Part("Possible walls", day06.solve_b),
    ),
    Advent.DAY7: _day(
        "Day 7: Bridge Repair", _Part("Sum", day07.solve_a), _Part("Sum", day07.solve_b)
    ),
    Advent.DAY8: _day(
        "Day 8: Resonant Collinearity",
        _Part("Antinodes", day08.solve_a),
        _Part("Antinodes", day08.solve_b),
    ),
    Advent.DAY9: _day(
        "Day 9: Disk Fragmenter",
        _Part("checksum", day09.solve_a),
        _Part("checksum", day09.solve_b),
    ),
    Advent.DAY10: _day(
        "Day 10: Hoof It",
        _Part("Trailhead score", day10.solve_a),
        _Part("Trailhead score", day10.solve_b),
    ),
    Advent.DAY11: _day(
        "Day 11: Plutonian Pebbles",
        _Part("Stones", day11.solve_a),
        _Part("Stones", day11.solve_b),
    ),
    Advent.DAY12: _day(
        "Day 12: Garden Groups", _Part("Cost", day12.solve_a), _Part("Cost", day12.solve_b)
    ),
    Advent.DAY13: _day(
        "Day 13: Claw Contraption",
        _Part("Cost", day13.solve_a),
        _Part("Cost", day13.solve_b),
    ),
    Advent.DAY14: _day("Day 14: Restroom Redoubt", _Part("Safety factor", day14.solve_a)),
    Advent.DAY15: _day(
        "Day 15: Warehouse Woes",
        _Part("GPS score", day15.solve_a),
        _Part("GPS score", day15.solve_b),
    ),
    Advent.DAY16: _day(
        "Day 16: Reindeer Maze",
        _Part("Score", day16.solve_a, "Path not found!"),
        _Part("Seats", day16.solve_b, "Path not found!"),
    ),
    Advent.DAY17: _day(
        "Day 17: Chronospatial Computer",
        _Part("Output", day17.solve_a),
        _Part("Fixed Register", day17.solve_b, "Could not find solution :("),
    ),
    Advent.DAY18: _day(
        "Day 18: RAM Run",
        _Part("Shortest path", day18.solve_a),
        _Part("Latest byte pos", day18.solve_b, "Not found."),
    ),
    Advent.DAY19: _day(
        "Day 19: Linen Layout",
        _Part("Possible designs", day19.solve_a),
        _Part("Arrangements", day19.solve_b),
    ),
}


def _format(value: object) -> str:
    if isinstance(value, tuple):
        return ",".join(str(item) for item in value)
    if isinstance(value, list):
        return "\n" + "\n".join(str(item) for item in value)
    return str(value)


def run_day(day: Advent | int, input_dir: str | Path = "inp") -> list[object]:
    """Print the title and answers of one day and return the answers.

    A part whose input cannot be read or parsed prints the error and yields None.
    """
    day = Advent(day)
    if day is Advent.ADVENT_OF_CODE:
        print(f"\n~~~~~ {ALL_TITLE} ~~~~~")
        run_all(input_dir)
        return []
    entry = _DAYS.get(day)
    if entry is None:
        raise _DayMissing("Day is missing!")
    print(f"\n~~~~~ {entry.title} ~~~~~")
    results: list[object] = []
    for part in entry.parts:
        try:
            value = part.solve(read_input(int(day), input_dir))
        except AdventError as err:
            print(f"Error: {type(err).__name__}: {err}")
            results.append(None)
            continue
        if value is None:
            print(part.missing)
        else:
            print(f"{part.label}: {_format(value)}")
        results.append(value)
    return results


def run_all(input_dir: str | Path = "inp") -> dict[int, list[object]]:
    """Run every solved day in order."""
    return {int(day): run_day(day, input_dir) for day in _DAYS}


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="aoc2024", description="Run the daily puzzles.")
    parser.add_argument(
        "day",
        nargs="?",
        default=str(DEFAULT_DAY),
        help="day number from 1 to 25, or 'all'",
    )
    parser.add_argument("--input-dir", default="inp", help="directory holding NN.txt inputs")
    args = parser.parse_args(argv)
    if args.day == "all":
        day = Advent.ADVENT_OF_CODE
    else:
        try:
            day = Advent(int(args.day))
        except ValueError:
            parser.error(f"invalid day: {args.day}")
    try:
        run_day(day, args.input_dir)
    except _DayMissing as err:
        print(err, file=sys.stderr)
        return 1
    print()
    return 0


if __name__ == "__main__":
    sys.exit(main())