"""Day 1: Historian Hysteria."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence

from .common import InvalidLineError, ParseIntError

TITLE = "Day 1: Historian Hysteria"

_INT = re.compile(r"[+-]?[0-9]+")


def _parse_int(token: str) -> int:
    if not _INT.fullmatch(token):
        raise ParseIntError(token)
    return int(token)


def parse_pair(line: str) -> tuple[int, int]:
    """Parse a line holding two location ids separated by whitespace."""
    parts = line.split()
    if len(parts) < 2:
        raise InvalidLineError(line)
    return _parse_int(parts[0]), _parse_int(parts[1])


def parse_input(text: str) -> list[tuple[int, int]]:
    """Parse every line of the input into a pair of location ids."""
    return [parse_pair(line) for line in text.splitlines()]


def total_distance(pairs: Iterable[tuple[int, int]]) -> int:
    """Sum of distances between the sorted left and right lists."""
    pairs = list(pairs)
    left = sorted(pair[0] for pair in pairs)
    right = sorted(pair[1] for pair in pairs)
    return sum(abs(a - b) for a, b in zip(left, right))


def similarity(right: Sequence[int], location: int) -> int:
    """The location id times the number of times it appears in ``right``."""
    return sum(location for value in right if value == location)


def similarity_score(pairs: Iterable[tuple[int, int]]) -> int:
    """Total similarity of the left list against the right list."""
    pairs = list(pairs)
    right = [pair[1] for pair in pairs]
    return sum(similarity(right, pair[0]) for pair in pairs)


def solve_a(text: str) -> int:
    return total_distance(parse_input(text))


def solve_b(text: str) -> int:
    return similarity_score(parse_input(text))