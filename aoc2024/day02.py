"""Day 2: Red-Nosed Reports."""

from __future__ import annotations

import re
from collections.abc import Sequence

from .common import ParseIntError

TITLE = "Day 2: Red-Nosed Reports"

MAX_DIFF = 3

_INT = re.compile(r"[+-]?[0-9]+")


def _cmp(a: int, b: int) -> int:
    return (a > b) - (a < b)


def parse_report(line: str) -> list[int]:
    """Parse a whitespace separated list of levels."""
    levels = line.split()
    if not all(_INT.fullmatch(level) for level in levels):
        raise ParseIntError(line)
    return [int(level) for level in levels]


def parse_input(text: str) -> list[list[int]]:
    return [parse_report(line) for line in text.splitlines()]


def get_ordering(report: Sequence[int]) -> int:
    """Dominant direction of the report: -1 rising, 1 falling, 0 undecided.

    The value matches the comparison of each level with its successor.
    """
    steps = [_cmp(b, a) for a, b in zip(report, report[1:])]
    increasing = steps.count(1)
    decreasing = steps.count(-1)
    return _cmp(decreasing, increasing)


def is_bad_level(mode: int, report: Sequence[int], level: int) -> bool:
    """Whether the step into ``level`` breaks the rules for ``mode``."""
    previous, current = report[level - 1], report[level]
    return abs(previous - current) > MAX_DIFF or _cmp(previous, current) != mode


def find_bad_level(report: Sequence[int], mode: int) -> int | None:
    """Index of the first bad level, or None."""
    return next(
        (i for i in range(1, len(report)) if is_bad_level(mode, report, i)),
        None,
    )


def is_safe(report: Sequence[int]) -> bool:
    return find_bad_level(report, get_ordering(report)) is None


def is_safe_with_dampener(report: Sequence[int]) -> bool:
    """Whether the report is safe after removing at most one level."""
    bad = find_bad_level(report, get_ordering(report))
    if bad is None:
        return True
    without_previous = [*report[: bad - 1], *report[bad:]]
    without_current = [*report[:bad], *report[bad + 1 :]]
    return is_safe(without_previous) or is_safe(without_current)


def solve_a(text: str) -> int:
    return sum(1 for report in parse_input(text) if is_safe(report))


def solve_b(text: str) -> int:
    return sum(1 for report in parse_input(text) if is_safe_with_dampener(report))