"""Day 11: Plutonian Pebbles."""

from __future__ import annotations

import re
from collections.abc import Iterable
from functools import cache

from .common import ParseIntError

TITLE = "Day 11: Plutonian Pebbles"

_UINT = re.compile(r"\+?[0-9]+")


def step_stone(stone: int) -> tuple[int, ...]:
    """The stones that one stone turns into after a blink."""
    digits = str(stone)
    if len(digits) % 2 == 0:
        half = len(digits) // 2
        return int(digits[:half]), int(digits[half:])
    if stone == 0:
        return (1,)
    return (stone * 2024,)


def step_stones(stones: Iterable[int]) -> list[int]:
    """All stones after one blink, in order."""
    return [new for stone in stones for new in step_stone(stone)]


@cache
def count_after(stone: int, amount: int) -> int:
    """Number of stones that one stone becomes after ``amount`` blinks."""
    if amount == 0:
        return 1
    return sum(count_after(new, amount - 1) for new in step_stone(stone))


def parse_input(text: str) -> list[int]:
    stones = []
    for word in text.split():
        if not _UINT.fullmatch(word):
            raise ParseIntError(word)
        stones.append(int(word))
    return stones


def solve_a(text: str) -> int:
    stones = parse_input(text)
    for _ in range(25):
        stones = step_stones(stones)
    return len(stones)


def solve_b(text: str) -> int:
    return sum(count_after(stone, 75) for stone in parse_input(text))