"""Day 7: Bridge Repair."""

from __future__ import annotations

import itertools
import re
from collections.abc import Sequence
from enum import Enum, auto

from .common import FileFormatError, ParseIntError

TITLE = "Day 7: Bridge Repair"

_INT = re.compile(r"[+-]?[0-9]+")

Equation = tuple[int, list[int]]


class Op(Enum):
    ADD = auto()
    MULTIPLY = auto()
    CONCAT = auto()

    def apply(self, lhs: int, rhs: int) -> int:
        if self is Op.ADD:
            return lhs + rhs
        if self is Op.MULTIPLY:
            return lhs * rhs
        return lhs * 10 ** len(str(rhs)) + rhs


def _parse_int(text: str, line: str) -> int:
    if not _INT.fullmatch(text):
        raise ParseIntError(line)
    return int(text)


def parse_equation(line: str) -> Equation:
    """Parse ``target: n1 n2 ...``."""
    target, sep, nums = line.partition(": ")
    if not sep:
        raise FileFormatError(line)
    numbers = [_parse_int(num, line) for num in nums.split()]
    if not numbers:
        raise FileFormatError(line)
    return _parse_int(target, line), numbers


def parse_input(text: str) -> list[Equation]:
    return [parse_equation(line) for line in text.splitlines()]


def apply_ops(nums: Sequence[int], ops: Sequence[Op]) -> int:
    """Evaluate the numbers left to right with the given operators."""
    total = nums[0]
    for num, op in zip(nums[1:], ops):
        total = op.apply(total, num)
    return total


def find_operators(equation: Equation, concat_enabled: bool) -> list[Op] | None:
    """First operator sequence that makes the equation true, or None."""
    target, nums = equation
    choices = [Op.ADD, Op.MULTIPLY]
    if concat_enabled:
        choices.append(Op.CONCAT)
    for ops in itertools.product(choices, repeat=max(len(nums) - 1, 1)):
        if apply_ops(nums, ops) == target:
            return list(ops)
    return None


def _calibration(text: str, concat_enabled: bool) -> int:
    return sum(
        equation[0]
        for equation in parse_input(text)
        if find_operators(equation, concat_enabled) is not None
    )


def solve_a(text: str) -> int:
    return _calibration(text, False)


def solve_b(text: str) -> int:
    return _calibration(text, True)