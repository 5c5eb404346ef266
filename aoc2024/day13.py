"""Day 13: Claw Contraption."""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass

from .common import FileFormatError, ParseIntError

TITLE = "Day 13: Claw Contraption"

PRIZE_OFFSET = 10000000000000

_INT = re.compile(r"[+-]?[0-9]+")


def _trunc_div(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


def _parse_int(text: str) -> int:
    if not _INT.fullmatch(text):
        raise ParseIntError(text)
    return int(text)


@dataclass(frozen=True)
class Pos:
    x: int
    y: int

    def __sub__(self, other: Pos) -> Pos:
        return Pos(self.x - other.x, self.y - other.y)

    def scaled(self, amount: int) -> Pos:
        return Pos(self.x * amount, self.y * amount)


@dataclass(frozen=True)
class Press:
    a: int
    b: int

    def cost(self) -> int:
        """Tokens spent: three for each A press, one for each B press."""
        return self.a * 3 + self.b


@dataclass
class Machine:
    btn_a: Pos
    btn_b: Pos
    prize: Pos

    def is_winning(self, press_a: int, press_b: int) -> bool:
        return (
            self.btn_a.x * press_a + self.btn_b.x * press_b == self.prize.x
            and self.btn_a.y * press_a + self.btn_b.y * press_b == self.prize.y
        )

    def fix_prize(self) -> None:
        """Move the prize by the unit conversion offset."""
        self.prize = Pos(self.prize.x + PRIZE_OFFSET, self.prize.y + PRIZE_OFFSET)

    def cram_a(self) -> int | None:
        """A presses from Cramer's rule, or None when not a whole number."""
        numerator = self.prize.x * self.btn_b.y - self.prize.y * self.btn_b.x
        determinant = self.btn_a.x * self.btn_b.y - self.btn_a.y * self.btn_b.x
        if numerator % determinant != 0:
            return None
        return _trunc_div(numerator, determinant)

    def get_b(self, a: int) -> Press:
        """The press pair using ``a`` A presses and B presses to cover the rest of X."""
        remaining = self.prize - self.btn_a.scaled(a)
        return Press(a, _trunc_div(remaining.x, self.btn_b.x))

    def wins(self) -> Iterator[Press]:
        """Every winning press pair, from the most A presses down."""
        a_press = _trunc_div(self.prize.x, self.btn_a.x) + 1
        while a_press >= 0:
            remaining = self.prize - self.btn_a.scaled(a_press)
            b_press = _trunc_div(remaining.x, self.btn_b.x)
            if self.is_winning(a_press, b_press):
                yield Press(a_press, b_press)
            a_press -= 1


def _split_pair(text: str, marker: str) -> Pos:
    left, sep, right = text.partition(",")
    if not sep:
        raise FileFormatError(text)
    _, sep_x, x = left.partition(marker)
    _, sep_y, y = right.partition(marker)
    if not sep_x or not sep_y:
        raise FileFormatError(text)
    return Pos(_parse_int(x), _parse_int(y))


def parse_button(button: str) -> Pos:
    """Parse ``Button A: X+94, Y+34``."""
    return _split_pair(button, "+")


def parse_prize(prize: str) -> Pos:
    """Parse ``Prize: X=8400, Y=5400``."""
    return _split_pair(prize, "=")


def parse_machine(machine: str) -> Machine:
    lines = machine.splitlines()
    if len(lines) < 3:
        raise FileFormatError(machine)
    return Machine(parse_button(lines[0]), parse_button(lines[1]), parse_prize(lines[2]))


def parse_input(text: str) -> list[Machine]:
    return [parse_machine(block) for block in text.split("\n\n")]


def solve_a(text: str) -> int:
    total = 0
    for machine in parse_input(text):
        total += min((press.cost() for press in machine.wins()), default=0)
    return total


def solve_b(text: str) -> int:
    total = 0
    for machine in parse_input(text):
        machine.fix_prize()
        a = machine.cram_a()
        if a is not None:
            total += machine.get_b(a).cost()
    return total