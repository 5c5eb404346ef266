"""Day 4: Ceres Search."""

from __future__ import annotations

from collections.abc import Sequence

from .common import FileFormatError

TITLE = "Day 4: Ceres Search"

_WORD = "XMAS"
_DIRECTIONS = (
    (-1, -1),
    (0, -1),
    (1, -1),
    (-1, 0),
    (1, 0),
    (-1, 1),
    (0, 1),
    (1, 1),
)
_CROSS_PAIRS = {("M", "S"), ("S", "M")}


class Puzzle:
    """A rectangular grid of letters."""

    def __init__(self, lines: Sequence[str]) -> None:
        if not lines:
            raise FileFormatError("empty puzzle")
        self.height = len(lines)
        self.width = len(lines[0])
        self._letters = [char for line in lines for char in line]

    def get(self, x: int, y: int) -> str | None:
        if x < 0 or y < 0 or x >= self.width or y >= self.height:
            return None
        index = y * self.width + x
        return self._letters[index] if index < len(self._letters) else None

    def __len__(self) -> int:
        return len(self._letters)

    def index_to_xy(self, i: int) -> tuple[int, int]:
        return i % self.width, i // self.width


def contains_xmas(puzzle: Puzzle, start_x: int, start_y: int, dx: int, dy: int) -> bool:
    """Whether XMAS is spelled from the start cell in the given direction."""
    return all(
        puzzle.get(start_x + dx * step, start_y + dy * step) == letter
        for step, letter in enumerate(_WORD)
    )


def find_solutions(puzzle: Puzzle) -> int:
    """Count every occurrence of XMAS in all eight directions."""
    return sum(
        contains_xmas(puzzle, *puzzle.index_to_xy(i), dx, dy)
        for i in range(len(puzzle))
        for dx, dy in _DIRECTIONS
    )


def is_x_mas(puzzle: Puzzle, x: int, y: int) -> bool:
    """Whether two MAS words cross at the A in (x, y)."""
    if puzzle.get(x, y) != "A":
        return False
    falling = (puzzle.get(x - 1, y - 1), puzzle.get(x + 1, y + 1))
    rising = (puzzle.get(x - 1, y + 1), puzzle.get(x + 1, y - 1))
    return falling in _CROSS_PAIRS and rising in _CROSS_PAIRS


def find_x_mas(puzzle: Puzzle) -> int:
    return sum(is_x_mas(puzzle, *puzzle.index_to_xy(i)) for i in range(len(puzzle)))


def parse_input(text: str) -> Puzzle:
    return Puzzle(text.splitlines())


def solve_a(text: str) -> int:
    return find_solutions(parse_input(text))


def solve_b(text: str) -> int:
    return find_x_mas(parse_input(text))