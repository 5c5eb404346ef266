"""Day 3: Mull It Over."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass

TITLE = "Day 3: Mull It Over"

_MAX_DIGITS = 3


@dataclass(frozen=True)
class Mul:
    left: int
    right: int


@dataclass(frozen=True)
class Do:
    pass


@dataclass(frozen=True)
class Dont:
    pass


Token = Mul | Do | Dont


class Tokenizer:
    """Scan corrupted memory for ``mul(a,b)``, ``do()`` and ``don't()``."""

    def __init__(self, content: str) -> None:
        self._content = content
        self._pos = 0

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        matchers: tuple[Callable[[], Token | None], ...] = (
            self._mul,
            self._dont,
            self._do,
        )
        while self._pos < len(self._content):
            for matcher in matchers:
                start = self._pos
                token = matcher()
                if token is not None:
                    return token
                self._pos = start
            self._pos += 1
        raise StopIteration

    def _consume(self, text: str) -> bool:
        if self._content.startswith(text, self._pos):
            self._pos += len(text)
            return True
        return False

    def _number(self) -> int | None:
        digits = self._content[self._pos : self._pos + _MAX_DIGITS]
        length = 0
        for char in digits:
            if not char.isnumeric():
                break
            length += 1
        text = digits[:length]
        if not text or not (text.isascii() and text.isdigit()):
            return None
        self._pos += length
        return int(text)

    def _mul(self) -> Mul | None:
        if not self._consume("mul("):
            return None
        left = self._number()
        if left is None or not self._consume(","):
            return None
        right = self._number()
        if right is None or not self._consume(")"):
            return None
        return Mul(left, right)

    def _dont(self) -> Dont | None:
        return Dont() if self._consume("don't()") else None

    def _do(self) -> Do | None:
        return Do() if self._consume("do()") else None


def solve_a(text: str) -> int:
    """Sum of every multiplication in the memory."""
    return sum(
        token.left * token.right for token in Tokenizer(text) if isinstance(token, Mul)
    )


def solve_b(text: str) -> int:
    """Sum of multiplications that are enabled by ``do()``/``don't()``."""
    total = 0
    enabled = True
    for token in Tokenizer(text):
        match token:
            case Mul(left, right):
                if enabled:
                    total += left * right
            case Do():
                enabled = True
            case Dont():
                enabled = False
    return total