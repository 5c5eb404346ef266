"""Day 19: Linen Layout."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum

from .common import FileFormatError, UnknownStripeError

TITLE = "Day 19: Linen Layout"


class Stripe(Enum):
    WHITE = "w"
    BLUE = "u"
    BLACK = "b"
    RED = "r"
    GREEN = "g"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Pattern:
    """A sequence of coloured stripes."""

    stripes: tuple[Stripe, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "stripes", tuple(self.stripes))

    def concat(self, other: Pattern) -> Pattern:
        return Pattern(self.stripes + other.stripes)

    def slice(self, start: int) -> Pattern:
        return Pattern(self.stripes[start:])

    def matches(self, other: Pattern, offset: int) -> bool:
        """Whether ``other`` appears in this pattern at ``offset``."""
        if len(other) > len(self) - offset:
            return False
        return self.stripes[offset : offset + len(other)] == other.stripes

    def __len__(self) -> int:
        return len(self.stripes)

    def __str__(self) -> str:
        return "".join(str(stripe) for stripe in self.stripes)


class LenMap:
    """Counts of known patterns, grouped by pattern length."""

    def __init__(self, max_length: int, patterns: Iterable[Pattern]) -> None:
        self._maps: list[dict[Pattern, int]] = [{} for _ in range(max_length + 1)]
        for pattern in patterns:
            if len(pattern) > max_length:
                raise ValueError(f"pattern {pattern} is longer than {max_length}")
            self._maps[len(pattern)][pattern] = 1

    def get_len(self, length: int) -> dict[Pattern, int]:
        return self._maps[length]

    def get(self, pattern: Pattern) -> int | None:
        if len(pattern) >= len(self._maps):
            return None
        return self._maps[len(pattern)].get(pattern)

    def add(self, pattern: Pattern, count: int) -> None:
        bucket = self._maps[len(pattern)]
        bucket[pattern] = bucket.get(pattern, 0) + count


def _possible(
    desired: Pattern, patterns: Sequence[Pattern], offset: int, failed: set[int]
) -> bool:
    if offset == len(desired):
        return True
    if offset in failed:
        return False
    for pattern in patterns:
        if desired.matches(pattern, offset) and _possible(
            desired, patterns, offset + len(pattern), failed
        ):
            return True
    failed.add(offset)
    return False


def is_possible_pattern(desired: Pattern, patterns: Sequence[Pattern], offset: int = 0) -> bool:
    """Whether ``desired`` from ``offset`` on can be built from the towels."""
    return _possible(desired, patterns, offset, set())


def add_possible_patterns(patterns: LenMap, length: int) -> None:
    """Add every pattern of ``length`` made by joining two shorter known patterns."""
    new_patterns: Counter[Pattern] = Counter()
    for i in range(1, length):
        for left, left_count in patterns.get_len(i).items():
            for right, right_count in patterns.get_len(length - i).items():
                product = left_count * right_count
                new_patterns[left.concat(right)] += product
                new_patterns[right.concat(left)] += product
    for pattern, count in new_patterns.items():
        patterns.add(pattern, count)


def arrangement_counts(patterns: Iterable[Pattern], desired: Sequence[Pattern]) -> list[int | None]:
    """Arrangement count for each design, or None when it cannot be made."""
    max_length = max((len(design) for design in desired), default=0)
    cache = LenMap(max_length, patterns)
    for length in range(2, max_length + 1):
        add_possible_patterns(cache, length)
    return [cache.get(design) for design in desired]


def parse_stripe(stripe: str) -> Stripe:
    try:
        return Stripe(stripe)
    except ValueError:
        raise UnknownStripeError(stripe) from None


def parse_pattern(pattern: str) -> Pattern:
    return Pattern(tuple(parse_stripe(char) for char in pattern))


def parse_input(text: str) -> tuple[list[Pattern], list[Pattern]]:
    """Return the available towels and the desired designs."""
    towels, sep, designs = text.partition("\n\n")
    if not sep:
        raise FileFormatError("missing blank line between towels and designs")
    patterns = [parse_pattern(towel) for towel in towels.split(", ")]
    desired = [parse_pattern(line) for line in designs.splitlines()]
    return patterns, desired


def solve_a(text: str) -> int:
    patterns, desired = parse_input(text)
    return sum(1 for design in desired if is_possible_pattern(design, patterns, 0))


def solve_b(text: str) -> list[int | None]:
    patterns, desired = parse_input(text)
    return arrangement_counts(patterns, desired)