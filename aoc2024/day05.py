"""Day 5: Print Queue."""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass
from functools import cmp_to_key

from .common import FileFormatError, ParseIntError, RuleError

TITLE = "Day 5: Print Queue"

_INT = re.compile(r"[+-]?[0-9]+")


def _parse_int(text: str, context: str) -> int:
    if not _INT.fullmatch(text):
        raise ParseIntError(context)
    return int(text)


@dataclass(frozen=True)
class Rule:
    """Page ``before`` must be printed ahead of page ``after``."""

    before: int
    after: int


def parse_rule(line: str) -> Rule:
    first, sep, second = line.partition("|")
    if not sep:
        raise RuleError(line)
    return Rule(_parse_int(first, first), _parse_int(second, second))


def parse_update(line: str) -> list[int]:
    return [_parse_int(page, line) for page in line.split(",")]


def parse_input(text: str) -> tuple[list[Rule], list[list[int]]]:
    """Split the input into ordering rules and page updates."""
    parts = text.split("\n\n", 1)
    if len(parts) < 2:
        raise FileFormatError("missing blank line between rules and updates")
    rules_text, updates_text = parts
    rules = [parse_rule(line) for line in rules_text.splitlines()]
    updates = [parse_update(line) for line in updates_text.splitlines()]
    return rules, updates


def is_valid_update(rules: Sequence[Rule], update: Sequence[int]) -> bool:
    """Whether no page appears after a page that must follow it."""
    prohibited: set[int] = set()
    for page in update:
        if page in prohibited:
            return False
        prohibited.update(rule.before for rule in rules if rule.after == page)
    return True


def update_middle(update: Sequence[int]) -> int:
    return update[len(update) // 2]


def compare_update(rules: Sequence[Rule], left: int, right: int) -> int:
    """Order two pages by the first rule mentioning both: -1, 0 or 1."""
    for rule in rules:
        if rule.before == left and rule.after == right:
            return -1
        if rule.before == right and rule.after == left:
            return 1
    return 0


def sort_update(rules: Sequence[Rule], update: Sequence[int]) -> list[int]:
    """Return the update with its pages put into rule order."""
    return sorted(update, key=cmp_to_key(lambda a, b: compare_update(rules, a, b)))


def solve_a(text: str) -> int:
    rules, updates = parse_input(text)
    return sum(
        update_middle(update) for update in updates if is_valid_update(rules, update)
    )


def solve_b(text: str) -> int:
    rules, updates = parse_input(text)
    return sum(
        update_middle(sort_update(rules, update))
        for update in updates
        if not is_valid_update(rules, update)
    )