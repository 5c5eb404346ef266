"""Shared errors and input loading for the daily puzzles."""

from __future__ import annotations

from pathlib import Path


class AdventError(Exception):
    """Base class for every puzzle input or solving error."""


class FileReadError(AdventError):
    """The puzzle input file could not be read."""


class ParseIntError(AdventError):
    """A piece of text could not be parsed as an integer."""


class FileFormatError(AdventError):
    """The puzzle input does not have the expected layout."""


class InvalidLineError(AdventError):
    """A line of input is missing required fields."""


class RuleError(AdventError):
    """A page ordering rule is malformed."""


class UnknownTileError(AdventError):
    """A map contains a character that is not a known tile."""


class GuardNotFoundError(AdventError):
    """The map has no guard on it."""


class MultipleGuardsError(AdventError):
    """The map has more than one guard on it."""


class RobotNotFoundError(AdventError):
    """The warehouse map has no robot on it."""


class UnknownActionError(AdventError):
    """A robot move is not one of the known directions."""


class MissingStartError(AdventError):
    """The maze has no start tile."""


class MissingEndError(AdventError):
    """The maze has no end tile."""


class UnknownStripeError(AdventError):
    """A towel pattern holds an unknown stripe colour."""


def read_input(day: int, input_dir: str | Path = "inp") -> str:
    """Return the text of the input file for ``day`` (``<input_dir>/NN.txt``)."""
    path = Path(input_dir) / f"{day:02d}.txt"
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as err:
        raise FileReadError(str(path)) from err