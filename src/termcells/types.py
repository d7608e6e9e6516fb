"""Core value types for termcells."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


class InvalidWidthError(ValueError):
    """Raised when a column budget is not a positive integer."""


@dataclass(frozen=True)
class StyleSpan:
    """Style applied to the codepoints in ``[start, end)``."""

    start: int
    end: int
    style: Any = None


@dataclass(frozen=True)
class StyledCharacter:
    """An indivisible display unit: a base codepoint plus its trailing marks.

    ``value`` holds every codepoint of the unit in input order, so joining the
    values of a segmented string gives the string back.
    """

    value: str
    width: int
    style: Any = None


@dataclass(frozen=True)
class Line:
    """A row of units. ``hard_break`` marks a line that ended at a newline."""

    characters: tuple[StyledCharacter, ...] = field(default_factory=tuple)
    hard_break: bool = False

    @property
    def width(self) -> int:
        return sum(c.width for c in self.characters)

    @property
    def text(self) -> str:
        return "".join(c.value for c in self.characters)


def check_max_width(max_width: int) -> None:
    """Raise :class:`InvalidWidthError` unless *max_width* is a positive int."""
    if isinstance(max_width, bool) or not isinstance(max_width, int):
        raise InvalidWidthError(
            f"max_width must be an int, got {type(max_width).__name__}"
        )
    if max_width <= 0:
        raise InvalidWidthError(f"max_width must be positive, got {max_width}")
