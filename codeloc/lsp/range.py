"""Ranges between two positions in a text document."""

from __future__ import annotations

from dataclasses import dataclass

from ..errors import InvalidRangeError
from ..logging import get_logger
from .position import Position

LOGGER = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Range:
    """A span from ``start`` to ``end``, both inclusive.

    Calling ``Range(start, end)`` directly trusts the caller; use
    :meth:`Range.validated` for anything that comes from outside.
    """

    start: Position
    end: Position

    @classmethod
    def validated(cls, start: Position, end: Position) -> Range:
        """Return a range, raising ``InvalidRangeError`` if start is after end."""
        if start.is_after(end):
            LOGGER.debug("Rejected range %s-%s: start after end", start, end)
            raise InvalidRangeError(start, end)
        return cls(start, end)

    def contains_position(self, position: Position) -> bool:
        """Return True if ``position`` lies within the range, boundaries included."""
        return not position.is_before(self.start) and not position.is_after(self.end)

    def contains_range(self, other: Range) -> bool:
        """Return True if both endpoints of ``other`` lie within this range.

        Ranges have no gaps, so checking the two endpoints covers every
        position in between.
        """
        return self.contains_position(other.start) and self.contains_position(other.end)

    def is_empty(self) -> bool:
        """Return True for a zero-width range."""
        return self.start == self.end

    def __contains__(self, position: object) -> bool:
        return isinstance(position, Position) and self.contains_position(position)

    def __str__(self) -> str:
        return f"{self.start}-{self.end}"


__all__ = ["Range"]
