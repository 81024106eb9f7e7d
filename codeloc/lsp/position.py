"""Zero-based text document positions."""

from __future__ import annotations

from dataclasses import dataclass

from ..errors import InvalidPositionError

U32_MAX = 2**32 - 1


def _check_coordinate(value: object) -> str | None:
    if isinstance(value, bool) or not isinstance(value, int):
        return f"expected an unsigned integer, got {type(value).__name__}"
    if value < 0 or value > U32_MAX:
        return f"{value} is outside 0..{U32_MAX}"
    return None


@dataclass(frozen=True, slots=True, order=True)
class Position:
    """A (line, character) coordinate, both zero-based.

    Positions are ordered lexicographically: first by line, then by character.
    The rich comparison operators follow the same order as ``is_before`` and
    ``is_after``.
    """

    line: int
    character: int

    def __post_init__(self) -> None:
        for name in ("line", "character"):
            reason = _check_coordinate(getattr(self, name))
            if reason is not None:
                raise InvalidPositionError(self.line, self.character, f"{name}: {reason}")

    def is_before(self, other: Position) -> bool:
        """Return True if this position comes strictly before ``other``."""
        return self.line < other.line or (self.line == other.line and self.character < other.character)

    def is_after(self, other: Position) -> bool:
        """Return True if this position comes strictly after ``other``."""
        return self.line > other.line or (self.line == other.line and self.character > other.character)

    def __str__(self) -> str:
        return f"{self.line}:{self.character}"


__all__ = ["Position", "U32_MAX"]
