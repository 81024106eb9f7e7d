"""Errors raised while validating positions, ranges, URIs and locations."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from .lsp.position import Position


class LocationError(ValueError):
    """Base class for every location-related failure."""

    kind: ClassVar[str] = "location"

    def to_data(self) -> dict[str, object]:
        """Return a JSON-friendly description of the error."""
        return {"kind": self.kind, "message": str(self)}


class InvalidUriError(LocationError):
    """URI text is malformed or does not use the ``file`` scheme."""

    kind: ClassVar[str] = "invalid_uri"

    def __init__(self, detail: str, *, scheme: str | None = None) -> None:
        self.detail = detail
        self.scheme = scheme
        super().__init__(f"Invalid URI format: {detail}")

    @classmethod
    def scheme_mismatch(cls, scheme: str | None) -> InvalidUriError:
        """Build the error for a URI whose scheme is not ``file``."""
        return cls(f"URI must use 'file' scheme, got {scheme or 'None'}", scheme=scheme)

    def to_data(self) -> dict[str, object]:
        data = super().to_data()
        data["detail"] = self.detail
        if self.scheme is not None:
            data["scheme"] = self.scheme
        return data


class InvalidPositionError(LocationError):
    """Position coordinates cannot be represented or fall outside a document."""

    kind: ClassVar[str] = "invalid_position"

    def __init__(self, line: object, character: object, reason: str) -> None:
        self.line = line
        self.character = character
        self.reason = reason
        super().__init__(f"Invalid position: line={line}, character={character}, reason={reason}")

    def to_data(self) -> dict[str, object]:
        data = super().to_data()
        data.update(line=self.line, character=self.character, reason=self.reason)
        return data


class InvalidRangeError(LocationError):
    """Range start occurs strictly after its end."""

    kind: ClassVar[str] = "invalid_range"

    def __init__(self, start: Position | None = None, end: Position | None = None) -> None:
        self.start = start
        self.end = end
        super().__init__("Invalid range: start position occurs after end position")

    def to_data(self) -> dict[str, object]:
        data = super().to_data()
        for name, position in (("start", self.start), ("end", self.end)):
            if position is not None:
                data[name] = {"line": position.line, "character": position.character}
        return data


class PositionOutOfBoundsError(LocationError):
    """Position lies outside the bounds of a known document."""

    kind: ClassVar[str] = "position_out_of_bounds"

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Position out of bounds: {detail}")


class DecodeError(LocationError):
    """Serialized payload cannot be decoded into a location value."""

    kind: ClassVar[str] = "decode"

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Invalid payload: {detail}")


__all__ = [
    "DecodeError",
    "InvalidPositionError",
    "InvalidRangeError",
    "InvalidUriError",
    "LocationError",
    "PositionOutOfBoundsError",
]
