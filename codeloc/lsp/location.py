"""Locations: a range inside a file."""

from __future__ import annotations

from dataclasses import dataclass

from .range import Range
from .uri import FileUri


@dataclass(frozen=True, slots=True)
class Location:
    uri: FileUri
    range: Range

    @classmethod
    def validated(cls, uri_text: str, range_: Range) -> Location:
        """Build a location from URI text, checking the URI first and then the range.

        Raises ``InvalidUriError`` for malformed or non-file URIs and
        ``InvalidRangeError`` when the range starts after it ends.
        """
        uri = FileUri.validated(uri_text)
        checked = Range.validated(range_.start, range_.end)
        return cls(uri, checked)

    @property
    def filename(self) -> str | None:
        return self.uri.filename

    def __str__(self) -> str:
        return f"{self.uri}:{self.range}"


__all__ = ["Location"]
