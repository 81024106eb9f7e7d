"""URIs identifying documents, restricted to the ``file`` scheme."""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import TYPE_CHECKING, NamedTuple

from ..errors import InvalidUriError
from ..logging import get_logger

if TYPE_CHECKING:
    from .location import Location
    from .range import Range

LOGGER = get_logger(__name__)

FILE_SCHEME = "file"

# RFC 3986, section 3 and appendix A.
_UNRESERVED = "A-Za-z0-9\\-._~"
_SUB_DELIMS = "!$&'()*+,;="
_PCT_ENCODED = "%[0-9A-Fa-f]{2}"
_PCHAR = "(?:[" + _UNRESERVED + _SUB_DELIMS + ":@]|" + _PCT_ENCODED + ")"
_SCHEME = "[A-Za-z][A-Za-z0-9+\\-.]*"
_USERINFO = "(?:[" + _UNRESERVED + _SUB_DELIMS + ":]|" + _PCT_ENCODED + ")*"
_IP_LITERAL = "\\[(?:[0-9A-Fa-f:.]+|[vV][0-9A-Fa-f]+\\.[" + _UNRESERVED + _SUB_DELIMS + ":]+)\\]"
_REG_NAME = "(?:[" + _UNRESERVED + _SUB_DELIMS + "]|" + _PCT_ENCODED + ")*"
_AUTHORITY = "(?:" + _USERINFO + "@)?(?:" + _IP_LITERAL + "|" + _REG_NAME + ")(?::[0-9]*)?"
_PATH_ABEMPTY = "(?:/" + _PCHAR + "*)*"
_PATH_ABSOLUTE = "/(?:" + _PCHAR + "+(?:/" + _PCHAR + "*)*)?"
_PATH_ROOTLESS = _PCHAR + "+(?:/" + _PCHAR + "*)*"
_QUERY = "(?:" + _PCHAR + "|[/?])*"

_URI_RE = re.compile(
    "(?P<scheme>" + _SCHEME + "):"
    "(?://(?P<authority>" + _AUTHORITY + ")(?P<abempty>" + _PATH_ABEMPTY + ")"
    "|(?P<path>" + _PATH_ABSOLUTE + "|" + _PATH_ROOTLESS + ")?)"
    "(?:\\?(?P<query>" + _QUERY + "))?"
    "(?:#(?P<fragment>" + _QUERY + "))?"
)


class UriParts(NamedTuple):
    scheme: str
    authority: str | None
    path: str
    query: str | None
    fragment: str | None


@lru_cache(maxsize=1024)
def split_uri(text: str) -> UriParts | None:
    """Split ``text`` into its RFC 3986 components, or return None if malformed."""
    match = _URI_RE.fullmatch(text)
    if match is None:
        return None
    if match.group("authority") is not None:
        path = match.group("abempty")
    else:
        path = match.group("path") or ""
    return UriParts(
        scheme=match.group("scheme"),
        authority=match.group("authority"),
        path=path,
        query=match.group("query"),
        fragment=match.group("fragment"),
    )


@dataclass(frozen=True, slots=True)
class FileUri:
    """A document URI.

    ``FileUri(text)`` stores the text as given. :meth:`parse` checks the
    syntax and :meth:`validated` also requires the ``file`` scheme; use one
    of those for text supplied from outside.
    """

    text: str

    @classmethod
    def parse(cls, text: str) -> FileUri:
        """Parse any well-formed absolute URI, whatever its scheme."""
        if split_uri(text) is None:
            LOGGER.debug("Rejected malformed URI %r", text)
            raise InvalidUriError(text)
        return cls(text)

    @classmethod
    def validated(cls, text: str) -> FileUri:
        """Parse ``text`` and require the ``file`` scheme."""
        uri = cls.parse(text)
        if not uri.is_file_uri():
            LOGGER.debug("Rejected URI %r with scheme %s", text, uri.scheme)
            raise InvalidUriError.scheme_mismatch(uri.scheme)
        return uri

    @classmethod
    def from_path(cls, path: str | Path) -> FileUri:
        """Build a file URI for a filesystem path, resolved to an absolute one."""
        return cls.validated(Path(path).expanduser().resolve().as_uri())

    @property
    def parts(self) -> UriParts | None:
        return split_uri(self.text)

    @property
    def scheme(self) -> str | None:
        parts = self.parts
        return parts.scheme if parts else None

    @property
    def authority(self) -> str | None:
        parts = self.parts
        return parts.authority if parts else None

    @property
    def path(self) -> str | None:
        parts = self.parts
        return parts.path if parts else None

    @property
    def query(self) -> str | None:
        parts = self.parts
        return parts.query if parts else None

    @property
    def fragment(self) -> str | None:
        parts = self.parts
        return parts.fragment if parts else None

    def is_file_uri(self) -> bool:
        """Return True if the scheme is exactly ``file``."""
        return self.scheme == FILE_SCHEME

    @property
    def filename(self) -> str | None:
        """Last path segment, or None for an empty path or one ending in ``/``."""
        path = self.path
        if path is None:
            return None
        name = path.rsplit("/", 1)[-1]
        return name or None

    def to_file_path(self) -> Path:
        """Return the URI text as a filesystem path.

        The text is used as is: the ``file:`` prefix is kept and escapes are
        not decoded.
        """
        if not self.is_file_uri():
            raise InvalidUriError.scheme_mismatch(self.scheme)
        return Path(self.text)

    def to_location(self, range_: Range) -> Location:
        """Pair this URI with ``range_`` without validating either."""
        from .location import Location

        return Location(self, range_)

    def __str__(self) -> str:
        return self.text


__all__ = ["FILE_SCHEME", "FileUri", "UriParts", "split_uri"]
