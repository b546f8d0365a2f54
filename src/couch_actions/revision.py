"""Document revision value type: the unit of CouchDB optimistic concurrency."""

from __future__ import annotations

import re
from dataclasses import dataclass

_REVISION_RE = re.compile(r"[0-9]+-\S+")


class RevisionParseError(ValueError):
    """Raised when a string is not a well-formed ``<number>-<hash>`` revision."""


@dataclass(frozen=True, order=True)
class Revision:
    """Opaque revision token such as ``"3-917fa2381192822767f010b95b45325b"``.

    Equality and ordering compare the raw strings. The ordering exists so
    revisions can be sorted deterministically; it says nothing about which
    revision is newer, and callers must not rely on it for that.

    ``Revision()`` is the empty revision, meaning "no revision constraint".
    """

    value: str = ""

    @classmethod
    def parse(cls, value: str) -> Revision:
        """Parse a revision string, rejecting anything not shaped ``<digits>-<token>``."""
        if not isinstance(value, str) or not _REVISION_RE.fullmatch(value):
            raise RevisionParseError(f"Invalid revision: {value!r}")
        return cls(value)

    @classmethod
    def from_etag(cls, etag: str) -> Revision:
        """Build a revision from an ``ETag`` header value, strong or weak."""
        tag = etag.strip()
        if tag.startswith("W/"):
            tag = tag[2:]
        if len(tag) >= 2 and tag[0] == tag[-1] == '"':
            tag = tag[1:-1]
        return cls.parse(tag)

    def is_empty(self) -> bool:
        return not self.value

    def to_etag_string(self) -> str:
        """Render the entity tag used in ``If-Match`` / ``If-None-Match``."""
        return f'"{self.value}"'

    def __bool__(self) -> bool:
        return not self.is_empty()

    def __str__(self) -> str:
        return self.value
