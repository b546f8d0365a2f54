"""Immutable HTTP request builder shared by every action."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from couch_actions.revision import Revision

APPLICATION_JSON = "application/json"


@dataclass(frozen=True)
class Request:
    """One HTTP call: method, URL, headers, query parameters and body.

    Each configuration method returns a new ``Request``; the original value
    is never modified, so the order in which they are chained does not matter.
    """

    method: str
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    params: dict[str, str] = field(default_factory=dict)
    content: bytes | None = None

    def header(self, name: str, value: str) -> Request:
        return replace(self, headers={**self.headers, name: value})

    def accept_json(self) -> Request:
        return self.header("Accept", APPLICATION_JSON)

    def content_type_json(self) -> Request:
        return self.header("Content-Type", APPLICATION_JSON)

    def if_match(self, rev: Revision | None) -> Request:
        """Guard a mutation on the document still being at ``rev``."""
        if rev is None or rev.is_empty():
            return self
        return self.header("If-Match", rev.to_etag_string())

    def if_none_match(self, rev: Revision | None) -> Request:
        """Ask the server to answer 304 if the document is still at ``rev``."""
        if rev is None or rev.is_empty():
            return self
        return self.header("If-None-Match", rev.to_etag_string())

    def query(self, name: str, value: str | None) -> Request:
        if value is None:
            return self
        return replace(self, params={**self.params, name: value})

    def body(self, content: bytes) -> Request:
        return replace(self, content=content)
