"""Database, document and view paths, and how they render under a server URL."""

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import quote

_DESIGN_PREFIX = "_design"
_VIEW_SEGMENT = "_view"


class InvalidPathError(ValueError):
    """Raised when a path string cannot be split into the expected segments."""


def _join(base_url: str, *segments: str) -> str:
    encoded = "/".join(quote(segment, safe="") for segment in segments)
    return f"{base_url.rstrip('/')}/{encoded}"


def _split(path: str) -> list[str]:
    if not isinstance(path, str) or not path:
        raise InvalidPathError(f"Invalid path: {path!r}")
    stripped = path[1:] if path.startswith("/") else path
    segments = stripped.split("/")
    if any(not segment for segment in segments):
        raise InvalidPathError(f"Path has an empty segment: {path!r}")
    return segments


@dataclass(frozen=True)
class DatabasePath:
    """Path to a database, e.g. ``/baseball``."""

    db_name: str

    @classmethod
    def parse(cls, path: str | DatabasePath) -> DatabasePath:
        if isinstance(path, DatabasePath):
            return path
        segments = _split(path)
        if len(segments) != 1:
            raise InvalidPathError(f"Not a database path: {path!r}")
        return cls(segments[0])

    def url(self, base_url: str, *extra: str) -> str:
        return _join(base_url, self.db_name, *extra)

    def __str__(self) -> str:
        return f"/{self.db_name}"


@dataclass(frozen=True)
class DocumentPath:
    """Path to a normal or design document.

    Accepts ``/db/doc``, ``/db/_design/ddoc`` or a ``(db, doc_id)`` pair,
    where ``doc_id`` may itself be ``_design/ddoc``.
    """

    db_name: str
    doc_id: str

    @classmethod
    def parse(cls, path: str | tuple[str, str] | DocumentPath) -> DocumentPath:
        if isinstance(path, DocumentPath):
            return path
        if isinstance(path, tuple):
            if len(path) != 2:
                raise InvalidPathError(f"Not a document path: {path!r}")
            db_path = DatabasePath.parse(path[0])
            doc_id = path[1]
            if not isinstance(doc_id, str) or not doc_id:
                raise InvalidPathError(f"Invalid document id: {doc_id!r}")
            return cls(db_path.db_name, doc_id)

        segments = _split(path)
        if len(segments) == 2 and segments[1] != _DESIGN_PREFIX:
            return cls(segments[0], segments[1])
        if len(segments) == 3 and segments[1] == _DESIGN_PREFIX:
            return cls(segments[0], f"{_DESIGN_PREFIX}/{segments[2]}")
        raise InvalidPathError(f"Not a document path: {path!r}")

    @property
    def is_design(self) -> bool:
        return self.doc_id.startswith(f"{_DESIGN_PREFIX}/")

    def url(self, base_url: str) -> str:
        if self.is_design:
            return _join(base_url, self.db_name, _DESIGN_PREFIX, self.doc_id[len(_DESIGN_PREFIX) + 1 :])
        return _join(base_url, self.db_name, self.doc_id)

    def __str__(self) -> str:
        return f"/{self.db_name}/{self.doc_id}"


@dataclass(frozen=True)
class ViewPath:
    """Path to a view, e.g. ``/baseball/_design/stat/_view/by_career_hr``."""

    db_name: str
    design_name: str
    view_name: str

    @classmethod
    def parse(cls, path: str | ViewPath) -> ViewPath:
        if isinstance(path, ViewPath):
            return path
        segments = _split(path)
        if len(segments) != 5 or segments[1] != _DESIGN_PREFIX or segments[3] != _VIEW_SEGMENT:
            raise InvalidPathError(f"Not a view path: {path!r}")
        return cls(segments[0], segments[2], segments[4])

    def url(self, base_url: str) -> str:
        return _join(base_url, self.db_name, _DESIGN_PREFIX, self.design_name, _VIEW_SEGMENT, self.view_name)

    def __str__(self) -> str:
        return f"/{self.db_name}/{_DESIGN_PREFIX}/{self.design_name}/{_VIEW_SEGMENT}/{self.view_name}"
