"""View query results."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from pydantic import StrictInt, StrictStr

from couch_actions.models.base import ServerShape


class RawViewRow(ServerShape):
    id: StrictStr | None = None
    key: Any = None
    value: Any = None
    doc: dict[str, Any] | None = None


class RawViewResult(ServerShape):
    # Absent when the view is reduced.
    total_rows: StrictInt | None = None
    offset: StrictInt | None = None
    rows: list[RawViewRow]


@dataclass(frozen=True)
class ViewRow:
    value: Any
    id: str | None = None
    key: Any = None
    doc: dict[str, Any] | None = None


@dataclass(frozen=True)
class ViewResult:
    """Rows of a view, with ``total_rows`` and ``offset`` set only for unreduced views."""

    rows: list[ViewRow] = field(default_factory=list)
    total_rows: int | None = None
    offset: int | None = None

    @classmethod
    def from_raw(cls, raw: RawViewResult) -> ViewResult:
        rows = [ViewRow(value=row.value, id=row.id, key=row.key, doc=row.doc) for row in raw.rows]
        return cls(rows=rows, total_rows=raw.total_rows, offset=raw.offset)
