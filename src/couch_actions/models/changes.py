"""Database changes feed."""

from __future__ import annotations

from dataclasses import dataclass, field

from pydantic import StrictBool, StrictStr

from couch_actions.models.base import RevisionStr, ServerShape
from couch_actions.models.database import UpdateSequence
from couch_actions.revision import Revision


class RawChangeRevision(ServerShape):
    rev: RevisionStr


class RawChangeResult(ServerShape):
    seq: UpdateSequence
    id: StrictStr
    changes: list[RawChangeRevision]
    deleted: StrictBool = False


class RawChanges(ServerShape):
    last_seq: UpdateSequence
    results: list[RawChangeResult]


@dataclass(frozen=True)
class ChangeResult:
    """One changed document and the leaf revisions it now has."""

    seq: int | str
    id: str
    changes: list[Revision] = field(default_factory=list)
    deleted: bool = False


@dataclass(frozen=True)
class Changes:
    last_seq: int | str
    results: list[ChangeResult] = field(default_factory=list)

    @classmethod
    def from_raw(cls, raw: RawChanges) -> Changes:
        results = [
            ChangeResult(
                seq=result.seq,
                id=result.id,
                changes=[Revision(change.rev) for change in result.changes],
                deleted=result.deleted,
            )
            for result in raw.results
        ]
        return cls(last_seq=raw.last_seq, results=results)
