"""Database metadata: raw server shape and the user-facing type."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import StrictBool, StrictInt, StrictStr

from couch_actions.models.base import ServerShape

# CouchDB 1.x sends integer sequences, 2.x and later send opaque strings.
UpdateSequence = StrictInt | StrictStr


class RawDatabase(ServerShape):
    db_name: StrictStr
    doc_count: StrictInt
    doc_del_count: StrictInt
    update_seq: UpdateSequence
    committed_update_seq: UpdateSequence
    data_size: StrictInt
    purge_seq: UpdateSequence
    compact_running: StrictBool


@dataclass(frozen=True)
class Database:
    """Metadata of one database as reported by ``GET /{db}``."""

    db_name: str
    doc_count: int
    doc_del_count: int
    update_seq: int | str
    committed_update_seq: int | str
    data_size: int
    purge_seq: int | str
    compact_running: bool

    @classmethod
    def from_raw(cls, raw: RawDatabase) -> Database:
        return cls(
            db_name=raw.db_name,
            doc_count=raw.doc_count,
            doc_del_count=raw.doc_del_count,
            update_seq=raw.update_seq,
            committed_update_seq=raw.committed_update_seq,
            data_size=raw.data_size,
            purge_seq=raw.purge_seq,
            compact_running=raw.compact_running,
        )
