"""Documents and the acknowledgements returned when writing them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr

from couch_actions.models.base import RevisionStr, ServerShape
from couch_actions.revision import Revision

ContentT = TypeVar("ContentT", bound=BaseModel)


class RawDocument(BaseModel):
    """A document body: reserved ``_``-prefixed fields plus application content."""

    model_config = ConfigDict(extra="allow", frozen=True)

    id: StrictStr = Field(alias="_id")
    rev: RevisionStr = Field(alias="_rev")
    deleted: StrictBool = Field(default=False, alias="_deleted")

    @property
    def content(self) -> dict[str, Any]:
        """Application fields; CouchDB reserves every top-level name starting with ``_``."""
        extra = self.model_extra or {}
        return {key: value for key, value in extra.items() if not key.startswith("_")}


class PutDocumentResponse(ServerShape):
    """Acknowledgement of ``PUT /{db}/{doc}`` and ``POST /{db}``."""

    id: StrictStr | None = None
    rev: RevisionStr
    ok: bool = True


@dataclass(frozen=True)
class Document:
    """A document as returned by the server, at one revision."""

    id: str
    revision: Revision
    deleted: bool = False
    content: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_raw(cls, raw: RawDocument) -> Document:
        return cls(id=raw.id, revision=Revision(raw.rev), deleted=raw.deleted, content=raw.content)

    def content_as(self, model: type[ContentT]) -> ContentT:
        """Validate the application content into ``model``."""
        return model.model_validate(self.content)
