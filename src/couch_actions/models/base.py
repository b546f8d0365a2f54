"""Base model for raw CouchDB payloads."""

from __future__ import annotations

from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, StrictStr

from couch_actions.revision import Revision


def _check_revision(value: str) -> str:
    Revision.parse(value)
    return value


# A revision string as the server sends it; malformed or empty values fail validation.
RevisionStr = Annotated[StrictStr, AfterValidator(_check_revision)]


class ServerShape(BaseModel):
    """Mirror of a JSON object the server sends.

    Unknown fields are ignored so newer servers still decode; required
    fields use strict types so a missing or mistyped one fails validation.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)
