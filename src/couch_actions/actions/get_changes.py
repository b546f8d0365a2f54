"""Read a database's changes feed."""

from __future__ import annotations

from dataclasses import dataclass, replace
from http import HTTPStatus
from typing import TYPE_CHECKING

from couch_actions.actions.base import Action
from couch_actions.errors import classify
from couch_actions.models.changes import Changes, RawChanges
from couch_actions.paths import DatabasePath
from couch_actions.request import Request

if TYPE_CHECKING:
    from couch_actions.response import Response


@dataclass(frozen=True)
class GetChanges(Action[Changes]):
    """``GET /{db}/_changes`` as a single, non-continuous feed."""

    path: DatabasePath
    since_seq: int | str | None = None
    limit_count: int | None = None

    def since(self, seq: int | str) -> GetChanges:
        """Only report changes after update sequence ``seq``."""
        return replace(self, since_seq=seq)

    def limit(self, count: int) -> GetChanges:
        return replace(self, limit_count=count)

    def make_request(self) -> Request:
        request = Request("GET", self.path.url(self.client.url, "_changes")).accept_json()
        if self.since_seq is not None:
            request = request.query("since", str(self.since_seq))
        if self.limit_count is not None:
            request = request.query("limit", str(self.limit_count))
        return request

    def take_response(self, response: Response) -> Changes:
        if response.status_code == HTTPStatus.OK:
            response.require_content_type_json()
            return Changes.from_raw(response.decode_json(RawChanges))
        raise classify(response, HTTPStatus.BAD_REQUEST, HTTPStatus.UNAUTHORIZED, HTTPStatus.NOT_FOUND)
