"""Get database metadata."""

from __future__ import annotations

from dataclasses import dataclass
from http import HTTPStatus
from typing import TYPE_CHECKING

from couch_actions.actions.base import Action
from couch_actions.errors import classify
from couch_actions.models.database import Database, RawDatabase
from couch_actions.paths import DatabasePath
from couch_actions.request import Request

if TYPE_CHECKING:
    from couch_actions.response import Response


@dataclass(frozen=True)
class GetDatabase(Action[Database]):
    """``GET /{db}``. Raises ``NotFoundError`` if the database does not exist."""

    path: DatabasePath

    def make_request(self) -> Request:
        return Request("GET", self.path.url(self.client.url)).accept_json()

    def take_response(self, response: Response) -> Database:
        if response.status_code == HTTPStatus.OK:
            response.require_content_type_json()
            return Database.from_raw(response.decode_json(RawDatabase))
        raise classify(response, HTTPStatus.NOT_FOUND)
