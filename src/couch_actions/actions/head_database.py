"""Test whether a database exists."""

from __future__ import annotations

from dataclasses import dataclass
from http import HTTPStatus
from typing import TYPE_CHECKING

from couch_actions.actions.base import Action
from couch_actions.errors import classify
from couch_actions.paths import DatabasePath
from couch_actions.request import Request

if TYPE_CHECKING:
    from couch_actions.response import Response


@dataclass(frozen=True)
class HeadDatabase(Action[None]):
    """``HEAD /{db}``. Raises ``NotFoundError`` (without an error body) if the database does not exist."""

    path: DatabasePath

    def make_request(self) -> Request:
        return Request("HEAD", self.path.url(self.client.url))

    def take_response(self, response: Response) -> None:
        if response.status_code == HTTPStatus.OK:
            return
        raise classify(response, HTTPStatus.NOT_FOUND)
