"""Create a database."""

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
class PutDatabase(Action[None]):
    """``PUT /{db}``. Raises ``DatabaseExistsError`` if the database already exists."""

    path: DatabasePath

    def make_request(self) -> Request:
        return Request("PUT", self.path.url(self.client.url)).accept_json()

    def take_response(self, response: Response) -> None:
        if response.status_code == HTTPStatus.CREATED:
            return
        raise classify(response, HTTPStatus.PRECONDITION_FAILED)
