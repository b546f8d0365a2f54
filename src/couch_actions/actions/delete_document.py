"""Delete a document at a known revision."""

from __future__ import annotations

from dataclasses import dataclass
from http import HTTPStatus
from typing import TYPE_CHECKING

from couch_actions.actions.base import Action
from couch_actions.errors import classify
from couch_actions.paths import DocumentPath
from couch_actions.request import Request

if TYPE_CHECKING:
    from couch_actions.response import Response
    from couch_actions.revision import Revision


@dataclass(frozen=True)
class DeleteDocument(Action[None]):
    """``DELETE /{db}/{doc}`` guarded by ``If-Match: "<rev>"``.

    A stale ``rev`` raises ``ConflictError``; a missing document raises
    ``NotFoundError``.
    """

    path: DocumentPath
    rev: Revision

    def make_request(self) -> Request:
        return Request("DELETE", self.path.url(self.client.url)).accept_json().if_match(self.rev)

    def take_response(self, response: Response) -> None:
        if response.status_code == HTTPStatus.OK:
            response.require_content_type_json()
            return
        raise classify(
            response,
            HTTPStatus.BAD_REQUEST,
            HTTPStatus.UNAUTHORIZED,
            HTTPStatus.NOT_FOUND,
            HTTPStatus.CONFLICT,
        )
