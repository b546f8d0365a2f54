"""Create a document with a server-assigned id."""

from __future__ import annotations

from dataclasses import dataclass
from http import HTTPStatus
from typing import TYPE_CHECKING, Any

from couch_actions.actions.base import Action, encode_json
from couch_actions.errors import UnexpectedContentError, classify
from couch_actions.models.document import PutDocumentResponse
from couch_actions.paths import DatabasePath
from couch_actions.request import Request
from couch_actions.revision import Revision

if TYPE_CHECKING:
    from couch_actions.response import Response


@dataclass(frozen=True)
class PostToDatabase(Action[tuple[str, Revision]]):
    """``POST /{db}``, returning the new document's id and revision."""

    path: DatabasePath
    content: Any = None

    def make_request(self) -> Request:
        return (
            Request("POST", self.path.url(self.client.url))
            .accept_json()
            .content_type_json()
            .body(encode_json(self.content))
        )

    def take_response(self, response: Response) -> tuple[str, Revision]:
        if response.status_code == HTTPStatus.CREATED:
            response.require_content_type_json()
            ack = response.decode_json(PutDocumentResponse)
            if ack.id is None:
                raise UnexpectedContentError(response.text, "id")
            return ack.id, Revision(ack.rev)
        raise classify(
            response,
            HTTPStatus.BAD_REQUEST,
            HTTPStatus.UNAUTHORIZED,
            HTTPStatus.NOT_FOUND,
            HTTPStatus.CONFLICT,
        )
