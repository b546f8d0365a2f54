"""Create or update a document."""

from __future__ import annotations

from dataclasses import dataclass, replace
from http import HTTPStatus
from typing import TYPE_CHECKING, Any

from couch_actions.actions.base import Action, encode_json
from couch_actions.errors import classify
from couch_actions.models.document import PutDocumentResponse
from couch_actions.paths import DocumentPath
from couch_actions.request import Request
from couch_actions.revision import Revision

if TYPE_CHECKING:
    from couch_actions.response import Response


@dataclass(frozen=True)
class PutDocument(Action[Revision]):
    """``PUT /{db}/{doc}``, returning the document's new revision.

    Without ``if_match`` the put creates the document. With it, the server
    applies the update only if the document is still at that revision and
    otherwise answers 409, raised as ``ConflictError``.
    """

    path: DocumentPath
    content: Any = None
    if_match_rev: Revision | None = None

    def if_match(self, rev: Revision) -> PutDocument:
        return replace(self, if_match_rev=rev)

    def make_request(self) -> Request:
        return (
            Request("PUT", self.path.url(self.client.url))
            .accept_json()
            .content_type_json()
            .if_match(self.if_match_rev)
            .body(encode_json(self.content))
        )

    def take_response(self, response: Response) -> Revision:
        if response.status_code == HTTPStatus.CREATED:
            response.require_content_type_json()
            return Revision(response.decode_json(PutDocumentResponse).rev)
        raise classify(
            response,
            HTTPStatus.BAD_REQUEST,
            HTTPStatus.UNAUTHORIZED,
            HTTPStatus.NOT_FOUND,
            HTTPStatus.CONFLICT,
        )
