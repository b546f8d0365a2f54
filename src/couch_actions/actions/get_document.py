"""Get a document's meta-information and content."""

from __future__ import annotations

from dataclasses import dataclass, replace
from http import HTTPStatus
from typing import TYPE_CHECKING

from couch_actions.actions.base import Action
from couch_actions.errors import classify
from couch_actions.models.document import Document, RawDocument
from couch_actions.paths import DocumentPath
from couch_actions.request import Request

if TYPE_CHECKING:
    from couch_actions.response import Response
    from couch_actions.revision import Revision


@dataclass(frozen=True)
class GetDocument(Action[Document | None]):
    """``GET /{db}/{doc}``.

    Returns ``None`` when ``if_none_match`` names the document's current
    revision (HTTP 304), otherwise the document.

    Raises ``NotFoundError`` if the document does not exist,
    ``UnauthorizedError`` and ``BadRequestError`` as the server reports them.
    """

    path: DocumentPath
    if_none_match_rev: Revision | None = None
    at_rev: Revision | None = None

    def if_none_match(self, rev: Revision) -> GetDocument:
        """Short-circuit with ``None`` if the document is still at ``rev``."""
        return replace(self, if_none_match_rev=rev)

    def rev(self, rev: Revision) -> GetDocument:
        """Fetch the document as of ``rev`` instead of its latest revision."""
        return replace(self, at_rev=rev)

    def make_request(self) -> Request:
        request = Request("GET", self.path.url(self.client.url)).accept_json().if_none_match(self.if_none_match_rev)
        if self.at_rev is not None and not self.at_rev.is_empty():
            request = request.query("rev", str(self.at_rev))
        return request

    def take_response(self, response: Response) -> Document | None:
        if response.status_code == HTTPStatus.OK:
            response.require_content_type_json()
            return Document.from_raw(response.decode_json(RawDocument))
        if response.status_code == HTTPStatus.NOT_MODIFIED:
            return None
        raise classify(response, HTTPStatus.BAD_REQUEST, HTTPStatus.UNAUTHORIZED, HTTPStatus.NOT_FOUND)
