"""Test whether a document exists, optionally against a known revision."""

from __future__ import annotations

from dataclasses import dataclass, replace
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
class HeadDocument(Action[bool]):
    """``HEAD /{db}/{doc}``.

    Returns ``True`` when the document exists (and differs from
    ``if_none_match``), ``False`` when the server answers 304 Not Modified.
    """

    path: DocumentPath
    if_none_match_rev: Revision | None = None

    def if_none_match(self, rev: Revision) -> HeadDocument:
        return replace(self, if_none_match_rev=rev)

    def make_request(self) -> Request:
        return Request("HEAD", self.path.url(self.client.url)).if_none_match(self.if_none_match_rev)

    def take_response(self, response: Response) -> bool:
        if response.status_code == HTTPStatus.OK:
            return True
        if response.status_code == HTTPStatus.NOT_MODIFIED:
            return False
        raise classify(response, HTTPStatus.NOT_FOUND)
