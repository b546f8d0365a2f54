"""Query a view."""

from __future__ import annotations

import json
from dataclasses import dataclass, field, replace
from http import HTTPStatus
from typing import TYPE_CHECKING, Any

from couch_actions.actions.base import Action, encode_json
from couch_actions.errors import classify
from couch_actions.models.view import RawViewResult, ViewResult
from couch_actions.paths import ViewPath
from couch_actions.request import Request

if TYPE_CHECKING:
    from couch_actions.response import Response


def _flag(value: bool) -> str:
    return json.dumps(value)


@dataclass(frozen=True)
class GetView(Action[ViewResult]):
    """``GET /{db}/_design/{ddoc}/_view/{view}``.

    Keys are JSON values and are sent JSON-encoded, as CouchDB expects.
    """

    path: ViewPath
    options: dict[str, str] = field(default_factory=dict)

    def _with(self, name: str, value: str) -> GetView:
        return replace(self, options={**self.options, name: value})

    def key(self, key: Any) -> GetView:
        return self._with("key", encode_json(key).decode("utf-8"))

    def startkey(self, key: Any) -> GetView:
        return self._with("startkey", encode_json(key).decode("utf-8"))

    def endkey(self, key: Any) -> GetView:
        return self._with("endkey", encode_json(key).decode("utf-8"))

    def limit(self, count: int) -> GetView:
        return self._with("limit", str(count))

    def reduce(self, enabled: bool) -> GetView:
        return self._with("reduce", _flag(enabled))

    def include_docs(self, enabled: bool) -> GetView:
        return self._with("include_docs", _flag(enabled))

    def make_request(self) -> Request:
        request = Request("GET", self.path.url(self.client.url)).accept_json()
        for name, value in self.options.items():
            request = request.query(name, value)
        return request

    def take_response(self, response: Response) -> ViewResult:
        if response.status_code == HTTPStatus.OK:
            response.require_content_type_json()
            return ViewResult.from_raw(response.decode_json(RawViewResult))
        raise classify(response, HTTPStatus.BAD_REQUEST, HTTPStatus.UNAUTHORIZED, HTTPStatus.NOT_FOUND)
