"""List database names."""

from __future__ import annotations

from dataclasses import dataclass
from http import HTTPStatus
from typing import TYPE_CHECKING

from pydantic import RootModel, StrictStr

from couch_actions.actions.base import Action
from couch_actions.errors import classify
from couch_actions.request import Request

if TYPE_CHECKING:
    from couch_actions.response import Response


class _DatabaseNames(RootModel[list[StrictStr]]):
    pass


@dataclass(frozen=True)
class GetAllDatabases(Action[list[str]]):
    """``GET /_all_dbs``."""

    def make_request(self) -> Request:
        return Request("GET", f"{self.client.url.rstrip('/')}/_all_dbs").accept_json()

    def take_response(self, response: Response) -> list[str]:
        if response.status_code == HTTPStatus.OK:
            response.require_content_type_json()
            return response.decode_json(_DatabaseNames).root
        raise classify(response)
