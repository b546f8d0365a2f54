"""The action contract: one request builder and one response interpreter per operation."""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from pydantic import BaseModel

from couch_actions.errors import EncodeError

if TYPE_CHECKING:
    from couch_actions.client import Client
    from couch_actions.request import Request
    from couch_actions.response import Response

logger = logging.getLogger(__name__)

OutputT = TypeVar("OutputT")


def encode_json(content: Any) -> bytes:
    """Serialize a request body, wrapping serializer failures in ``EncodeError``."""
    try:
        if isinstance(content, BaseModel):
            return content.model_dump_json(by_alias=True, exclude_none=True).encode("utf-8")
        return json.dumps(content, allow_nan=False).encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise EncodeError(f"Cannot encode request body: {exc}") from exc


@dataclass(frozen=True)
class Action(ABC, Generic[OutputT]):
    """A typed CouchDB operation.

    An action is an immutable value: builder methods return a new action and
    ``run()`` never changes the one it is called on. ``make_request`` depends
    only on the action's fields; ``take_response`` maps every status the
    operation knows about and turns any other into ``UnexpectedHttpStatusError``.
    """

    client: Client

    @abstractmethod
    def make_request(self) -> Request:
        """Build the HTTP request for this action."""

    @abstractmethod
    def take_response(self, response: Response) -> OutputT:
        """Interpret the server's response as output or a raised ``CouchError``."""

    def run(self) -> OutputT:
        """Send the request, block for the response and interpret it."""
        request = self.make_request()
        response = self.client.send(request)
        logger.debug("%s got status %d", type(self).__name__, response.status_code)
        return self.take_response(response)
