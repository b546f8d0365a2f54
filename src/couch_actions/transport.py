"""HTTP transport: the only place that touches the network."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol, runtime_checkable

import httpx

from couch_actions.errors import TransportError
from couch_actions.response import Response

if TYPE_CHECKING:
    from types import TracebackType

    from couch_actions.request import Request

logger = logging.getLogger(__name__)


@runtime_checkable
class Transport(Protocol):
    """Protocol for sending one request and blocking for its full response."""

    def send(self, request: Request) -> Response:
        """Execute ``request`` and return the response, whatever its status."""
        ...


class HttpTransport:
    """Send requests through a synchronous ``httpx.Client``.

    Timeouts and connection reuse belong to the underlying client; nothing
    here retries.
    """

    def __init__(
        self,
        *,
        auth: tuple[str, str] | None = None,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._client = httpx.Client(auth=auth, timeout=timeout, transport=transport)

    def send(self, request: Request) -> Response:
        logger.debug("Sending %s %s", request.method, request.url)
        try:
            raw = self._client.request(
                request.method,
                request.url,
                headers=request.headers,
                params=request.params or None,
                content=request.content,
            )
        except httpx.HTTPError as exc:
            logger.warning("%s %s failed: %s", request.method, request.url, exc)
            raise TransportError(f"{request.method} {request.url} failed: {exc}") from exc
        logger.debug("Received %d for %s %s", raw.status_code, request.method, request.url)
        return Response.from_httpx(raw)

    def close(self) -> None:
        """Close the underlying client."""
        self._client.close()

    def __enter__(self) -> HttpTransport:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
