"""Closed error taxonomy for CouchDB actions and the status-code classifier."""

from __future__ import annotations

from http import HTTPStatus
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from couch_actions.models.error_response import ErrorResponse
    from couch_actions.response import Response


class CouchError(Exception):
    """Base class for every error raised by an action."""


class ServerError(CouchError):
    """An error status the operation expects, with the server's error body if it sent one."""

    status_code: int = 0
    description = "CouchDB error"

    def __init__(self, response: ErrorResponse | None = None) -> None:
        self.response = response
        message = self.description
        if response is not None:
            message = f"{message}: {response.error} ({response.reason})"
        super().__init__(message)


class BadRequestError(ServerError):
    status_code = HTTPStatus.BAD_REQUEST
    description = "The request was malformed"


class UnauthorizedError(ServerError):
    status_code = HTTPStatus.UNAUTHORIZED
    description = "The client is unauthorized"


class NotFoundError(ServerError):
    status_code = HTTPStatus.NOT_FOUND
    description = "The resource does not exist"


class ConflictError(ServerError):
    """The revision given is not the document's current revision."""

    status_code = HTTPStatus.CONFLICT
    description = "Document update conflict"


class DatabaseExistsError(ServerError):
    status_code = HTTPStatus.PRECONDITION_FAILED
    description = "The database already exists"


class UnexpectedHttpStatusError(CouchError):
    """The server answered with a status the operation does not handle."""

    def __init__(self, status_code: int) -> None:
        self.status_code = status_code
        super().__init__(f"Unexpected HTTP status {status_code}")


class UnexpectedContentTypeError(CouchError):
    """A JSON response arrived without ``Content-Type: application/json``."""

    def __init__(self, content_type: str | None) -> None:
        self.content_type = content_type
        super().__init__(f"Expected application/json content, got {content_type!r}")


class UnexpectedContentError(CouchError):
    """The body is valid JSON but lacks a field the operation needs."""

    def __init__(self, body: str, field: str | None = None) -> None:
        self.body = body
        self.field = field
        detail = f" (field {field!r})" if field else ""
        super().__init__(f"Unexpected response content{detail}: {body}")


class TransportError(CouchError):
    """The request could not be sent or the response could not be read."""


class EncodeError(CouchError):
    """The request body could not be serialized to JSON."""


class DecodeError(CouchError):
    """The response body is not valid JSON."""


_STATUS_ERRORS: dict[int, type[ServerError]] = {
    cls.status_code: cls
    for cls in (BadRequestError, UnauthorizedError, NotFoundError, ConflictError, DatabaseExistsError)
}


def classify(response: Response, *expected: int) -> CouchError:
    """Return the error for a non-success ``response``.

    Only the statuses in ``expected`` map to their domain error; every other
    status becomes ``UnexpectedHttpStatusError``. The server's error body is
    attached when it decodes, and ignored when it does not.
    """
    status = response.status_code
    error_class = _STATUS_ERRORS.get(status)
    if error_class is None or status not in expected:
        return UnexpectedHttpStatusError(status)
    return error_class(response.error_response())
