"""Response reader: status, content-type validation and typed JSON decoding."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, TypeVar

from pydantic import BaseModel, ValidationError

from couch_actions.errors import DecodeError, UnexpectedContentError, UnexpectedContentTypeError
from couch_actions.models.error_response import ErrorResponse
from couch_actions.request import APPLICATION_JSON

if TYPE_CHECKING:
    import httpx

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def _first_error_field(exc: ValidationError) -> str | None:
    errors = exc.errors()
    if not errors:
        return None
    return ".".join(str(part) for part in errors[0]["loc"]) or None


@dataclass(frozen=True)
class Response:
    """A transport response as the actions see it."""

    status_code: int
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes = b""

    @classmethod
    def from_httpx(cls, response: httpx.Response) -> Response:
        return cls(
            status_code=response.status_code,
            headers={name.lower(): value for name, value in response.headers.items()},
            body=response.content,
        )

    def header(self, name: str) -> str | None:
        name = name.lower()
        for key, value in self.headers.items():
            if key.lower() == name:
                return value
        return None

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")

    def require_content_type_json(self) -> None:
        """Raise unless the response declares ``application/json``; parameters are ignored."""
        content_type = self.header("Content-Type")
        media_type = content_type.split(";", 1)[0].strip().lower() if content_type else ""
        if media_type != APPLICATION_JSON:
            raise UnexpectedContentTypeError(content_type)

    def json(self) -> Any:
        try:
            return json.loads(self.body)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise DecodeError(f"Response body is not valid JSON: {exc}") from exc

    def decode_json(self, model: type[ModelT]) -> ModelT:
        """Parse the body and validate it into ``model``.

        Malformed JSON raises ``DecodeError``; JSON of the wrong shape raises
        ``UnexpectedContentError`` naming the first offending field.
        """
        data = self.json()
        try:
            return model.model_validate(data)
        except ValidationError as exc:
            raise UnexpectedContentError(self.text, _first_error_field(exc)) from exc

    def error_response(self) -> ErrorResponse | None:
        """Decode the server's ``{"error", "reason"}`` body, or ``None`` if there isn't a usable one."""
        if not self.body:
            return None
        try:
            return ErrorResponse.model_validate_json(self.body)
        except ValidationError:
            logger.debug("Ignoring malformed error body for status %d", self.status_code)
            return None
