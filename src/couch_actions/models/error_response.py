"""Error body returned with 4xx/5xx responses."""

from __future__ import annotations

from pydantic import StrictStr

from couch_actions.models.base import ServerShape


class ErrorResponse(ServerShape):
    """``{"error": "not_found", "reason": "missing"}``"""

    error: StrictStr
    reason: StrictStr
