"""Logging setup for applications and scripts built on the client."""

from __future__ import annotations

import logging
import sys

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Chatty third-party loggers that drown out the client's own output at DEBUG.
_NOISY_LOGGERS = ("httpx", "httpcore")


def configure_logging(level: str | int = "INFO", *, log_file: str | None = None) -> None:
    """Configure the root logger with a stream handler and an optional file handler."""
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    logging.basicConfig(
        level=level.upper() if isinstance(level, str) else level,
        format=_FORMAT,
        handlers=handlers,
        force=True,
    )
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
