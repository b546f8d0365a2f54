"""Environment-driven configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass, field


def _env(key: str, default: str = "") -> str:
    return os.environ.get(key, default)


@dataclass(frozen=True)
class CouchConfig:
    """Where the CouchDB server is and how to reach it."""

    url: str = field(default_factory=lambda: _env("COUCHDB_URL", "http://localhost:5984"))
    user: str = field(default_factory=lambda: _env("COUCHDB_USER"))
    password: str = field(default_factory=lambda: _env("COUCHDB_PASSWORD"))
    timeout: float = field(default_factory=lambda: float(_env("COUCHDB_TIMEOUT", "30")))

    @property
    def auth(self) -> tuple[str, str] | None:
        """Basic auth credentials, or None when no user is configured."""
        if not self.user:
            return None
        return (self.user, self.password)


@dataclass(frozen=True)
class AppConfig:
    log_level: str = field(default_factory=lambda: _env("LOG_LEVEL", "INFO"))
    log_file: str = field(default_factory=lambda: _env("LOG_FILE"))


@dataclass(frozen=True)
class Settings:
    couch: CouchConfig = field(default_factory=CouchConfig)
    app: AppConfig = field(default_factory=AppConfig)


def load_settings() -> Settings:
    """Read settings from the environment."""
    return Settings()
