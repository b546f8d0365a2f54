"""Client handle: holds the server URL and transport and hands out actions."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from couch_actions.actions import (
    DeleteDatabase,
    DeleteDocument,
    GetAllDatabases,
    GetChanges,
    GetDatabase,
    GetDocument,
    GetView,
    HeadDatabase,
    HeadDocument,
    PostToDatabase,
    PutDatabase,
    PutDocument,
)
from couch_actions.paths import DatabasePath, DocumentPath, ViewPath
from couch_actions.transport import HttpTransport, Transport

if TYPE_CHECKING:
    from types import TracebackType

    from couch_actions.config import CouchConfig
    from couch_actions.request import Request
    from couch_actions.response import Response
    from couch_actions.revision import Revision

logger = logging.getLogger(__name__)

DatabasePathLike = str | DatabasePath
DocumentPathLike = str | tuple[str, str] | DocumentPath
ViewPathLike = str | ViewPath


class Client:
    """Entry point for talking to one CouchDB server.

    The client holds only immutable configuration and its transport; every
    action it creates is independent of the others.

        client = Client("http://localhost:5984")
        client.put_database("/baseball").run()
        rev = client.put_document("/baseball/babe_ruth", {"career_hr": 714}).run()
    """

    def __init__(
        self,
        url: str,
        transport: Transport | None = None,
        *,
        auth: tuple[str, str] | None = None,
        timeout: float = 30.0,
    ) -> None:
        if not url.startswith(("http://", "https://")):
            raise ValueError(f"CouchDB URL must be http or https, got {url!r}")
        self._url = url.rstrip("/")
        self._transport = transport if transport is not None else HttpTransport(auth=auth, timeout=timeout)

    @classmethod
    def from_config(cls, config: CouchConfig, transport: Transport | None = None) -> Client:
        """Create a client from environment-driven configuration."""
        logger.info("Connecting to CouchDB at %s", config.url)
        return cls(config.url, transport, auth=config.auth, timeout=config.timeout)

    @property
    def url(self) -> str:
        return self._url

    def send(self, request: Request) -> Response:
        return self._transport.send(request)

    def close(self) -> None:
        """Close the transport, if it can be closed."""
        close = getattr(self._transport, "close", None)
        if close is not None:
            close()

    def __enter__(self) -> Client:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"Client({self._url!r})"

    # Databases

    def get_all_databases(self) -> GetAllDatabases:
        return GetAllDatabases(self)

    def head_database(self, path: DatabasePathLike) -> HeadDatabase:
        return HeadDatabase(self, DatabasePath.parse(path))

    def get_database(self, path: DatabasePathLike) -> GetDatabase:
        return GetDatabase(self, DatabasePath.parse(path))

    def put_database(self, path: DatabasePathLike) -> PutDatabase:
        return PutDatabase(self, DatabasePath.parse(path))

    def delete_database(self, path: DatabasePathLike) -> DeleteDatabase:
        return DeleteDatabase(self, DatabasePath.parse(path))

    def post_to_database(self, path: DatabasePathLike, content: Any) -> PostToDatabase:
        return PostToDatabase(self, DatabasePath.parse(path), content)

    def get_changes(self, path: DatabasePathLike) -> GetChanges:
        return GetChanges(self, DatabasePath.parse(path))

    # Documents

    def head_document(self, path: DocumentPathLike) -> HeadDocument:
        return HeadDocument(self, DocumentPath.parse(path))

    def get_document(self, path: DocumentPathLike) -> GetDocument:
        return GetDocument(self, DocumentPath.parse(path))

    def put_document(self, path: DocumentPathLike, content: Any) -> PutDocument:
        return PutDocument(self, DocumentPath.parse(path), content)

    def delete_document(self, path: DocumentPathLike, rev: Revision) -> DeleteDocument:
        return DeleteDocument(self, DocumentPath.parse(path), rev)

    # Views

    def get_view(self, path: ViewPathLike) -> GetView:
        return GetView(self, ViewPath.parse(path))
