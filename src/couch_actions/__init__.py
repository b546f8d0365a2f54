"""Typed CouchDB actions: each operation builds its HTTP request and interprets the response."""

from couch_actions.actions import (
    Action,
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
from couch_actions.client import Client
from couch_actions.config import AppConfig, CouchConfig, Settings, load_settings
from couch_actions.errors import (
    BadRequestError,
    ConflictError,
    CouchError,
    DatabaseExistsError,
    DecodeError,
    EncodeError,
    NotFoundError,
    ServerError,
    TransportError,
    UnauthorizedError,
    UnexpectedContentError,
    UnexpectedContentTypeError,
    UnexpectedHttpStatusError,
)
from couch_actions.log import configure_logging
from couch_actions.models import ChangeResult, Changes, Database, Document, ErrorResponse, ViewResult, ViewRow
from couch_actions.paths import DatabasePath, DocumentPath, InvalidPathError, ViewPath
from couch_actions.request import Request
from couch_actions.response import Response
from couch_actions.revision import Revision, RevisionParseError
from couch_actions.transport import HttpTransport, Transport

__version__ = "0.1.0"

__all__ = [
    "Action",
    "AppConfig",
    "BadRequestError",
    "ChangeResult",
    "Changes",
    "Client",
    "ConflictError",
    "CouchConfig",
    "CouchError",
    "Database",
    "DatabaseExistsError",
    "DatabasePath",
    "DecodeError",
    "DeleteDatabase",
    "DeleteDocument",
    "Document",
    "DocumentPath",
    "EncodeError",
    "ErrorResponse",
    "GetAllDatabases",
    "GetChanges",
    "GetDatabase",
    "GetDocument",
    "GetView",
    "HeadDatabase",
    "HeadDocument",
    "HttpTransport",
    "InvalidPathError",
    "NotFoundError",
    "PostToDatabase",
    "PutDatabase",
    "PutDocument",
    "Request",
    "Response",
    "Revision",
    "RevisionParseError",
    "ServerError",
    "Settings",
    "Transport",
    "TransportError",
    "UnauthorizedError",
    "UnexpectedContentError",
    "UnexpectedContentTypeError",
    "UnexpectedHttpStatusError",
    "ViewPath",
    "ViewResult",
    "ViewRow",
    "configure_logging",
    "load_settings",
]
