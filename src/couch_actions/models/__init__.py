"""Raw CouchDB payload shapes and the domain types built from them."""

from couch_actions.models.changes import ChangeResult, Changes, RawChanges
from couch_actions.models.database import Database, RawDatabase
from couch_actions.models.document import Document, PutDocumentResponse, RawDocument
from couch_actions.models.error_response import ErrorResponse
from couch_actions.models.view import RawViewResult, ViewResult, ViewRow

__all__ = [
    "ChangeResult",
    "Changes",
    "Database",
    "Document",
    "ErrorResponse",
    "PutDocumentResponse",
    "RawChanges",
    "RawDatabase",
    "RawDocument",
    "RawViewResult",
    "ViewResult",
    "ViewRow",
]
