"""One action per supported CouchDB operation."""

from couch_actions.actions.base import Action
from couch_actions.actions.delete_database import DeleteDatabase
from couch_actions.actions.delete_document import DeleteDocument
from couch_actions.actions.get_all_databases import GetAllDatabases
from couch_actions.actions.get_changes import GetChanges
from couch_actions.actions.get_database import GetDatabase
from couch_actions.actions.get_document import GetDocument
from couch_actions.actions.get_view import GetView
from couch_actions.actions.head_database import HeadDatabase
from couch_actions.actions.head_document import HeadDocument
from couch_actions.actions.post_to_database import PostToDatabase
from couch_actions.actions.put_database import PutDatabase
from couch_actions.actions.put_document import PutDocument

__all__ = [
    "Action",
    "DeleteDatabase",
    "DeleteDocument",
    "GetAllDatabases",
    "GetChanges",
    "GetDatabase",
    "GetDocument",
    "GetView",
    "HeadDatabase",
    "HeadDocument",
    "PostToDatabase",
    "PutDatabase",
    "PutDocument",
]
