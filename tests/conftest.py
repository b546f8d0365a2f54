"""Shared fixtures: canned responses, a mocked transport and an in-memory CouchDB."""

from __future__ import annotations

import json
from collections.abc import Callable, Iterator
from typing import Any
from unittest.mock import MagicMock
from urllib.parse import unquote
from uuid import uuid4

import httpx
import pytest

from couch_actions.client import Client
from couch_actions.response import Response
from couch_actions.transport import HttpTransport, Transport

BASE_URL = "http://example.com:1234"


@pytest.fixture
def client() -> Client:
    """A client whose transport is a mock; tests drive make_request/take_response directly."""
    return Client(BASE_URL, MagicMock(spec=Transport))


@pytest.fixture
def json_response() -> Callable[..., Response]:
    """Build a Response with a JSON body and, by default, a JSON content type."""

    def _make(status: int, body: Any = None, *, content_type: str | None = "application/json") -> Response:
        headers = {"content-type": content_type} if content_type else {}
        if body is None:
            raw = b""
        elif isinstance(body, bytes):
            raw = body
        else:
            raw = json.dumps(body).encode("utf-8")
        return Response(status, headers, raw)

    return _make


class FakeCouch:
    """Just enough of CouchDB's document and database API to exercise the client end to end."""

    def __init__(self) -> None:
        # db -> doc_id -> list of revisions, oldest first; each is (rev, deleted, content)
        self.databases: dict[str, dict[str, list[tuple[str, bool, dict[str, Any]]]]] = {}
        self.changes: dict[str, list[tuple[int, str]]] = {}
        self.update_seqs: dict[str, int] = {}
        self.requests: list[httpx.Request] = []

    @staticmethod
    def _json(status: int, body: Any, headers: dict[str, str] | None = None) -> httpx.Response:
        return httpx.Response(
            status,
            content=json.dumps(body).encode("utf-8"),
            headers={"content-type": "application/json", **(headers or {})},
        )

    def _error(self, status: int, error: str, reason: str) -> httpx.Response:
        return self._json(status, {"error": error, "reason": reason})

    @staticmethod
    def _etag_value(header: str | None) -> str | None:
        if header is None:
            return None
        return header.strip().removeprefix("W/").strip('"')

    def _new_rev(self, history: list[tuple[str, bool, dict[str, Any]]]) -> str:
        return f"{len(history) + 1}-{uuid4().hex}"

    def _record_change(self, db: str, doc_id: str) -> None:
        feed = self.changes[db]
        feed[:] = [entry for entry in feed if entry[1] != doc_id]
        self.update_seqs[db] += 1
        feed.append((self.update_seqs[db], doc_id))

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        raw_path = request.url.raw_path.split(b"?", 1)[0].decode("ascii")
        segments = [unquote(segment) for segment in raw_path.strip("/").split("/") if segment]

        if segments == ["_all_dbs"]:
            return self._json(200, sorted(self.databases))
        if len(segments) == 1:
            return self._database(request, segments[0])
        if len(segments) == 2 and segments[1] == "_changes":
            return self._changes(segments[0])
        if len(segments) == 3 and segments[1] == "_design":
            return self._document(request, segments[0], f"_design/{segments[2]}")
        if len(segments) == 2:
            return self._document(request, segments[0], segments[1])
        return self._error(404, "not_found", "missing")

    def _database(self, request: httpx.Request, db: str) -> httpx.Response:
        exists = db in self.databases
        if request.method == "HEAD":
            return httpx.Response(200 if exists else 404)
        if request.method == "PUT":
            if exists:
                return self._error(412, "file_exists", "The database could not be created, the file already exists.")
            self.databases[db] = {}
            self.changes[db] = []
            self.update_seqs[db] = 0
            return self._json(201, {"ok": True})
        if not exists:
            return self._error(404, "not_found", "no_db_file")
        if request.method == "GET":
            docs = self.databases[db].values()
            live = sum(1 for history in docs if not history[-1][1])
            return self._json(
                200,
                {
                    "db_name": db,
                    "doc_count": live,
                    "doc_del_count": len(docs) - live,
                    "update_seq": self.update_seqs[db],
                    "committed_update_seq": self.update_seqs[db],
                    "data_size": 0,
                    "purge_seq": 0,
                    "compact_running": False,
                    "instance_start_time": "0",
                },
            )
        if request.method == "DELETE":
            del self.databases[db]
            del self.changes[db]
            del self.update_seqs[db]
            return self._json(200, {"ok": True})
        if request.method == "POST":
            doc_id = uuid4().hex
            rev = self._new_rev([])
            self.databases[db][doc_id] = [(rev, False, json.loads(request.content))]
            self._record_change(db, doc_id)
            return self._json(201, {"ok": True, "id": doc_id, "rev": rev})
        return self._error(405, "method_not_allowed", request.method)

    def _changes(self, db: str) -> httpx.Response:
        if db not in self.databases:
            return self._error(404, "not_found", "no_db_file")
        results = []
        for seq, doc_id in self.changes[db]:
            rev, deleted, _ = self.databases[db][doc_id][-1]
            result: dict[str, Any] = {"seq": seq, "id": doc_id, "changes": [{"rev": rev}]}
            if deleted:
                result["deleted"] = True
            results.append(result)
        last_seq = results[-1]["seq"] if results else 0
        return self._json(200, {"results": results, "last_seq": last_seq})

    def _document(self, request: httpx.Request, db: str, doc_id: str) -> httpx.Response:
        if db not in self.databases:
            return self._error(404, "not_found", "no_db_file")
        docs = self.databases[db]
        history = docs.get(doc_id)
        current = history[-1] if history else None

        if request.method in ("GET", "HEAD"):
            wanted = request.url.params.get("rev")
            entry = current
            if wanted is not None:
                entry = next((item for item in history or [] if item[0] == wanted), None)
            if entry is None or (wanted is None and entry[1]):
                reason = "deleted" if entry is not None else "missing"
                if request.method == "HEAD":
                    return httpx.Response(404)
                return self._error(404, "not_found", reason)
            rev, deleted, content = entry
            etag = f'"{rev}"'
            if self._etag_value(request.headers.get("if-none-match")) == rev:
                return httpx.Response(304, headers={"etag": etag})
            if request.method == "HEAD":
                return httpx.Response(200, headers={"etag": etag})
            body = {"_id": doc_id, "_rev": rev, **content}
            if deleted:
                body["_deleted"] = True
            return self._json(200, body, {"etag": etag})

        if_match = self._etag_value(request.headers.get("if-match"))
        if request.method == "PUT":
            content = json.loads(request.content)
            claimed = if_match or content.pop("_rev", None)
            live = current is not None and not current[1]
            if live and claimed != current[0]:
                return self._error(409, "conflict", "Document update conflict.")
            if not live and claimed is not None and (current is None or claimed != current[0]):
                return self._error(409, "conflict", "Document update conflict.")
            history = docs.setdefault(doc_id, [])
            rev = self._new_rev(history)
            history.append((rev, False, content))
            self._record_change(db, doc_id)
            return self._json(201, {"ok": True, "id": doc_id, "rev": rev})

        if request.method == "DELETE":
            if current is None or current[1]:
                return self._error(404, "not_found", "deleted" if current else "missing")
            if if_match != current[0]:
                return self._error(409, "conflict", "Document update conflict.")
            rev = self._new_rev(history)
            history.append((rev, True, {}))
            self._record_change(db, doc_id)
            return self._json(200, {"ok": True, "id": doc_id, "rev": rev})

        return self._error(405, "method_not_allowed", request.method)


@pytest.fixture
def fake_couch() -> FakeCouch:
    return FakeCouch()


@pytest.fixture
def couch_client(fake_couch: FakeCouch) -> Iterator[Client]:
    """A real client wired through httpx to the in-memory server."""
    transport = HttpTransport(transport=httpx.MockTransport(fake_couch.handler))
    with Client(BASE_URL, transport) as client:
        yield client
