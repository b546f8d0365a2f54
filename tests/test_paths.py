"""Tests for database, document and view paths."""

import pytest

from couch_actions.paths import DatabasePath, DocumentPath, InvalidPathError, ViewPath

BASE = "http://example.com:1234/"


class TestDatabasePath:
    @pytest.mark.parametrize("raw", ["/foo", "foo"])
    def test_parse(self, raw: str) -> None:
        path = DatabasePath.parse(raw)
        assert path.db_name == "foo"
        assert path.url(BASE) == "http://example.com:1234/foo"

    @pytest.mark.parametrize("raw", ["", "/", "/foo/bar", "//foo"])
    def test_parse_invalid(self, raw: str) -> None:
        with pytest.raises(InvalidPathError):
            DatabasePath.parse(raw)

    def test_url_with_extra_segment(self) -> None:
        assert DatabasePath("foo").url(BASE, "_changes") == "http://example.com:1234/foo/_changes"


class TestDocumentPath:
    def test_parse_normal_document(self) -> None:
        path = DocumentPath.parse("/foo/bar")
        assert path == DocumentPath("foo", "bar")
        assert not path.is_design
        assert path.url(BASE) == "http://example.com:1234/foo/bar"

    def test_parse_design_document(self) -> None:
        path = DocumentPath.parse("/foo/_design/bar")
        assert path.doc_id == "_design/bar"
        assert path.is_design
        assert path.url(BASE) == "http://example.com:1234/foo/_design/bar"

    def test_parse_tuple(self) -> None:
        assert DocumentPath.parse(("/foo", "bar")) == DocumentPath("foo", "bar")

    def test_tuple_design_id_keeps_design_url(self) -> None:
        path = DocumentPath.parse(("foo", "_design/bar"))
        assert path.url(BASE) == "http://example.com:1234/foo/_design/bar"

    def test_segments_are_percent_encoded(self) -> None:
        path = DocumentPath.parse(("foo", "a b/c"))
        assert path.url(BASE) == "http://example.com:1234/foo/a%20b%2Fc"

    @pytest.mark.parametrize("raw", ["/foo", "/foo/bar/baz", "/foo/_design", "/foo//bar", ("foo", "")])
    def test_parse_invalid(self, raw) -> None:
        with pytest.raises(InvalidPathError):
            DocumentPath.parse(raw)


class TestViewPath:
    def test_parse(self) -> None:
        path = ViewPath.parse("/baseball/_design/stat/_view/by_career_hr")
        assert path == ViewPath("baseball", "stat", "by_career_hr")
        assert path.url(BASE) == "http://example.com:1234/baseball/_design/stat/_view/by_career_hr"
        assert str(path) == "/baseball/_design/stat/_view/by_career_hr"

    @pytest.mark.parametrize("raw", ["/foo/_design/bar", "/foo/bar/stat/_view/x", "/foo/_design/bar/view/x"])
    def test_parse_invalid(self, raw: str) -> None:
        with pytest.raises(InvalidPathError):
            ViewPath.parse(raw)
