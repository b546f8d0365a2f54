"""Tests for HeadDocument."""

import pytest

from couch_actions.errors import NotFoundError, UnexpectedHttpStatusError
from couch_actions.revision import Revision


def test_make_request(client):
    request = client.head_document("/foo/bar").make_request()
    assert request.method == "HEAD"
    assert request.url == "http://example.com:1234/foo/bar"
    assert "If-None-Match" not in request.headers


def test_make_request_if_none_match(client):
    request = client.head_document("/foo/bar").if_none_match(Revision("1-abc")).make_request()
    assert request.headers["If-None-Match"] == '"1-abc"'


def test_take_response_ok(client, json_response):
    assert client.head_document("/foo/bar").take_response(json_response(200, content_type=None)) is True


def test_take_response_not_modified(client, json_response):
    assert client.head_document("/foo/bar").take_response(json_response(304, content_type=None)) is False


def test_take_response_not_found_without_body(client, json_response):
    with pytest.raises(NotFoundError) as exc_info:
        client.head_document("/foo/bar").take_response(json_response(404, content_type=None))
    assert exc_info.value.response is None


def test_take_response_unauthorized_is_unexpected(client, json_response):
    with pytest.raises(UnexpectedHttpStatusError):
        client.head_document("/foo/bar").take_response(json_response(401, content_type=None))
