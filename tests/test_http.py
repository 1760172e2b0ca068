"""Tests for latitude.http: headers, request, and response values."""

import pytest

from latitude.http.headers import Headers
from latitude.http.request import Request
from latitude.http.response import PLAIN_TEXT, Response


class TestHeaders:
    def test_case_insensitive(self) -> None:
        headers = Headers(((b"Accept-Encoding", b"gzip"),))
        assert headers["accept-encoding"] == "gzip"
        assert headers["ACCEPT-ENCODING"] == "gzip"
        assert "Accept-Encoding" in headers

    def test_repeated_values_are_joined(self) -> None:
        headers = Headers(((b"accept-encoding", b"br"), (b"accept-encoding", b"gzip")))
        assert headers["accept-encoding"] == "br, gzip"
        assert headers.get_list("Accept-Encoding") == ["br", "gzip"]
        assert len(headers) == 1

    def test_missing(self) -> None:
        headers = Headers()
        assert headers.get("accept-encoding") is None
        with pytest.raises(KeyError):
            headers["accept-encoding"]

    def test_non_string_key(self) -> None:
        assert 1 not in Headers(((b"a", b"b"),))


class TestRequest:
    def test_from_asgi(self) -> None:
        scope = {
            "type": "http",
            "method": "get",
            "path": "/admin",
            "query_string": b"tab=brands",
            "headers": [(b"accept-encoding", b"gzip, br")],
            "client": ("10.0.0.5", 51000),
        }
        request = Request.from_asgi(scope)

        assert request.method == "GET"
        assert request.path == "/admin"
        assert request.query_string == "tab=brands"
        assert request.accept_encoding == "gzip, br"
        assert request.client == ("10.0.0.5", 51000)
        assert request.url == "/admin?tab=brands"

    def test_minimal_scope(self) -> None:
        request = Request.from_asgi({"type": "http", "method": "HEAD", "path": "/"})
        assert request.accept_encoding is None
        assert request.is_head
        assert request.url == "/"
        assert request.client is None

    def test_frozen(self) -> None:
        request = Request.from_asgi({"type": "http", "method": "GET", "path": "/"})
        with pytest.raises(AttributeError):
            request.path = "/admin"  # type: ignore[misc]


class TestResponse:
    def test_defaults(self) -> None:
        response = Response()
        assert response.status == 200
        assert response.body == b""
        assert response.content_type == PLAIN_TEXT

    def test_with_methods_return_new_objects(self) -> None:
        original = Response(b"a")
        changed = original.with_status(404).with_header("Vary", "Accept-Encoding").with_body(b"b")

        assert original.status == 200
        assert original.headers == ()
        assert changed.status == 404
        assert changed.body == b"b"
        assert changed.header("vary") == "Accept-Encoding"

    def test_header_lookup_missing(self) -> None:
        assert Response().header("Content-Encoding") is None

    def test_plain(self) -> None:
        response = Response.plain("Not found", 404)
        assert response.body == b"Not found"
        assert response.status == 404
        assert response.content_type == "text/plain; charset=UTF-8"
