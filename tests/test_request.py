"""Tests for redirector.http.request — Request.from_asgi."""

import pytest

from redirector.http.request import Request


class TestFromASGI:
    def test_takes_method_and_path(self) -> None:
        scope = {
            "type": "http",
            "method": "GET",
            "path": "/urlshort",
            "query_string": b"ref=1",
            "headers": [(b"host", b"short.example")],
        }
        assert Request.from_asgi(scope) == Request("GET", "/urlshort")

    def test_frozen(self) -> None:
        request = Request("GET", "/")
        with pytest.raises(AttributeError):
            request.path = "/other"  # type: ignore[misc]
