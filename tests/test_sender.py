"""Tests for redirector.server.sender response emission rules."""

import pytest

from redirector.http.response import Redirect, Response
from redirector.server.sender import send_response


async def _capture(response: Response, method: str = "GET") -> list[dict]:
    messages: list[dict] = []

    async def send(message: dict) -> None:
        messages.append(message)

    await send_response(response, send, method=method)
    return messages


class TestSendResponse:
    @pytest.mark.asyncio
    async def test_200_preserves_body(self) -> None:
        messages = await _capture(Response("ok"))

        assert messages[0]["type"] == "http.response.start"
        assert messages[0]["status"] == 200
        headers = dict(messages[0]["headers"])
        assert headers[b"content-length"] == b"2"
        assert headers[b"content-type"] == b"text/plain; charset=utf-8"
        assert messages[1]["type"] == "http.response.body"
        assert messages[1]["body"] == b"ok"

    @pytest.mark.asyncio
    async def test_redirect_sets_location(self) -> None:
        messages = await _capture(Redirect("https://example.com/a").to_response("GET"))

        assert messages[0]["status"] == 302
        headers = dict(messages[0]["headers"])
        assert headers[b"location"] == b"https://example.com/a"

    @pytest.mark.asyncio
    async def test_head_drops_body_keeps_length(self) -> None:
        messages = await _capture(Response("hello"), method="HEAD")

        headers = dict(messages[0]["headers"])
        assert headers[b"content-length"] == b"5"
        assert messages[1]["body"] == b""

