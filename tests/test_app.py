"""Tests for redirector.app — ASGI entry, lifespan, and end-to-end redirects."""

from pathlib import Path
from typing import Any

import pytest

from redirector.app import App
from redirector.config import AppConfig
from redirector.errors import FileReadError, HTTPError, ParseError
from redirector.handlers import map_handler, yaml_handler
from redirector.http.request import Request
from redirector.http.response import Response
from redirector.mux import default_mux
from redirector.testing import TestClient, assert_greeting, assert_redirect


class TestAppConstruction:
    def test_builds_chain_from_config(self, config: AppConfig) -> None:
        app = App(config)
        assert app.config is config
        assert app.handler is not None

    def test_explicit_handler_skips_config_files(self, tmp_path: Path) -> None:
        config = AppConfig(json_file=tmp_path / "no.json", yaml_file=tmp_path / "no.yaml")
        mux = default_mux()
        app = App(config, handler=mux)
        assert app.handler is mux

    def test_missing_file_fails_startup(self, tmp_path: Path) -> None:
        config = AppConfig(json_file=tmp_path / "no.json", yaml_file=tmp_path / "no.yaml")
        with pytest.raises(FileReadError):
            App(config)

    def test_malformed_file_fails_startup(self, json_file: Path, tmp_path: Path) -> None:
        bad = tmp_path / "bad.yaml"
        bad.write_text("- path: [unclosed\n")
        with pytest.raises(ParseError):
            App(AppConfig(json_file=json_file, yaml_file=bad))


class TestEndToEnd:
    @pytest.mark.asyncio
    async def test_embedded_yaml_redirect(self, config: AppConfig) -> None:
        async with TestClient(App(config)) as client:
            response = await client.get("/urlshort-final")
        assert_redirect(response, "https://github.com/gophercises/urlshort/tree/solution")

    @pytest.mark.asyncio
    async def test_unknown_path_greets(self, config: AppConfig) -> None:
        async with TestClient(App(config)) as client:
            response = await client.get("/nonexistent")
        assert_greeting(response)

    @pytest.mark.asyncio
    async def test_file_tables(self, config: AppConfig) -> None:
        async with TestClient(App(config)) as client:
            from_yaml = await client.get("/from-yaml")
            from_json = await client.get("/from-json")
        assert_redirect(from_yaml, "https://yaml.example/page")
        assert_redirect(from_json, "https://json.example/page")

    @pytest.mark.asyncio
    async def test_query_string_ignored_for_lookup(self, config: AppConfig) -> None:
        async with TestClient(App(config)) as client:
            response = await client.get("/from-yaml?utm=1")
        assert_redirect(response, "https://yaml.example/page")

    @pytest.mark.asyncio
    async def test_urlshort_through_hand_built_chain(self) -> None:
        yaml = b"- path: /urlshort\n  url: https://github.com/gophercises/urlshort\n"
        handler = yaml_handler(yaml, map_handler({}, default_mux()))
        async with TestClient(App(handler=handler)) as client:
            hit = await client.get("/urlshort")
            miss = await client.get("/nonexistent")
        assert_redirect(hit, "https://github.com/gophercises/urlshort")
        assert_greeting(miss)

    @pytest.mark.asyncio
    async def test_head_has_no_body(self, config: AppConfig) -> None:
        async with TestClient(App(config)) as client:
            response = await client.head("/")
        assert response.status == 200
        assert response.body == b""

    @pytest.mark.asyncio
    async def test_head_redirect_is_html(self, config: AppConfig) -> None:
        async with TestClient(App(config)) as client:
            response = await client.head("/from-yaml")
        assert_redirect(response, "https://yaml.example/page")
        assert response.content_type == "text/html; charset=utf-8"
        assert response.body == b""

    @pytest.mark.asyncio
    async def test_post_redirects(self, config: AppConfig) -> None:
        async with TestClient(App(config)) as client:
            response = await client.post("/from-json", body=b"ignored")
        assert_redirect(response, "https://json.example/page")
        assert response.body == b""


class TestHandlerErrors:
    @pytest.mark.asyncio
    async def test_unexpected_exception_is_500(self, caplog: pytest.LogCaptureFixture) -> None:
        async def broken(request: Request) -> Response:
            raise RuntimeError("boom")

        async with TestClient(App(handler=broken)) as client:
            response = await client.get("/x")

        assert response.status == 500
        assert response.text == "Internal Server Error"
        assert "500 GET /x" in caplog.text

    @pytest.mark.asyncio
    async def test_http_error_maps_to_status(self) -> None:
        async def teapot(request: Request) -> Response:
            raise HTTPError(status=418, detail="short and stout")

        async with TestClient(App(handler=teapot)) as client:
            response = await client.get("/")

        assert response.status == 418
        assert response.text == "short and stout"


class TestLifespan:
    @pytest.mark.asyncio
    async def test_startup_and_shutdown(self) -> None:
        app = App(handler=default_mux())
        incoming = [{"type": "lifespan.startup"}, {"type": "lifespan.shutdown"}]
        sent: list[dict[str, Any]] = []

        async def receive() -> dict[str, Any]:
            return incoming.pop(0)

        async def send(message: dict[str, Any]) -> None:
            sent.append(message)

        await app({"type": "lifespan"}, receive, send)

        assert [m["type"] for m in sent] == [
            "lifespan.startup.complete",
            "lifespan.shutdown.complete",
        ]

    @pytest.mark.asyncio
    async def test_startup_logs_table_count(
        self, config: AppConfig, caplog: pytest.LogCaptureFixture
    ) -> None:
        app = App(config)
        incoming = [{"type": "lifespan.startup"}, {"type": "lifespan.shutdown"}]

        async def receive() -> dict[str, Any]:
            return incoming.pop(0)

        async def send(message: dict[str, Any]) -> None:
            return None

        with caplog.at_level("INFO", logger="redirector.server"):
            await app({"type": "lifespan"}, receive, send)

        assert "Serving 4 redirect tables" in caplog.text
        assert "0.0.0.0" not in caplog.text

    @pytest.mark.asyncio
    async def test_non_http_scope_ignored(self) -> None:
        app = App(handler=default_mux())
        sent: list[dict[str, Any]] = []

        async def receive() -> dict[str, Any]:
            return {}

        async def send(message: dict[str, Any]) -> None:
            sent.append(message)

        await app({"type": "websocket"}, receive, send)

        assert sent == []


class TestRun:
    def test_run_delegates_to_runner(self, monkeypatch: pytest.MonkeyPatch) -> None:
        calls: list[tuple[Any, ...]] = []
        monkeypatch.setattr(
            "redirector.server.runner.run_server",
            lambda app, host, port: calls.append((app, host, port)),
        )
        app = App(handler=default_mux())

        app.run(port=9000)

        assert calls == [(app, None, 9000)]
