"""Server process — runs the app under uvicorn.

Configuration errors never reach this point: the app builds its redirect
chain when it is constructed, before any socket is bound.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import uvicorn

if TYPE_CHECKING:
    from redirector.app import App

logger = logging.getLogger("redirector.server")


def run_server(app: App, host: str | None = None, port: int | None = None) -> None:
    """Serve *app* until the process is terminated.

    Args:
        app: Redirector App instance (an ASGI callable).
        host: Override ``app.config.host``.
        port: Override ``app.config.port``.
    """
    _host = host or app.config.host
    _port = port or app.config.port

    logger.info("Starting the server on %s:%d", _host, _port)
    uvicorn.run(
        app,
        host=_host,
        port=_port,
        log_level=app.config.log_level,
        access_log=app.config.access_log,
    )
