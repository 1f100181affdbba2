"""Redirector application class.

Wraps a redirect chain in an ASGI 3.0 callable. The chain is built when
the App is constructed, so a broken config file fails at startup and the
server never answers requests from a partial chain.
"""

import logging

from redirector._internal.asgi import Receive, Scope, Send
from redirector._internal.types import Handler
from redirector.chain import build_chain, iter_chain
from redirector.config import AppConfig
from redirector.server.handler import handle_request

logger = logging.getLogger("redirector.server")


class App:
    """The redirector application.

    Usage::

        app = App(AppConfig(yaml_file="redirects.yaml"))
        app.run()

    Pass ``handler`` to serve a hand-built chain instead of the one
    described by ``config``.

    Raises:
        FileReadError: A configured file is missing or unreadable.
        ParseError: A configured file is malformed.
    """

    __slots__ = ("config", "handler")

    def __init__(self, config: AppConfig | None = None, *, handler: Handler | None = None) -> None:
        self.config: AppConfig = config or AppConfig()
        self.handler: Handler = handler if handler is not None else build_chain(self.config)

    def run(self, host: str | None = None, port: int | None = None) -> None:
        """Start serving. Blocks until the process is terminated.

        Args:
            host: Override bind host.
            port: Override bind port.
        """
        from redirector.server.runner import run_server

        run_server(self, host, port)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point.

        Handles the lifespan scope directly, then delegates HTTP scopes
        to the request handler.
        """
        if scope["type"] == "lifespan":
            await self._handle_lifespan(receive, send)
            return

        await handle_request(scope, receive, send, handler=self.handler)

    async def _handle_lifespan(self, receive: Receive, send: Send) -> None:
        """Run the ASGI lifespan protocol.

        There is nothing to set up: the chain was built in ``__init__``.
        """
        while True:
            message = await receive()
            msg_type = message["type"]

            if msg_type == "lifespan.startup":
                logger.info("Serving %d redirect tables", len(list(iter_chain(self.handler))))
                await send({"type": "lifespan.startup.complete"})
            elif msg_type == "lifespan.shutdown":
                logger.info("Shutting down")
                await send({"type": "lifespan.shutdown.complete"})
                return
