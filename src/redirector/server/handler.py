"""ASGI handler — translates ASGI scope/messages to redirector types.

The only component that touches raw ASGI HTTP messages. Converts the
scope to a Request, awaits the root of the redirect chain, and sends the
Response back through ASGI send().
"""

import logging

from redirector._internal.asgi import Receive, Scope, Send
from redirector._internal.types import Handler
from redirector.errors import HTTPError
from redirector.http.request import Request
from redirector.http.response import Response
from redirector.server.sender import send_response

logger = logging.getLogger("redirector.server")


async def handle_request(scope: Scope, receive: Receive, send: Send, *, handler: Handler) -> None:  # noqa: ARG001
    """Process a single HTTP request through the redirect chain."""
    if scope["type"] != "http":
        return

    request = Request.from_asgi(scope)

    try:
        response = await handler(request)
    except HTTPError as exc:
        logger.debug("%d %s %s — %s", exc.status, request.method, request.path, exc.detail)
        response = Response(body=exc.detail or f"Error {exc.status}", status=exc.status)
    except Exception:
        logger.exception("500 %s %s", request.method, request.path)
        response = Response(body="Internal Server Error", status=500)

    await send_response(response, send, method=request.method)
