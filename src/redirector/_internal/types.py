"""Shared type aliases used across redirector modules."""

from collections.abc import Awaitable, Callable

from redirector.http.request import Request
from redirector.http.response import Response

# Anything that answers a request: map handlers, the mux, plain functions
Handler = Callable[[Request], Awaitable[Response]]
