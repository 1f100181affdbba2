"""Default request multiplexer — the innermost fallback of every chain.

Patterns are matched against the request path. A pattern ending in ``/``
names a subtree and matches every path below it; any other pattern
matches only itself. Exact patterns beat subtrees, and longer subtrees
beat shorter ones, so ``/`` is the catch-all of last resort.
"""

import logging

from redirector._internal.types import Handler
from redirector.errors import ConfigurationError, HTTPError, NotFound
from redirector.http.request import Request
from redirector.http.response import Response

logger = logging.getLogger("redirector.mux")

GREETING = "Hello, world!\n"


class Mux:
    """Pattern -> handler table with serve-mux matching rules.

    Usage::

        mux = Mux()
        mux.handle("/", hello)
        mux.handle("/health", health)
        response = await mux(request)
    """

    __slots__ = ("_exact", "_subtrees")

    def __init__(self) -> None:
        self._exact: dict[str, Handler] = {}
        # Longest first, so the first prefix hit is the most specific
        self._subtrees: list[tuple[str, Handler]] = []

    def handle(self, pattern: str, handler: Handler) -> None:
        """Register *handler* for *pattern*.

        Raises:
            ConfigurationError: The pattern is not absolute or is already taken.
        """
        if not pattern.startswith("/"):
            msg = f"Mux pattern must start with '/': {pattern!r}"
            raise ConfigurationError(msg)
        if pattern in self._exact or any(p == pattern for p, _ in self._subtrees):
            msg = f"Mux pattern {pattern!r} is already registered"
            raise ConfigurationError(msg)

        if pattern.endswith("/"):
            self._subtrees.append((pattern, handler))
            self._subtrees.sort(key=lambda item: len(item[0]), reverse=True)
        else:
            self._exact[pattern] = handler

    def match(self, path: str) -> Handler | None:
        """Return the handler for *path*, or None if no pattern matches."""
        handler = self._exact.get(path)
        if handler is not None:
            return handler
        for pattern, subtree_handler in self._subtrees:
            if path.startswith(pattern):
                return subtree_handler
        return None

    @property
    def patterns(self) -> list[str]:
        """Registered patterns, sorted."""
        return sorted([*self._exact, *(p for p, _ in self._subtrees)])

    async def __call__(self, request: Request) -> Response:
        handler = self.match(request.path)
        try:
            if handler is None:
                raise NotFound()
            return await handler(request)
        except HTTPError as exc:
            logger.debug("%d %s %s — %s", exc.status, request.method, request.path, exc.detail)
            return Response(body=exc.detail or f"Error {exc.status}\n", status=exc.status)


async def hello(request: Request) -> Response:  # noqa: ARG001
    """Answer with the fixed greeting."""
    return Response(GREETING)


def default_mux() -> Mux:
    """A mux that greets every path."""
    mux = Mux()
    mux.handle("/", hello)
    return mux
