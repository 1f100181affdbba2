"""Redirector exception hierarchy.

Shared across loaders, handlers, the mux, and the server adapter so every
module raises and catches the same types.
"""

from dataclasses import dataclass


class RedirectorError(Exception):
    """Base for all redirector-specific errors."""


class ConfigurationError(RedirectorError):
    """Raised when the redirect chain cannot be assembled.

    Always fatal at startup: the server refuses to start rather than
    serving a partially-built chain.
    """


class FileReadError(ConfigurationError):
    """A config file is missing, unreadable, or not a regular file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"cannot read {path!r}: {reason}")


class ParseError(ConfigurationError):
    """Config data is not well-formed YAML/JSON or has the wrong shape."""

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"invalid {source}: {reason}")


@dataclass(frozen=True, slots=True)
class HTTPError(RedirectorError):
    """An error that maps directly to an HTTP status code.

    Raised by handlers; the ASGI adapter turns it into a plain response.
    """

    status: int
    detail: str = ""

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class NotFound(HTTPError):  # noqa: N818 — conventional name in web frameworks
    """404 — no mux pattern matched the request path."""

    def __init__(self, detail: str = "Not Found") -> None:
        super().__init__(status=404, detail=detail)
