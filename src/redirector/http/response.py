"""HTTP response and redirect.

Responses are immutable; ``with_header`` returns a new one.
"""

from __future__ import annotations

import html
from dataclasses import dataclass, replace
from http import HTTPStatus


@dataclass(frozen=True, slots=True)
class Response:
    """An HTTP response. Immutable after creation."""

    body: str | bytes = ""
    status: int = 200
    content_type: str = "text/plain; charset=utf-8"
    headers: tuple[tuple[str, str], ...] = ()

    def with_header(self, name: str, value: str) -> Response:
        """Return a new Response with an additional header."""
        return replace(self, headers=(*self.headers, (name, value)))

    def header(self, name: str) -> str | None:
        """First value of header *name* (case-insensitive), or None."""
        name_lower = name.lower()
        for key, value in self.headers:
            if key.lower() == name_lower:
                return value
        return None

    @property
    def location(self) -> str | None:
        """The ``Location`` header, set on redirects."""
        return self.header("Location")

    @property
    def body_bytes(self) -> bytes:
        """Body as bytes."""
        if isinstance(self.body, str):
            return self.body.encode("utf-8")
        return self.body

    @property
    def text(self) -> str:
        """Body as string."""
        if isinstance(self.body, bytes):
            return self.body.decode("utf-8")
        return self.body


@dataclass(frozen=True, slots=True)
class Redirect:
    """A redirect to *url*, rendered per request method by ``to_response``."""

    url: str
    status: int = 302

    def to_response(self, method: str = "GET") -> Response:
        """Build the wire response.

        GET and HEAD are answered as HTML; only GET carries the short body
        linking to the target. Other methods get an empty plain response.
        """
        response = Response(body="", status=self.status).with_header("Location", self.url)
        if method not in ("GET", "HEAD"):
            return response
        response = replace(response, content_type="text/html; charset=utf-8")
        if method == "HEAD":
            return response
        phrase = HTTPStatus(self.status).phrase
        return replace(response, body=f'<a href="{html.escape(self.url)}">{phrase}</a>.\n')
