"""Map handlers and their YAML/JSON constructors.

A map handler answers requests whose path is in its table with a redirect
and hands everything else to its fallback. Fallbacks can be other map
handlers, so handlers stack into a chain that ends in the default mux::

    mux = default_mux()
    inner = map_handler({"/docs": "https://example.com/docs"}, mux)
    outer = yaml_handler(b"- path: /a\\n  url: https://example.com/a\\n", inner)

Tables are read-only once built; a handler is safe to share between
concurrent requests.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType

from redirector._internal.types import Handler
from redirector.http.request import Request
from redirector.http.response import Redirect, Response
from redirector.loaders import parse_json, parse_yaml, read_file
from redirector.records import build_table

logger = logging.getLogger("redirector.handlers")


@dataclass(frozen=True, slots=True)
class MapHandler:
    """Redirects paths found in ``table``; delegates the rest to ``fallback``.

    ``source`` names where the table came from (``"map"``,
    ``"yaml:paths.yaml"``, ...) and is only used for reporting.
    """

    table: Mapping[str, str]
    fallback: Handler
    source: str = "map"
    status: int = 302

    async def __call__(self, request: Request) -> Response:
        destination = self.table.get(request.path)
        if destination is None:
            return await self.fallback(request)
        logger.debug("%s %s -> %s (%s)", request.method, request.path, destination, self.source)
        return Redirect(destination, status=self.status).to_response(request.method)


def map_handler(
    paths_to_urls: Mapping[str, str],
    fallback: Handler,
    *,
    source: str = "map",
) -> MapHandler:
    """Wrap a path -> URL mapping around *fallback*.

    The mapping is copied, so later changes to the caller's dict do not
    leak into a running handler.
    """
    return MapHandler(MappingProxyType(dict(paths_to_urls)), fallback, source)


def yaml_handler(data: bytes | str, fallback: Handler, *, source: str = "yaml") -> MapHandler:
    """Build a map handler from a YAML document.

    YAML is expected to be a list of mappings::

        - path: /some-path
          url: https://www.some-url.com/demo

    Raises:
        ParseError: The document is malformed or not a list of path/url
            mappings. No handler is built.
    """
    records = parse_yaml(data, source=source)
    table = build_table(records)
    logger.info("Loaded %d redirect(s) from %s", len(table), source)
    return MapHandler(table, fallback, source)


def json_handler(data: bytes | str, fallback: Handler, *, source: str = "json") -> MapHandler:
    """Build a map handler from a JSON document.

    JSON is expected to be an array of objects::

        [{"path": "/some-path", "url": "https://www.some-url.com/demo"}]

    Raises:
        ParseError: The document is malformed or not an array of
            path/url objects. No handler is built.
    """
    records = parse_json(data, source=source)
    table = build_table(records)
    logger.info("Loaded %d redirect(s) from %s", len(table), source)
    return MapHandler(table, fallback, source)


def yaml_file_handler(path: str | Path, fallback: Handler) -> MapHandler:
    """Read *path* and build a map handler from its YAML.

    Raises:
        FileReadError: The file cannot be read; nothing is parsed.
        ParseError: The file content is not valid redirect YAML.
    """
    data = read_file(path)
    return yaml_handler(data, fallback, source=f"yaml:{path}")


def json_file_handler(path: str | Path, fallback: Handler) -> MapHandler:
    """Read *path* and build a map handler from its JSON.

    Raises:
        FileReadError: The file cannot be read; nothing is parsed.
        ParseError: The file content is not valid redirect JSON.
    """
    data = read_file(path)
    return json_handler(data, fallback, source=f"json:{path}")
