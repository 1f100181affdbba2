"""Assembly of the redirect chain served by the app.

Built inside-out once at startup::

    YAML file -> JSON file -> embedded YAML -> built-in map -> default mux

A request walks the chain from the left and stops at the first table
that knows its path. Any config error aborts assembly; a partially-built
chain is never returned.
"""

import logging
from collections.abc import Iterator
from dataclasses import dataclass

from redirector._internal.types import Handler
from redirector.config import AppConfig
from redirector.handlers import (
    MapHandler,
    json_file_handler,
    map_handler,
    yaml_file_handler,
    yaml_handler,
)
from redirector.mux import default_mux

logger = logging.getLogger("redirector.chain")

DEFAULT_PATHS: dict[str, str] = {
    "/urlshort-godoc": "https://godoc.org/github.com/gophercises/urlshort",
    "/yaml-godoc": "https://godoc.org/gopkg.in/yaml.v2",
}

EMBEDDED_YAML = """\
- path: /urlshort
  url: https://github.com/gophercises/urlshort
- path: /urlshort-final
  url: https://github.com/gophercises/urlshort/tree/solution
"""


@dataclass(frozen=True, slots=True)
class RouteEntry:
    """One reachable redirect and the table that serves it."""

    path: str
    url: str
    source: str


def build_chain(config: AppConfig | None = None) -> MapHandler:
    """Assemble the full chain and return its outermost handler.

    Raises:
        FileReadError: A config file is missing or unreadable.
        ParseError: A config file or the embedded YAML is malformed.
    """
    config = config or AppConfig()

    mux = default_mux()
    builtin = map_handler(DEFAULT_PATHS, mux, source="map")
    embedded = yaml_handler(EMBEDDED_YAML, builtin, source="yaml:<embedded>")
    from_json = json_file_handler(config.json_file, embedded)
    from_yaml = yaml_file_handler(config.yaml_file, from_json)

    links = list(iter_chain(from_yaml))
    total = sum(len(link.table) for link in links)
    logger.info("Redirect chain ready: %d tables, %d entries", len(links), total)
    return from_yaml


def iter_chain(handler: Handler) -> Iterator[MapHandler]:
    """Yield every map handler link, outermost first.

    Stops at the first fallback that is not a ``MapHandler`` (the mux).
    """
    current: Handler | None = handler
    while isinstance(current, MapHandler):
        yield current
        current = current.fallback


def effective_routes(handler: Handler) -> list[RouteEntry]:
    """Every path reachable through the chain, resolved as dispatch would.

    When several tables know a path, the outermost one wins and inner
    entries are shadowed. Rows are sorted by path.
    """
    seen: dict[str, RouteEntry] = {}
    for link in iter_chain(handler):
        for path, url in link.table.items():
            if path not in seen:
                seen[path] = RouteEntry(path, url, link.source)
    return [seen[path] for path in sorted(seen)]
