"""Redirect records and table building.

A ``PathURL`` is one configured redirect. ``build_table`` folds an ordered
sequence of them into the lookup table a map handler serves from.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType


@dataclass(frozen=True, slots=True)
class PathURL:
    """One configured redirect: requests for ``path`` go to ``url``."""

    path: str
    url: str


def build_table(records: Iterable[PathURL]) -> Mapping[str, str]:
    """Build a read-only path -> URL table.

    Records are applied in order, so when a path repeats the last record wins::

        build_table([PathURL("/x", "A"), PathURL("/x", "B")])["/x"] == "B"
    """
    table: dict[str, str] = {}
    for record in records:
        table[record.path] = record.url
    return MappingProxyType(table)
