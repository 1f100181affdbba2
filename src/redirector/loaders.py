"""Reading and decoding redirect records from YAML and JSON.

Both formats carry the same shape: a list of mappings with ``path`` and
``url`` keys. Decoding is lenient the way struct deserialization is:
missing keys default to ``""`` and unknown keys are ignored, but a wrong
type anywhere is a ``ParseError``.
"""

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from redirector.errors import FileReadError, ParseError
from redirector.records import PathURL

_FIELDS = ("path", "url")


def read_file(path: str | Path) -> bytes:
    """Read a whole config file.

    Raises:
        FileReadError: The file is missing, unreadable, or a directory.
    """
    try:
        with open(path, "rb") as fh:
            return fh.read()
    except FileNotFoundError as exc:
        raise FileReadError(str(path), "no such file") from exc
    except PermissionError as exc:
        raise FileReadError(str(path), "permission denied") from exc
    except IsADirectoryError as exc:
        raise FileReadError(str(path), "is a directory") from exc
    except OSError as exc:
        raise FileReadError(str(path), exc.strerror or str(exc)) from exc


def parse_yaml(data: bytes | str, *, source: str = "YAML") -> list[PathURL]:
    """Decode a YAML sequence of ``{path, url}`` mappings.

    An empty document decodes to an empty list.
    """
    try:
        doc = yaml.safe_load(data)
    except yaml.YAMLError as exc:
        raise ParseError(source, " ".join(str(exc).split())) from exc
    return _to_records(doc, source)


def parse_json(data: bytes | str, *, source: str = "JSON") -> list[PathURL]:
    """Decode a JSON array of ``{"path", "url"}`` objects.

    ``null`` decodes to an empty list.
    """
    try:
        doc = json.loads(data)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ParseError(source, str(exc)) from exc
    return _to_records(doc, source)


def _to_records(doc: Any, source: str) -> list[PathURL]:
    if doc is None:
        return []
    if not isinstance(doc, list):
        msg = f"expected a list of path/url entries, got {_kind(doc)}"
        raise ParseError(source, msg)

    records: list[PathURL] = []
    for index, entry in enumerate(doc):
        if entry is None:
            # An empty list item decodes to the zero record
            records.append(PathURL("", ""))
            continue
        if not isinstance(entry, Mapping):
            msg = f"entry {index}: expected a mapping, got {_kind(entry)}"
            raise ParseError(source, msg)
        values: dict[str, str] = {}
        for key in _FIELDS:
            value = entry.get(key)
            if value is None:
                value = ""
            elif not isinstance(value, str):
                msg = f"entry {index}: {key!r} must be a string, got {_kind(value)}"
                raise ParseError(source, msg)
            values[key] = value
        records.append(PathURL(**values))
    return records


def _kind(value: Any) -> str:
    if isinstance(value, Mapping):
        return "mapping"
    if isinstance(value, list):
        return "list"
    return type(value).__name__
