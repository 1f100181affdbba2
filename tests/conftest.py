"""Shared fixtures: config files on disk and the AppConfig pointing at them."""

import json
from pathlib import Path

import pytest

from redirector.config import AppConfig

YAML_ENTRIES = """\
- path: /from-yaml
  url: https://yaml.example/page
- path: /shared
  url: https://yaml.example/shared
"""

JSON_ENTRIES = [
    {"path": "/from-json", "url": "https://json.example/page"},
    {"path": "/shared", "url": "https://json.example/shared"},
    {"path": "/urlshort", "url": "https://json.example/urlshort"},
]


@pytest.fixture
def yaml_file(tmp_path: Path) -> Path:
    path = tmp_path / "paths.yaml"
    path.write_text(YAML_ENTRIES)
    return path


@pytest.fixture
def json_file(tmp_path: Path) -> Path:
    path = tmp_path / "paths.json"
    path.write_text(json.dumps(JSON_ENTRIES))
    return path


@pytest.fixture
def config(yaml_file: Path, json_file: Path) -> AppConfig:
    return AppConfig(json_file=json_file, yaml_file=yaml_file)
