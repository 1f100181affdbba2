"""Application configuration.

AppConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups. The listen address and config file names live
here instead of in module globals so tests can point them anywhere.
"""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = AppConfig(port=9000, yaml_file="redirects.yaml")
    """

    # Server
    host: str = "0.0.0.0"
    port: int = 8080

    # Redirect sources, outermost first: YAML file, then JSON file
    json_file: str | Path = "paths.json"
    yaml_file: str | Path = "paths.yaml"

    # Logging
    log_level: str = "info"
    access_log: bool = True
