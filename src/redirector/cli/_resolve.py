"""Config resolution — turns parsed CLI arguments into a built App.

Shared by ``redirector run``, ``routes``, and ``check``. Configuration
errors are reported on stderr and exit with status 1.
"""

import argparse
import sys

from redirector.app import App
from redirector.config import AppConfig
from redirector.errors import ConfigurationError


def config_from_args(args: argparse.Namespace) -> AppConfig:
    """Build an AppConfig, letting CLI flags override the defaults."""
    defaults = AppConfig()
    return AppConfig(
        host=getattr(args, "host", None) or defaults.host,
        port=getattr(args, "port", None) or defaults.port,
        json_file=args.json_file,
        yaml_file=args.yaml_file,
        log_level=getattr(args, "log_level", None) or defaults.log_level,
    )


def resolve_app(args: argparse.Namespace) -> App:
    """Build the App described by *args*, or exit 1 on a config error."""
    config = config_from_args(args)
    try:
        return App(config)
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
