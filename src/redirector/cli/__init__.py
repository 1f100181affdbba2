"""Redirector CLI — serve, inspect, and validate redirect chains.

Entry point registered as ``redirector`` in ``pyproject.toml``::

    [project.scripts]
    redirector = "redirector.cli:main"
"""

import argparse
import logging
import sys

from redirector.config import AppConfig

_JSON_HELP = (
    "JSON file mapping paths to urls in format: "
    '[{"path": "/a", "url": "https://..."}, ...] (default: %(default)s)'
)
_YAML_HELP = (
    "YAML file mapping paths to urls in format: "
    "'- path: /a' / '  url: https://...' per entry (default: %(default)s)"
)


def _add_source_args(parser: argparse.ArgumentParser) -> None:
    defaults = AppConfig()
    parser.add_argument("--json", dest="json_file", default=str(defaults.json_file), help=_JSON_HELP)
    parser.add_argument("--yaml", dest="yaml_file", default=str(defaults.yaml_file), help=_YAML_HELP)
    parser.add_argument(
        "--log-level",
        default=defaults.log_level,
        choices=["debug", "info", "warning", "error", "critical"],
        help="Log level (default: %(default)s)",
    )


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``redirector`` command."""
    parser = argparse.ArgumentParser(
        prog="redirector",
        description="redirector — redirect request paths to URLs from YAML and JSON tables.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- redirector run ---------------------------------------------------
    run_parser = subparsers.add_parser("run", help="Start the redirect server")
    _add_source_args(run_parser)
    run_parser.add_argument("--host", default=None, help="Bind host address")
    run_parser.add_argument("--port", type=int, default=None, help="Bind port number")

    # -- redirector routes ------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List every reachable redirect")
    _add_source_args(routes_parser)

    # -- redirector check -------------------------------------------------
    check_parser = subparsers.add_parser("check", help="Validate the config files")
    _add_source_args(check_parser)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "run":
        from redirector.cli._run import run_server

        run_server(args)
    elif args.command == "routes":
        from redirector.cli._routes import run_routes

        run_routes(args)
    elif args.command == "check":
        from redirector.cli._check import run_check

        run_check(args)
