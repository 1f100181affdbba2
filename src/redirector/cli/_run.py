"""``redirector run`` — start the redirect server.

Builds the whole chain first; a missing or malformed config file stops
the command before the server binds its port.
"""

import argparse

from redirector.cli._resolve import resolve_app


def run_server(args: argparse.Namespace) -> None:
    """Resolve the app from CLI flags and serve it."""
    app = resolve_app(args)

    from redirector.server.runner import run_server as _serve

    _serve(app)
