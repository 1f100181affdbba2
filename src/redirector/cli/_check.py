"""``redirector check`` — validate config files without serving."""

import argparse

from redirector.chain import iter_chain
from redirector.cli._resolve import resolve_app


def run_check(args: argparse.Namespace) -> None:
    """Build the chain and print a summary of each table.

    Exits 1 (via ``resolve_app``) when any table fails to load.
    """
    app = resolve_app(args)
    links = list(iter_chain(app.handler))
    for link in links:
        print(f"{link.source}: {len(link.table)} redirect(s)")
    print(f"OK: {len(links)} tables loaded")
