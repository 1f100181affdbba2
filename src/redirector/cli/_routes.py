"""``redirector routes`` — list every reachable redirect.

Prints one row per path with its destination and the table that answers
it. Paths shadowed by an outer table are listed once, under the winner.
"""

import argparse

from redirector.chain import effective_routes
from redirector.cli._resolve import resolve_app


def run_routes(args: argparse.Namespace) -> None:
    """Print the effective redirect table for the configured chain."""
    app = resolve_app(args)
    rows = effective_routes(app.handler)
    if not rows:
        print("No redirects configured.")
        return

    max_path = max(max(len(r.path) for r in rows), 4)  # "PATH" header
    max_url = max(max(len(r.url) for r in rows), 3)  # "URL" header

    fmt = f"{{:<{max_path}}}  {{:<{max_url}}}  {{}}"
    print(fmt.format("PATH", "URL", "SOURCE"))
    sep_len = max_path + max_url + 4 + max(len(r.source) for r in rows)
    print("-" * min(sep_len, 80))
    for row in rows:
        print(fmt.format(row.path, row.url, row.source))
