"""Redirector — path-to-URL redirects served from a chain of lookup tables.

Each table answers the paths it knows with ``302 Found`` and hands every
other request to the next table, ending in a default handler::

    from redirector import App, AppConfig

    app = App(AppConfig(json_file="paths.json", yaml_file="paths.yaml"))
    app.run()

Chains can also be built by hand::

    from redirector.handlers import map_handler, yaml_handler
    from redirector.mux import default_mux

    handler = yaml_handler(data, map_handler({"/a": "https://a.example"}, default_mux()))
    app = App(handler=handler)
"""

__version__ = "0.1.0"
__all__ = [
    "App",
    "AppConfig",
    "ConfigurationError",
    "FileReadError",
    "HTTPError",
    "NotFound",
    "ParseError",
    "PathURL",
    "RedirectorError",
    "Request",
    "Response",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import redirector`` fast while providing a clean top-level API.
    """
    if name == "App":
        from redirector.app import App

        return App

    if name == "AppConfig":
        from redirector.config import AppConfig

        return AppConfig

    if name == "PathURL":
        from redirector.records import PathURL

        return PathURL

    if name in ("Request", "Response"):
        from redirector import http as _http

        return getattr(_http, name)

    if name in (
        "ConfigurationError",
        "FileReadError",
        "HTTPError",
        "NotFound",
        "ParseError",
        "RedirectorError",
    ):
        from redirector import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
