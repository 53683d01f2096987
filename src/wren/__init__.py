"""Wren — a small ASGI toolkit with a safe static-files handler.

Basic usage::

    from wren import App, AppConfig

    app = App(AppConfig(static_dir="./public"))

    @app.route("/api/health")
    def health():
        return "ok"

    app.run()

Files beneath ``./public`` are served for GET and HEAD; everything else
falls through to the routes.
"""

__version__ = "0.1.0"
__all__ = [
    "AnyResponse",
    "App",
    "AppConfig",
    "BadRequest",
    "ConfigurationError",
    "DecodeError",
    "FileResponse",
    "HTTPError",
    "Method",
    "MethodNotAllowed",
    "Middleware",
    "Next",
    "NotFound",
    "Request",
    "Response",
    "StaticFilesHandler",
    "WrenError",
]

_ERRORS = frozenset(
    {
        "BadRequest",
        "ConfigurationError",
        "DecodeError",
        "HTTPError",
        "MethodNotAllowed",
        "NotFound",
        "WrenError",
    }
)


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import wren`` fast while providing a clean top-level API.
    """
    if name == "App":
        from wren.app import App

        return App

    if name == "AppConfig":
        from wren.config import AppConfig

        return AppConfig

    if name == "Request":
        from wren.http.request import Request

        return Request

    if name == "Method":
        from wren.http.method import Method

        return Method

    if name in ("Response", "FileResponse"):
        from wren.http import response

        return getattr(response, name)

    if name in ("AnyResponse", "Middleware", "Next"):
        from wren.middleware import protocol

        return getattr(protocol, name)

    if name == "StaticFilesHandler":
        from wren.middleware.static import StaticFilesHandler

        return StaticFilesHandler

    if name in _ERRORS:
        from wren import errors

        return getattr(errors, name)

    msg = f"module 'wren' has no attribute {name!r}"
    raise AttributeError(msg)
