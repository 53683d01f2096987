"""Server startup.

Starts a pounce ASGI server with the live wren App object. pounce is an
optional dependency (``pip install wren[server]``); the in-process
``TestClient`` needs nothing beyond the core install.
"""

from wren.errors import ConfigurationError


def run_server(
    app: object,
    host: str,
    port: int,
    *,
    workers: int = 1,
    reload: bool = False,
    log_level: str = "info",
) -> None:
    """Start a pounce server with the given ASGI app.

    Pounce's ``run()`` takes an import string, but wren has a live ``App``
    object, so ``pounce.Server`` is used directly with the ASGI callable.
    """
    try:
        from pounce.config import ServerConfig
        from pounce.server import Server
    except ImportError as exc:
        msg = (
            "Running a server requires 'pounce'. "
            "Install it with: pip install wren[server]"
        )
        raise ConfigurationError(msg) from exc

    config = ServerConfig(
        host=host,
        port=port,
        workers=workers,
        reload=reload,
        log_level=log_level,
    )
    Server(config, app).run()
