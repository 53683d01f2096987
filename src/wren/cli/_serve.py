"""``wren serve`` — serve a directory with the static files handler."""

import argparse
import logging
import sys
from pathlib import Path

from wren.app import App
from wren.config import AppConfig

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def serve_directory(args: argparse.Namespace) -> None:
    """Validate the root directory, configure logging, and run the server."""
    root = Path(args.root)
    if not root.is_dir():
        print(f"Error: {args.root!r} is not a directory", file=sys.stderr)
        raise SystemExit(1)

    logging.basicConfig(level=args.log_level.upper(), format=LOG_FORMAT)

    defaults = AppConfig()
    config = AppConfig(
        host=args.host or defaults.host,
        port=args.port if args.port is not None else defaults.port,
        workers=args.workers if args.workers is not None else defaults.workers,
        static_dir=root,
        log_level=args.log_level,
    )
    App(config).run()
