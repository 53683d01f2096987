"""Wren CLI — serve a directory over HTTP.

Entry point registered as ``wren`` in ``pyproject.toml``::

    [project.scripts]
    wren = "wren.cli:main"
"""

import argparse
import sys

from wren.config import LOG_LEVELS


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``wren`` command."""
    parser = argparse.ArgumentParser(
        prog="wren",
        description="Wren — serve static files from a directory.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- wren serve -------------------------------------------------------
    serve_parser = subparsers.add_parser("serve", help="Serve files from a root directory")
    serve_parser.add_argument("root", help="Directory to serve")
    serve_parser.add_argument("--host", default=None, help="Bind host address")
    serve_parser.add_argument("--port", type=int, default=None, help="Bind port number")
    serve_parser.add_argument("--workers", type=int, default=None, help="Worker count")
    serve_parser.add_argument(
        "--log-level",
        default="info",
        choices=LOG_LEVELS,
        help="Logging verbosity (debug traces every static lookup)",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "serve":
        from wren.cli._serve import serve_directory

        serve_directory(args)
