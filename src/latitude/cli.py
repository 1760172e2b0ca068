"""Latitude CLI: serve the public site.

Entry point registered as ``latitude`` in ``pyproject.toml``::

    [project.scripts]
    latitude = "latitude.cli:main"
"""

import argparse
import logging
import sys

from latitude.config import SiteConfig
from latitude.errors import ConfigurationError
from latitude.server.app import Site


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``latitude`` command."""
    parser = argparse.ArgumentParser(
        prog="latitude",
        description="Latitude: static server for the Latitude Sales site.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- latitude run -----------------------------------------------------
    run_parser = subparsers.add_parser("run", help="Serve the public directory")
    run_parser.add_argument("--root", default=None, help="Public directory (default: ./public)")
    run_parser.add_argument("--host", default=None, help="Bind host address")
    run_parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Bind port number (default: $PORT or 3000)",
    )
    run_parser.add_argument("--log-level", default=None, help="debug, info, warning, error")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "run":
        run(args)


def build_site(args: argparse.Namespace) -> Site:
    """Build a validated Site from the environment plus CLI overrides."""
    config = SiteConfig.from_env(
        root=args.root,
        host=args.host,
        port=args.port,
        log_level=args.log_level,
    )
    return Site(config)


def run(args: argparse.Namespace) -> None:
    try:
        site = build_site(args)
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    logging.basicConfig(
        level=site.config.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    from latitude.server.dev import run_server

    run_server(site)
