"""Signpost CLI — inspect a router's route table.

Entry point registered as ``signpost`` in ``pyproject.toml``::

    [project.scripts]
    signpost = "signpost.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``signpost`` command."""
    parser = argparse.ArgumentParser(
        prog="signpost",
        description="Signpost — a minimal HTTP request router.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- signpost routes --------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List registered routes")
    routes_parser.add_argument("router", help="Import string (e.g. myapp:router)")

    # -- signpost match ---------------------------------------------------
    match_parser = subparsers.add_parser(
        "match", help="Show which route a request would dispatch to"
    )
    match_parser.add_argument("router", help="Import string (e.g. myapp:router)")
    match_parser.add_argument("method", help="HTTP method (GET, POST, PUT, DELETE)")
    match_parser.add_argument("path", help="Request path (e.g. /news/42)")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "routes":
        from signpost.cli._routes import run_routes

        run_routes(args)
    elif args.command == "match":
        from signpost.cli._match import run_match

        run_match(args)
