"""``signpost match`` — dry-run route matching without invoking a handler."""

import argparse
import sys

from signpost.cli._resolve import resolve_router
from signpost.errors import RouteNotFoundError


def run_match(args: argparse.Namespace) -> None:
    """Print the route and captures *args.path* would dispatch to.

    Exits with status 1 when nothing matches.
    """
    try:
        router = resolve_router(args.router)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    try:
        match = router.match(args.method, args.path)
    except RouteNotFoundError as exc:
        print(exc.detail, file=sys.stderr)
        raise SystemExit(1) from exc

    route = match.route
    print(f"{route.method} {route.pattern} -> {route.target}")
    for name, value in match.path_params.items():
        print(f"  {name} = {value}")
