"""``signpost routes`` — list registered routes."""

import argparse
import sys

from signpost.cli._resolve import resolve_router


def run_routes(args: argparse.Namespace) -> None:
    """Print METHOD, PATH, HANDLER and RULES for every route, in match order."""
    try:
        router = resolve_router(args.router)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    routes = router.routes
    if not routes:
        print("No routes registered.")
        return

    rows: list[tuple[str, str, str, str]] = []
    for route in routes:
        # Rules are owned by (method, pattern), not by the route
        rules = ", ".join(
            f"{name}={rule}"
            for name, rule in router.registry.rules_for(route.method, route.pattern).items()
        )
        rows.append((route.method, route.pattern, str(route.target), rules))

    max_method = max(6, *(len(r[0]) for r in rows))  # "METHOD" header
    max_path = max(4, *(len(r[1]) for r in rows))  # "PATH" header
    max_handler = max(7, *(len(r[2]) for r in rows))  # "HANDLER" header

    fmt = f"{{:<{max_method}}}  {{:<{max_path}}}  {{:<{max_handler}}}  {{}}"
    print(fmt.format("METHOD", "PATH", "HANDLER", "RULES").rstrip())
    print("-" * min(max_method + max_path + max_handler + 11, 80))
    for row in rows:
        print(fmt.format(*row).rstrip())
