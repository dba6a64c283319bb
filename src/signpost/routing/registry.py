"""Per-method route storage in registration order.

Registration order is match priority: the dispatcher tries routes of a
method front to back and stops at the first match.
"""

from collections.abc import Iterable, Mapping
from types import MappingProxyType

from signpost.errors import DuplicateRouteRulesError, UnsupportedMethodError
from signpost.routing.compiler import check_placeholder_name, normalize_path, placeholder_names
from signpost.routing.handlers import handler_ref
from signpost.routing.params import Param, declare_params
from signpost.routing.route import Route
from signpost.routing.rules import resolve_rule

METHODS: tuple[str, ...] = ("GET", "POST", "PUT", "DELETE")

_NO_RULES: Mapping[str, str] = MappingProxyType({})


class RouteRegistry:
    """Routes keyed by HTTP method.

    Rules are tracked per ``(method, pattern)``: the first non-empty ruleset
    for a pattern applies to every route registered with that pattern, and
    attaching a second one fails.

    Usage::

        registry = RouteRegistry()
        registry.register("GET", "/news/{id}", show_news, {"id": "numeric"})
        registry.routes_for("GET")
    """

    __slots__ = ("_routes", "_rules", "_strict_rules")

    def __init__(self, *, strict_rules: bool = False) -> None:
        self._routes: dict[str, list[Route]] = {method: [] for method in METHODS}
        self._rules: dict[tuple[str, str], Mapping[str, str]] = {}
        self._strict_rules = strict_rules

    def register(
        self,
        method: str,
        pattern: str,
        target: object,
        rules: Mapping[str, str] | None = None,
        *,
        params: Iterable[str | Param] | None = None,
    ) -> Route:
        """Append a route for *method* and return it.

        Raises ``UnsupportedMethodError`` for verbs other than GET, POST,
        PUT, DELETE; ``DuplicateRouteRulesError`` when *rules* is non-empty
        and the pattern already has rules; ``MalformedTargetError`` when
        *target* is neither a string nor callable. With ``strict_rules``,
        ``UnknownRuleError`` is raised here instead of at dispatch.
        """
        verb = method.upper()
        if verb not in self._routes:
            raise UnsupportedMethodError(method)

        for name in placeholder_names(pattern):
            check_placeholder_name(name, pattern)

        ruleset: Mapping[str, str] = MappingProxyType(dict(rules)) if rules else _NO_RULES
        key = (verb, normalize_path(pattern))
        if ruleset:
            if key in self._rules:
                raise DuplicateRouteRulesError(verb, pattern)
            if self._strict_rules:
                for rule_id in ruleset.values():
                    resolve_rule(rule_id)

        route = Route(
            method=verb,
            pattern=pattern,
            target=handler_ref(target),
            rules=ruleset,
            params=declare_params(params) if params is not None else None,
        )
        if ruleset:
            self._rules[key] = ruleset
        self._routes[verb].append(route)
        return route

    def routes_for(self, method: str) -> tuple[Route, ...]:
        """Routes for *method* in registration order (empty for unknown verbs)."""
        return tuple(self._routes.get(method.upper(), ()))

    def rules_for(self, method: str, pattern: str) -> Mapping[str, str]:
        """Rules attached to *pattern* under *method*."""
        return self._rules.get((method.upper(), normalize_path(pattern)), _NO_RULES)

    @property
    def routes(self) -> list[Route]:
        """All routes, grouped by method, each group in registration order."""
        return [route for method in METHODS for route in self._routes[method]]

    def __len__(self) -> int:
        return sum(len(routes) for routes in self._routes.values())
