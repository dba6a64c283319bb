"""Request dispatch — first-match-wins over the registry.

For each route of the request method, in registration order:

1. compile the pattern with the rules attached to it
2. match the request path; stop at the first match
3. resolve the handler and reorder captures to its declared parameters
4. invoke it once and return a ``DispatchResult``

Routes are not ranked by specificity. A route whose rules reference an
unknown rule id is logged and skipped so the scan can continue; every other
error propagates to the caller.
"""

import logging
from collections.abc import Callable
from typing import Any

from signpost.errors import RouteNotFoundError, UnknownRuleError
from signpost.http.request import RequestContext
from signpost.routing.compiler import compile_pattern
from signpost.routing.handlers import HandlerRegistry
from signpost.routing.params import Param, order_params, signature_params
from signpost.routing.registry import RouteRegistry
from signpost.routing.route import DispatchResult, RouteMatch
from signpost.routing.rules import DEFAULT_RULE

logger = logging.getLogger("signpost.routing")


class Dispatcher:
    """Matches requests against a ``RouteRegistry`` and invokes handlers.

    The registry must be fully populated before the first dispatch; after
    that it is only read.
    """

    __slots__ = ("_default_rule", "_handlers", "_registry", "_signatures")

    def __init__(
        self,
        registry: RouteRegistry,
        handlers: HandlerRegistry | None = None,
        *,
        default_rule: str = DEFAULT_RULE,
    ) -> None:
        self._registry = registry
        self._handlers = handlers if handlers is not None else HandlerRegistry()
        self._default_rule = default_rule
        # Handler function -> parameters read from its signature
        self._signatures: dict[Any, tuple[Param, ...]] = {}

    def match(self, method: str, path: str) -> RouteMatch:
        """Find the first route of *method* whose pattern matches *path*.

        Raises ``RouteNotFoundError`` when every candidate is exhausted.
        """
        for route in self._registry.routes_for(method):
            rules = self._registry.rules_for(route.method, route.pattern)
            try:
                compiled = compile_pattern(route.pattern, rules, default_rule=self._default_rule)
            except UnknownRuleError as exc:
                logger.warning("Skipping route %s %s: %s", route.method, route.pattern, exc)
                continue

            captures = compiled.match(path)
            if captures is not None:
                logger.debug("%s %s matched %r with %r", method, path, route.pattern, captures)
                return RouteMatch(route=route, path_params=captures)

        logger.debug("%s %s matched no route", method, path)
        raise RouteNotFoundError(f"No route matches {method.upper()} {path!r}")

    def dispatch(self, context: RequestContext) -> DispatchResult:
        """Match *context* and invoke exactly one handler.

        Raises ``RouteNotFoundError`` if nothing matches, and the resolution
        errors (``UndefinedHandlerError``, ``MalformedTargetError``,
        ``MissingParameterError``) or whatever the handler raises otherwise.
        """
        match = self.match(context.method, context.path_info)
        route = match.route
        handler = self._handlers.resolve(route.target)

        declared = route.params if route.params is not None else self._declared(handler)
        args, kwargs = order_params(declared, match.path_params)

        value = handler(*args, **kwargs)
        return DispatchResult(route=route, path_params=match.path_params, value=value)

    def _declared(self, handler: Callable[..., Any]) -> tuple[Param, ...]:
        """Signature parameters of *handler*, read once per underlying function."""
        key = getattr(handler, "__func__", handler)
        params = self._signatures.get(key)
        if params is None:
            params = signature_params(handler)
            self._signatures[key] = params
        return params
