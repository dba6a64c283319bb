"""Router — registration API and dispatch entry point.

Routes are registered during startup and the router freezes on its first
match or dispatch; after that it is read-only and may be shared.
"""

from collections.abc import Callable, Iterable, Mapping
from typing import Any, TypeAlias

from signpost.config import RouterConfig
from signpost.errors import ConfigurationError
from signpost.http.request import RequestContext
from signpost.routing.dispatcher import Dispatcher
from signpost.routing.handlers import HandlerRegistry
from signpost.routing.params import Param
from signpost.routing.registry import RouteRegistry
from signpost.routing.route import DispatchResult, Route, RouteMatch
from signpost.routing.rules import resolve_rule

Rules: TypeAlias = Mapping[str, str]
ParamSpec: TypeAlias = Iterable[str | Param]


class Router:
    """A minimal HTTP router.

    Usage::

        router = Router()
        router.handlers.add_class(NewsController)

        router.get("/news/{id}", "NewsController@show", {"id": "numeric"})

        @router.post("/news/{id}/comments")
        def add_comment(id):
            ...

        result = router.dispatch(RequestContext("GET", "/news/42"))
    """

    __slots__ = ("_dispatcher", "_frozen", "config", "handlers", "registry")

    def __init__(
        self,
        config: RouterConfig | None = None,
        handlers: HandlerRegistry | None = None,
    ) -> None:
        self.config = config or RouterConfig()
        # Fail at startup on a misspelled default rule
        resolve_rule(self.config.default_rule)

        self.handlers = handlers if handlers is not None else HandlerRegistry()
        self.registry = RouteRegistry(strict_rules=self.config.strict_rules)
        self._dispatcher = Dispatcher(
            self.registry,
            self.handlers,
            default_rule=self.config.default_rule,
        )
        self._frozen = False

    # -- Registration --

    def route(
        self,
        method: str,
        pattern: str,
        target: object = None,
        rules: Rules | None = None,
        *,
        params: ParamSpec | None = None,
    ) -> Any:
        """Register *target* for *method* and *pattern*.

        Without *target*, returns a decorator that registers the decorated
        function and returns it unchanged.
        """
        if target is None:

            def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
                self._add(method, pattern, func, rules, params)
                return func

            return decorator

        return self._add(method, pattern, target, rules, params)

    def get(
        self,
        pattern: str,
        target: object = None,
        rules: Rules | None = None,
        *,
        params: ParamSpec | None = None,
    ) -> Any:
        return self.route("GET", pattern, target, rules, params=params)

    def post(
        self,
        pattern: str,
        target: object = None,
        rules: Rules | None = None,
        *,
        params: ParamSpec | None = None,
    ) -> Any:
        return self.route("POST", pattern, target, rules, params=params)

    def put(
        self,
        pattern: str,
        target: object = None,
        rules: Rules | None = None,
        *,
        params: ParamSpec | None = None,
    ) -> Any:
        return self.route("PUT", pattern, target, rules, params=params)

    def delete(
        self,
        pattern: str,
        target: object = None,
        rules: Rules | None = None,
        *,
        params: ParamSpec | None = None,
    ) -> Any:
        return self.route("DELETE", pattern, target, rules, params=params)

    def _add(
        self,
        method: str,
        pattern: str,
        target: object,
        rules: Rules | None,
        params: ParamSpec | None,
    ) -> Route:
        if self._frozen:
            msg = f"Cannot register {method.upper()} {pattern!r}: the router is already dispatching."
            raise ConfigurationError(msg)
        return self.registry.register(method, pattern, target, rules, params=params)

    # -- Lookup and dispatch --

    @property
    def routes(self) -> list[Route]:
        return self.registry.routes

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> None:
        """Close registration. Called implicitly by ``match`` and ``dispatch``."""
        self._frozen = True

    def match(self, method: str, path: str) -> RouteMatch:
        """Find the route for *method* and *path* without invoking it."""
        self.freeze()
        return self._dispatcher.match(method, path)

    def dispatch(self, context: RequestContext) -> DispatchResult:
        """Invoke the handler of the first route matching *context*.

        Raises ``RouteNotFoundError`` when no route matches; the caller
        decides what that means for its transport.
        """
        self.freeze()
        return self._dispatcher.dispatch(context)
