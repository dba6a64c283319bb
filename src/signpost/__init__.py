"""Signpost — a minimal HTTP request router.

Matches a request's method and path against routes in registration order
and invokes the first match, passing path captures in the order the handler
declares them.

Basic usage::

    from signpost import RequestContext, Router

    router = Router()

    @router.get("/news/{id}", rules={"id": "numeric"})
    def show_news(id):
        return f"news {id}"

    result = router.dispatch(RequestContext("GET", "/news/42"))
    result.value  # "news 42"
"""

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "DispatchError",
    "DispatchResult",
    "DuplicateRouteRulesError",
    "HTTPError",
    "HandlerRegistry",
    "MalformedTargetError",
    "MissingParameterError",
    "Param",
    "RequestContext",
    "Route",
    "RouteNotFoundError",
    "Router",
    "RouterConfig",
    "SignpostError",
    "UndefinedHandlerError",
    "UnknownRuleError",
    "UnsupportedMethodError",
]

_ERRORS = frozenset(
    {
        "ConfigurationError",
        "DispatchError",
        "DuplicateRouteRulesError",
        "HTTPError",
        "MalformedTargetError",
        "MissingParameterError",
        "RouteNotFoundError",
        "SignpostError",
        "UndefinedHandlerError",
        "UnknownRuleError",
        "UnsupportedMethodError",
    }
)


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import signpost`` fast while providing a clean top-level API.
    """
    if name == "Router":
        from signpost.routing.router import Router

        return Router

    if name == "RouterConfig":
        from signpost.config import RouterConfig

        return RouterConfig

    if name == "RequestContext":
        from signpost.http.request import RequestContext

        return RequestContext

    if name == "HandlerRegistry":
        from signpost.routing.handlers import HandlerRegistry

        return HandlerRegistry

    if name == "Param":
        from signpost.routing.params import Param

        return Param

    if name in ("Route", "DispatchResult"):
        from signpost.routing import route as _route

        return getattr(_route, name)

    if name in _ERRORS:
        from signpost import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
