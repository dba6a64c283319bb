"""Signpost exception hierarchy.

Shared across the registry, compiler, and dispatcher so every module
raises and catches the same types.
"""

from collections.abc import Iterable
from dataclasses import dataclass


class SignpostError(Exception):
    """Base for all signpost-specific errors."""


class ConfigurationError(SignpostError):
    """Raised when a route or router is misconfigured.

    Registration-time errors are always raised, never absorbed, so a bad
    route table fails at startup.
    """


class UnknownRuleError(ConfigurationError):
    """A placeholder references a rule id that is not in the rule table."""

    def __init__(self, rule_id: str) -> None:
        self.rule_id = rule_id
        super().__init__(f"Unknown validation rule: {rule_id!r}")


class UnsupportedMethodError(ConfigurationError):
    """Registration for an HTTP method outside GET, POST, PUT, DELETE."""

    def __init__(self, method: str) -> None:
        self.method = method
        super().__init__(f"Unsupported HTTP method: {method!r}")


class DuplicateRouteRulesError(ConfigurationError):
    """A second ruleset attached to a pattern that already has rules."""

    def __init__(self, method: str, pattern: str) -> None:
        self.method = method
        self.pattern = pattern
        super().__init__(f"Rules already attached to {method} {pattern!r}")


class DispatchError(SignpostError):
    """Raised while resolving or invoking the handler of a matched route."""


class UndefinedHandlerError(DispatchError):
    """A ``Class@method`` target whose class or method does not exist."""

    def __init__(self, class_name: str, method_name: str) -> None:
        self.class_name = class_name
        self.method_name = method_name
        super().__init__(f"Undefined class or method: {class_name}@{method_name}")


class MalformedTargetError(DispatchError):
    """A target that is not a callable, a known function, or ``Class@method``."""

    def __init__(self, target: object) -> None:
        self.target = target
        super().__init__(
            f"Bad route target {target!r}: not callable, not a registered "
            "function and not Class@method."
        )


class MissingParameterError(DispatchError):
    """A required handler parameter has no matching path capture."""

    def __init__(self, param: str, available: Iterable[str]) -> None:
        self.param = param
        self.available = tuple(available)
        listing = ", ".join(self.available) or "none"
        super().__init__(
            f"Missing required parameter {param!r} (available captures: {listing})"
        )


@dataclass(frozen=True, slots=True)
class HTTPError(SignpostError):
    """An outcome that maps directly to an HTTP status code.

    The router never writes a response itself; callers catch these and
    translate them for their transport.
    """

    status: int
    detail: str = ""

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class RouteNotFoundError(HTTPError):
    """404 — no route for the request method matched the path."""

    def __init__(self, detail: str = "Not Found") -> None:
        super().__init__(status=404, detail=detail)
