"""Route, RouteMatch, and DispatchResult frozen dataclasses."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from signpost.routing.handlers import HandlerRef
from signpost.routing.params import Param


@dataclass(frozen=True, slots=True)
class Route:
    """A registered route.

    Created by the registry and never mutated. ``params`` is the explicit
    handler parameter declaration, or ``None`` to read the handler signature.
    """

    method: str
    pattern: str
    target: HandlerRef
    rules: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    params: tuple[Param, ...] | None = None


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful route match."""

    route: Route
    path_params: dict[str, str]


@dataclass(frozen=True, slots=True)
class DispatchResult:
    """Outcome of a completed dispatch: the matched route and handler return value."""

    route: Route
    path_params: dict[str, str]
    value: Any = None
