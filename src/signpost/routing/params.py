"""Handler parameter declarations and capture reordering.

Captured path values are passed to a handler in the order of its declared
parameters, not the order the placeholders appear in the template. The
declaration comes from the route (``params=``) when given, otherwise from
the handler's signature.
"""

import inspect
from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from signpost.errors import ConfigurationError, MissingParameterError

# Annotations applied to captured strings when introspecting a signature
_CONVERTIBLE: frozenset[type] = frozenset({int, float})


class _Required:
    __slots__ = ()

    def __repr__(self) -> str:
        return "REQUIRED"


REQUIRED: Any = _Required()


@dataclass(frozen=True, slots=True)
class Param:
    """A declared handler parameter.

    ``default`` is ``REQUIRED`` when the parameter has no default value.
    ``convert`` is applied to the captured string before the call.
    """

    name: str
    default: Any = REQUIRED
    keyword_only: bool = False
    convert: Callable[[str], Any] | None = None

    @property
    def required(self) -> bool:
        return self.default is REQUIRED


def declare_params(spec: Iterable[str | Param]) -> tuple[Param, ...]:
    """Normalize an explicit declaration such as ``("name", Param("page", 1))``."""
    params: list[Param] = []
    for item in spec:
        param = Param(item) if isinstance(item, str) else item
        if not isinstance(param, Param) or not param.name:
            msg = f"Invalid parameter declaration: {item!r}"
            raise ConfigurationError(msg)
        params.append(param)
    return tuple(params)


def signature_params(handler: Callable[..., Any]) -> tuple[Param, ...]:
    """Read the declared parameters of *handler* from its signature.

    ``*args`` and ``**kwargs`` are ignored. Parameters annotated ``int`` or
    ``float`` convert their captured value.
    """
    sig = inspect.signature(handler, eval_str=True)
    params: list[Param] = []
    for name, p in sig.parameters.items():
        if p.kind in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD):
            continue
        params.append(
            Param(
                name=name,
                default=REQUIRED if p.default is inspect.Parameter.empty else p.default,
                keyword_only=p.kind is inspect.Parameter.KEYWORD_ONLY,
                convert=p.annotation if p.annotation in _CONVERTIBLE else None,
            )
        )
    return tuple(params)


def order_params(
    declared: Sequence[Param],
    captures: Mapping[str, str],
) -> tuple[list[Any], dict[str, Any]]:
    """Arrange *captures* into call arguments following *declared*.

    Captures with no declared parameter are dropped. Optional parameters
    without a capture get their default.

    Raises ``MissingParameterError`` for a required parameter with no capture.
    """
    args: list[Any] = []
    kwargs: dict[str, Any] = {}

    for param in declared:
        if param.name in captures:
            value = captures[param.name]
            if param.convert is not None:
                try:
                    value = param.convert(value)
                except (ValueError, TypeError):
                    value = captures[param.name]
        elif param.required:
            raise MissingParameterError(param.name, captures)
        else:
            value = param.default

        if param.keyword_only:
            kwargs[param.name] = value
        else:
            args.append(value)

    return args, kwargs
