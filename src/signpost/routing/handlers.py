"""Handler references and the startup-time handler registry.

A route target is one of three shapes:

- an inline callable (function, lambda, bound method)
- a bare name, e.g. ``"show_home"``, naming a registered function
- ``"ClassName@method"``, naming a method on a registered class

String targets are never resolved against modules or globals. They are
looked up in a ``HandlerRegistry`` populated at startup::

    handlers = HandlerRegistry()
    handlers.add_function(show_home)
    handlers.add_class(NewsController)

    handlers.resolve(handler_ref("NewsController@show"))
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeAlias

from signpost.errors import MalformedTargetError, UndefinedHandlerError

METHOD_DELIMITER = "@"


@dataclass(frozen=True, slots=True)
class InlineCallable:
    func: Callable[..., Any]

    def __str__(self) -> str:
        return getattr(self.func, "__qualname__", repr(self.func))


@dataclass(frozen=True, slots=True)
class NamedFunction:
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class ClassMethod:
    class_name: str
    method_name: str

    def __str__(self) -> str:
        return f"{self.class_name}{METHOD_DELIMITER}{self.method_name}"


HandlerRef: TypeAlias = InlineCallable | NamedFunction | ClassMethod


def handler_ref(target: object) -> HandlerRef:
    """Build a ``HandlerRef`` from a registration target.

    Strings containing ``@`` become ``ClassMethod`` from their first two
    ``@``-separated fields (``"A@b@c"`` names method ``b`` of ``A``). Empty halves are
    kept and fail with ``UndefinedHandlerError`` at dispatch. Other non-empty strings become
    ``NamedFunction``; non-string targets must be callable.

    Raises ``MalformedTargetError`` for anything else.
    """
    if isinstance(target, InlineCallable | NamedFunction | ClassMethod):
        return target
    if isinstance(target, str):
        if METHOD_DELIMITER in target:
            class_name, method_name = target.split(METHOD_DELIMITER)[:2]
            return ClassMethod(class_name, method_name)
        if not target:
            raise MalformedTargetError(target)
        return NamedFunction(target)
    if callable(target):
        return InlineCallable(target)
    raise MalformedTargetError(target)


class HandlerRegistry:
    """Maps string identifiers to functions and controller classes.

    Built once at startup and read-only afterwards.
    """

    __slots__ = ("_classes", "_functions")

    def __init__(self) -> None:
        self._functions: dict[str, Callable[..., Any]] = {}
        self._classes: dict[str, type] = {}

    def add_function(self, func: Callable[..., Any], name: str | None = None) -> Callable[..., Any]:
        """Register *func* under *name* (defaults to ``func.__name__``).

        Returns *func* so this doubles as a decorator.
        """
        self._functions[name or func.__name__] = func
        return func

    def add_class(self, cls: type, name: str | None = None) -> type:
        """Register a controller class under *name* (defaults to ``cls.__name__``)."""
        self._classes[name or cls.__name__] = cls
        return cls

    def has_function(self, name: str) -> bool:
        return name in self._functions

    def has_class(self, name: str) -> bool:
        return name in self._classes

    def resolve(self, ref: HandlerRef) -> Callable[..., Any]:
        """Return the callable a route should invoke.

        ``ClassMethod`` targets are instantiated with no arguments on every
        call; the bound method is returned.

        Raises ``MalformedTargetError`` for an unregistered function name and
        ``UndefinedHandlerError`` for a missing class or method.
        """
        match ref:
            case InlineCallable(func):
                return func
            case NamedFunction(name):
                func = self._functions.get(name)
                if func is None:
                    raise MalformedTargetError(name)
                return func
            case ClassMethod(class_name, method_name):
                cls = self._classes.get(class_name)
                if cls is None or not callable(getattr(cls, method_name, None)):
                    raise UndefinedHandlerError(class_name, method_name)
                return getattr(cls(), method_name)
        raise MalformedTargetError(ref)
