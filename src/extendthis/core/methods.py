"""Method registry and built-in composition methods.

A method handler receives the target, the argument parser and the raw method
arguments. It must parse the arguments and return the parameters to apply,
after adding any filters of its own.

Usage:
    def with_upper(target, parse_args, args):
        params = parse_args(args)
        params.filters.append(upper_case_keys)
        return params

    registry = MethodRegistry()
    registry.register("with_upper", with_upper)
"""

from __future__ import annotations

import inspect
import logging
import types
from collections.abc import Mapping
from typing import Any

from extendthis.core.errors import ErrorReporter
from extendthis.core.filters import delegate_filter, exclude_name_filter
from extendthis.core.models import UNSET, MethodHandler, MethodParams, ParseArgs
from extendthis.core.properties import own_attributes

logger = logging.getLogger(__name__)


class MethodRegistry:
    """Registry mapping method names to method handlers."""

    def __init__(self) -> None:
        """Initialize empty method registry."""
        self._methods: dict[str, MethodHandler] = {}

    def register(self, name: str, method: MethodHandler | None = UNSET) -> MethodHandler | None:
        """Get, set or remove the handler for name.

        Args:
            name: Method name exposed on method tables.
            method: Handler to install, None to remove it, omitted to look it up.

        Returns:
            The handler now registered for name, or None.
        """
        if method is None:
            if self._methods.pop(name, None) is not None:
                logger.debug("Removed method %r", name)
        elif method is not UNSET:
            self._methods[name] = method
            logger.debug("Registered method %r", name)
        return self._methods.get(name)

    def names(self) -> list[str]:
        """Registered method names in registration order."""
        return list(self._methods)

    def items(self) -> list[tuple[str, MethodHandler]]:
        """Snapshot of (name, handler) pairs."""
        return list(self._methods.items())


def mixin_method(target: Any, parse_args: ParseArgs, args: list[Any]) -> MethodParams:
    """Shallow copy of the selected source properties."""
    return parse_args(args)


def delegate_method(target: Any, parse_args: ParseArgs, args: list[Any]) -> MethodParams:
    """Delegate the public properties of the source to it.

    Properties starting with an underscore are private and never delegated.
    Functions keep running against the source object after being attached
    to the target.
    """
    params = parse_args(args)
    params.filters.insert(0, exclude_name_filter(r"^_"))
    params.filters.append(delegate_filter)
    return params


class CallScope:
    """Receiver for an initializer run by the call method.

    Attribute writes stay on the scope. Reads fall back to the live target, and
    the target's methods are rebound to the scope so they write into it too.
    """

    __slots__ = ("_scope_target", "__dict__")

    def __init__(self, target: Any) -> None:
        object.__setattr__(self, "_scope_target", target)

    def __getattr__(self, name: str) -> Any:
        target = object.__getattribute__(self, "_scope_target")

        if isinstance(target, Mapping):
            try:
                return target[name]
            except KeyError:
                raise AttributeError(name) from None

        if isinstance(target, type):
            raw = inspect.getattr_static(target, name)
            if inspect.isfunction(raw):
                return types.MethodType(raw, self)

        value = getattr(target, name)
        if isinstance(value, types.MethodType) and value.__self__ is target:
            return types.MethodType(value.__func__, self)
        return value

    def harvest(self) -> dict[str, Any]:
        """Attributes set on the scope itself."""
        return own_attributes(self)


def make_call_method(reporter: ErrorReporter) -> MethodHandler:
    """Build the call method reporting through reporter.

    Accepted forms:
        with_call(func, *func_args)
        with_call([func, *func_args], *selectors_and_filters)

    A class is initialized through ``cls.__init__(scope, ...)``, any other
    callable is called as ``func(scope, ...)``. The attributes it sets on the
    scope become the source object.
    """

    def call_method(target: Any, parse_args: ParseArgs, args: list[Any]) -> MethodParams:
        first = args[0] if args else None

        if isinstance(first, (list, tuple)) and first and callable(first[0]):
            func, func_args = first[0], list(first[1:])
            method_args = list(args[1:])
        elif callable(first) and not isinstance(first, Mapping):
            func, func_args = first, list(args[1:])
            method_args = []
        else:
            reporter.illegal_argument(args, "first argument must be a function")

        scope = CallScope(target)
        if isinstance(func, type):
            func.__init__(scope, *func_args)
        else:
            func(scope, *func_args)

        return parse_args([scope.harvest(), *method_args])

    return call_method
