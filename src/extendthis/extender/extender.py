"""Extender: registries, configuration and the extend() entry point.

Usage:
    extender = Extender()

    class Dog:
        def __init__(self):
            extender.extend(self).with_call(Pet, "ralph", "red", "dog")

    extender.extend(Dog).with_(Pet)

    # Custom selectors and methods are registered on the extender
    extender.register_selector("~", my_selector)
    extender.register_method("with_logging", my_method)
"""

from __future__ import annotations

import warnings
from collections.abc import Callable
from functools import partial
from typing import Any

from extendthis.config import ExtendSettings
from extendthis.core.arguments import parse_method_args
from extendthis.core.errors import ErrorReporter
from extendthis.core.methods import (
    MethodRegistry,
    delegate_method,
    make_call_method,
    mixin_method,
)
from extendthis.core.models import UNSET, MethodHandler, Selector
from extendthis.core.pipeline import modify_target
from extendthis.core.selectors import (
    SelectorRegistry,
    make_negation_selector,
    override_selector,
)
from extendthis.extender.table import BoundMethod, MethodTable


class Extender:
    """Owns the selector and method registries used to compose objects.

    Built-in selectors: ``!`` (negation) and ``#`` (override).
    Built-in methods: ``with_call``, ``with_delegate`` and ``with_`` (mixin).
    """

    def __init__(self, settings: ExtendSettings | None = None) -> None:
        # Flags are flipped in place on config; the reporter reads them at raise time
        self.config = settings if settings is not None else ExtendSettings()
        self.reporter = ErrorReporter(self.config)
        self.selectors = SelectorRegistry()
        self.methods = MethodRegistry()
        self._wrapped_extend: Callable[..., Any] | None = None

        self.selectors.register("!", make_negation_selector(self.reporter))
        self.selectors.register("#", override_selector)

        self.methods.register("with_call", make_call_method(self.reporter))
        self.methods.register("with_delegate", delegate_method)
        self.methods.register("with_", mixin_method)

    def extend(self, target: Any, *args: Any) -> Any:
        """Get the composition methods for target.

        Args:
            target: The object to modify.
            *args: Passed with target to the wrapped extend function, if any.

        Returns:
            MethodTable bound to target, or the wrapped function's result when
            extra arguments were given and a function is wrapped.
        """
        if args:
            if self._wrapped_extend is not None:
                return self._wrapped_extend(target, *args)
            warnings.warn(
                f"extend() received {len(args)} extra argument(s) and no wrapped "
                f"extend function is set. They are ignored.",
                stacklevel=2,
            )

        methods: dict[str, BoundMethod] = {}
        table = MethodTable(target, methods)
        for name, handler in self.methods.items():
            methods[name] = self._bind(table, handler)
        return table

    def _bind(self, table: MethodTable, handler: MethodHandler) -> BoundMethod:
        parse_args = partial(parse_method_args, selectors=self.selectors, reporter=self.reporter)

        def method(*args: Any) -> MethodTable:
            params = handler(table.target, parse_args, list(args))
            modify_target(table.target, params, self.reporter)
            return table

        method.__name__ = getattr(handler, "__name__", "method")
        return method

    def register_selector(self, prefix: str, selector: Selector | None = UNSET) -> Selector | None:
        """Get, set or remove the selector for prefix. See SelectorRegistry.register."""
        return self.selectors.register(prefix, selector)

    def register_method(self, name: str, method: MethodHandler | None = UNSET) -> MethodHandler | None:
        """Get, set or remove the method handler for name. See MethodRegistry.register."""
        return self.methods.register(name, method)

    def set_wrapped_extend(self, extend_fn: Callable[..., Any] | None) -> None:
        """Route extend() calls with extra arguments to extend_fn.

        Lets another merge utility be called through the same entry point,
        e.g. ``extend(target, source)``. None removes it.
        """
        self._wrapped_extend = extend_fn
