"""Built-in filters.

Pure functions over FilterContext; each returns True to keep the property.
"""

from __future__ import annotations

import inspect
import re
import types
from collections.abc import Callable
from typing import Any

from extendthis.core.models import Filter, FilterContext


class Delegate:
    """Callable that always runs func against a fixed receiver.

    Not a descriptor: attached to a class it is returned as is, so the
    receiver is kept no matter which object it is looked up on.
    """

    __slots__ = ("func", "receiver", "__weakref__")

    def __init__(self, func: Callable[..., Any], receiver: Any) -> None:
        self.func = func
        self.receiver = receiver

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        return self.func(*args, **kwargs)

    def __repr__(self) -> str:
        name = getattr(self.func, "__qualname__", repr(self.func))
        return f"<Delegate {name} of {type(self.receiver).__name__}>"


def bind_to(value: Any, receiver: Any) -> Callable[..., Any] | None:
    """Bind a function-like value to receiver.

    Args:
        value: Property value read from a source.
        receiver: The source object.

    Functions read from an instance or a mapping are already bound, or never
    expected a receiver, and are kept as they are.

    Returns:
        A callable running value against receiver, or None if value is not
        function-like. Classes are not function-like.
    """
    if isinstance(value, staticmethod):
        return value.__func__
    if isinstance(value, classmethod):
        owner = receiver if isinstance(receiver, type) else type(receiver)
        return types.MethodType(value.__func__, owner)
    if inspect.isfunction(value) and isinstance(receiver, type):
        # Read raw from a class body, so it still expects its receiver
        return types.MethodType(value, receiver)
    if callable(value) and not isinstance(value, type):
        return value
    return None


def exclude_name_filter(pattern: str | re.Pattern[str]) -> Filter:
    """Build a filter dropping properties whose source key matches pattern."""
    regexp = re.compile(pattern)

    def exclude_name(ctx: FilterContext) -> bool:
        return not regexp.search(ctx.source_key)

    return exclude_name


def delegate_filter(ctx: FilterContext) -> bool:
    """Replace function values with delegates bound to the source object."""
    bound = bind_to(ctx.source_value, ctx.source)
    if bound is not None:
        ctx.source_value = Delegate(bound, ctx.source)
    return True
