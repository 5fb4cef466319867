"""Method table returned by Extender.extend().

Usage:
    extend(target).with_(Walker).with_delegate(engine, "start", "stop")
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any

BoundMethod = Callable[..., "MethodTable"]


class MethodTable:
    """One bound composition method per registered method name.

    Methods are looked up as attributes, or as items for names that are not
    identifiers. Every method returns the table so calls can be chained.
    """

    __slots__ = ("_target", "_methods")

    def __init__(self, target: Any, methods: dict[str, BoundMethod]) -> None:
        self._target = target
        self._methods = methods

    @property
    def target(self) -> Any:
        """The object this table modifies."""
        return self._target

    def __getattr__(self, name: str) -> BoundMethod:
        try:
            return self._methods[name]
        except KeyError:
            raise AttributeError(
                f"{type(self).__name__!r} has no method {name!r}; "
                f"registered: {', '.join(self._methods)}"
            ) from None

    def __getitem__(self, name: str) -> BoundMethod:
        return self._methods[name]

    def __contains__(self, name: object) -> bool:
        return name in self._methods

    def __iter__(self) -> Iterator[str]:
        return iter(self._methods)

    def __dir__(self) -> list[str]:
        return [*super().__dir__(), *self._methods]

    def __repr__(self) -> str:
        return f"MethodTable(target={type(self._target).__name__}, methods={list(self._methods)})"
