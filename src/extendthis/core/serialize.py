"""Cycle-safe rendering of objects for error messages.

Objects are rendered as compact JSON. Every container is visited at most once:
a container that was already rendered (including one that refers to itself) is
left out of its parent instead of being expanded again. Callables are left out
of containers as well, so a class or prototype-like object renders as its data.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

_OMIT = object()

_JSON_SCALARS = (str, int, float, bool, type(None))


def stringify(value: Any) -> str:
    """Render value as compact JSON, breaking reference cycles.

    Args:
        value: Anything, typically the argument or object named in an error.

    Returns:
        JSON text. A top-level callable renders as ``<callable name>``.
    """
    converted = _to_jsonable(value, set())
    if converted is _OMIT:
        name = getattr(value, "__qualname__", type(value).__qualname__)
        return f"<callable {name}>"
    return json.dumps(converted, separators=(",", ":"), default=str)


def _to_jsonable(value: Any, seen: set[int]) -> Any:
    if isinstance(value, _JSON_SCALARS):
        return value

    if callable(value) and not isinstance(value, (Mapping, type)):
        return _OMIT

    if id(value) in seen:
        return _OMIT

    if isinstance(value, Mapping):
        seen.add(id(value))
        return _members(value.items(), seen)

    if isinstance(value, (list, tuple, set, frozenset)):
        seen.add(id(value))
        items = [_to_jsonable(item, seen) for item in value]
        return [item for item in items if item is not _OMIT]

    attributes = getattr(value, "__dict__", None)
    if isinstance(attributes, Mapping):
        seen.add(id(value))
        # Methods and properties defined on a class are behaviour, not data
        is_class = isinstance(value, type)
        return _members(
            (
                (k, v)
                for k, v in attributes.items()
                if not _is_dunder(k) and not (is_class and _is_descriptor(v))
            ),
            seen,
        )

    return str(value)


def _members(items: Any, seen: set[int]) -> dict[str, Any]:
    rendered: dict[str, Any] = {}
    for key, item in items:
        converted = _to_jsonable(item, seen)
        if converted is not _OMIT:
            rendered[str(key)] = converted
    return rendered


def _is_descriptor(value: Any) -> bool:
    return hasattr(type(value), "__get__")


def _is_dunder(name: Any) -> bool:
    return isinstance(name, str) and name.startswith("__") and name.endswith("__")
