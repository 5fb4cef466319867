"""Uniform property access over mappings and plain objects.

Mappings expose their string keys as properties. Any other object exposes its
attributes: its own ``__dict__`` first, then the names defined along its class
MRO (a class exposes its own MRO). Dunder names and the bookkeeping attributes
``abc`` and ``typing`` store on user classes are never enumerated.
"""

from __future__ import annotations

import inspect
import types
from collections.abc import Iterator, Mapping, MutableMapping
from typing import Any

# Set on classes by ABCMeta and typing.Protocol
_CLASS_MACHINERY = frozenset({"_is_protocol", "_is_runtime_protocol"})


def is_dunder(name: str) -> bool:
    """Check if name is a ``__special__`` name."""
    return name.startswith("__") and name.endswith("__") and len(name) > 4


def _is_class_machinery(name: str) -> bool:
    return name.startswith("_abc_") or name in _CLASS_MACHINERY


def enumerable_keys(obj: Any) -> list[str]:
    """List the property names of obj in enumeration order.

    Args:
        obj: Mapping or object.

    Returns:
        Own properties followed by inherited ones, without duplicates.
    """
    return list(dict.fromkeys(_iter_keys(obj)))


def _iter_keys(obj: Any) -> Iterator[str]:
    if isinstance(obj, Mapping):
        yield from (key for key in obj if isinstance(key, str))
        return

    own = getattr(obj, "__dict__", None)
    if isinstance(own, Mapping) and not isinstance(obj, type):
        yield from (key for key in own if isinstance(key, str) and not is_dunder(key))

    mro = obj.__mro__ if isinstance(obj, type) else type(obj).__mro__
    for cls in mro:
        if cls is object:
            continue
        for key in vars(cls):
            if is_dunder(key) or _is_class_machinery(key):
                continue
            if has_property(obj, key):
                yield key


def has_property(obj: Any, key: str) -> bool:
    """Check if obj has key as an own or inherited property."""
    if isinstance(obj, Mapping):
        return key in obj
    return hasattr(obj, key)


def get_property(obj: Any, key: str) -> Any:
    """Read property key from obj.

    Class attributes are read raw, so functions, staticmethods, classmethods and
    properties are returned as stored and can be attached to another class.

    Raises:
        KeyError: If a mapping lacks key.
        AttributeError: If an object lacks key.
    """
    if isinstance(obj, Mapping):
        return obj[key]
    if isinstance(obj, type):
        return inspect.getattr_static(obj, key)
    return getattr(obj, key)


def bind_class_attribute(value: Any, target: Any) -> Any:
    """Resolve a raw class attribute the way an instance lookup on target would.

    Functions become methods bound to target, classmethods are bound to the
    class of target and staticmethods are unwrapped. Anything else is returned
    as is.
    """
    if isinstance(value, (types.FunctionType, classmethod, staticmethod)):
        return value.__get__(target, type(target))
    return value


def set_property(obj: Any, key: str, value: Any) -> None:
    """Write value as property key of obj (shallow assignment)."""
    if isinstance(obj, MutableMapping):
        obj[key] = value
    else:
        setattr(obj, key, value)


def own_attributes(obj: Any) -> dict[str, Any]:
    """Snapshot the attributes set directly on obj."""
    return {key: value for key, value in vars(obj).items() if not is_dunder(key)}
