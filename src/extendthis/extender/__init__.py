"""Entry point: the Extender, its method tables and the process-wide default.

The module-level functions act on a default Extender so that composition reads
the same everywhere in a process. Tests and embedders can build their own
Extender, or swap the default with set_extender().
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from extendthis.config import ExtendSettings
from extendthis.core.models import UNSET, MethodHandler, Selector
from extendthis.extender.extender import Extender
from extendthis.extender.table import MethodTable

# Module-level extender instance
_extender = Extender()


def get_extender() -> Extender:
    """Get the process-wide Extender."""
    return _extender


def set_extender(extender: Extender) -> Extender:
    """Replace the process-wide Extender.

    Returns:
        The previous Extender, so callers can restore it.
    """
    global _extender
    previous, _extender = _extender, extender
    return previous


def extend(target: Any, *args: Any) -> Any:
    """Get the composition methods for target from the default Extender."""
    return _extender.extend(target, *args)


def register_selector(prefix: str, selector: Selector | None = UNSET) -> Selector | None:
    """Get, set or remove a selector on the default Extender."""
    return _extender.register_selector(prefix, selector)


def register_method(name: str, method: MethodHandler | None = UNSET) -> MethodHandler | None:
    """Get, set or remove a method on the default Extender."""
    return _extender.register_method(name, method)


def set_wrapped_extend(extend_fn: Callable[..., Any] | None) -> None:
    """Set the function extend() hands extra arguments to on the default Extender."""
    _extender.set_wrapped_extend(extend_fn)


def get_config() -> ExtendSettings:
    """Settings of the default Extender. Mutate in place to change behaviour."""
    return _extender.config


__all__ = [
    "Extender",
    "MethodTable",
    "get_extender",
    "set_extender",
    "extend",
    "register_selector",
    "register_method",
    "set_wrapped_extend",
    "get_config",
]
