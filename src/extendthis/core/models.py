"""Composition models: contexts, parsed parameters and callable signatures.

Filters, selectors and methods are plain callables:

    def shout(ctx: FilterContext) -> bool:
        ctx.target_key = ctx.target_key.upper()
        return True

    def prefixed(ctx: SelectorContext) -> None:
        ctx.source_keys[ctx.source_key] = f"my_{ctx.target_key}"

    def method(target, parse_args, args) -> MethodParams:
        return parse_args(args)
"""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any

UNSET: Any = object()
"""Marks an omitted handler in the combined get/set registry calls."""


@dataclass
class FilterContext:
    """Per-property record passed through the filter pipeline.

    Only source_value and target_key are meant to be modified by filters.
    Setting target_key to None rejects the property.
    """

    target: Any
    source: Any
    source_key: str
    source_value: Any
    target_key: str | None


@dataclass
class SelectorContext:
    """Record passed to a string selector.

    source_keys and override_keys are the collections being built for the
    current method call; selectors mutate them directly.
    """

    source: Any
    source_key: str
    """Remaining text after the selector prefix."""

    target_key: str
    source_keys: dict[str, str | None]
    override_keys: set[str]


@dataclass
class MethodParams:
    """Parsed method arguments, consumed by the filter pipeline executor."""

    source: Any
    filters: list[Filter] = field(default_factory=list)
    source_keys: dict[str, str | None] = field(default_factory=dict)
    """Source key -> target key, in selection order. A None target key skips the property."""

    override_keys: set[str] = field(default_factory=set)
    """Source keys allowed to overwrite an existing target property."""


Filter = Callable[[FilterContext], Any]
"""Signature: (context) -> truthy to keep the property, falsy to drop it"""

Selector = Callable[[SelectorContext], None]

ParseArgs = Callable[[list[Any]], MethodParams]

MethodHandler = Callable[[Any, ParseArgs, list[Any]], MethodParams]
"""Signature: (target, parse_args, args) -> MethodParams"""


class ArgumentKind(Enum):
    """Discriminant for the positional arguments of a composition method."""

    KEY = auto()  # Property name, possibly with a selector prefix
    PATTERN = auto()  # Compiled regular expression over property names
    GROUP = auto()  # list/tuple unpacked in place
    MAPPING = auto()  # Rename map, or the source when first
    FILTER = auto()  # Callable added to the pipeline
    OBJECT = auto()  # Attribute-bearing source object
    SCALAR = auto()  # None, bools, numbers, bytes: never valid

    @classmethod
    def of(cls, arg: Any) -> ArgumentKind:
        """Classify a positional argument.

        Classes are objects, not filters, so they can serve as sources.
        """
        if isinstance(arg, str):
            return cls.KEY
        if isinstance(arg, re.Pattern):
            return cls.PATTERN
        if isinstance(arg, (list, tuple)):
            return cls.GROUP
        if isinstance(arg, Mapping):
            return cls.MAPPING
        if isinstance(arg, type):
            return cls.OBJECT
        if callable(arg):
            return cls.FILTER
        if arg is None or isinstance(arg, (bool, int, float, complex, bytes, bytearray)):
            return cls.SCALAR
        return cls.OBJECT
