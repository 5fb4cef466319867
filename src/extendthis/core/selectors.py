"""String selector registry and built-in selectors.

A selector owns a string prefix. When a key argument starts with a registered
prefix, the rest of the key is handed to the selector, which edits the
selection being built for the current method call.

Usage:
    registry = SelectorRegistry()
    registry.register("!", negation_selector)

    # Rename a selector: register under the new prefix, clear the old one
    registry.register("~", registry.register("!"))
    registry.register("!", None)
"""

from __future__ import annotations

import logging
from typing import Any

from extendthis.core.errors import ErrorReporter
from extendthis.core.models import UNSET, Selector, SelectorContext
from extendthis.core.properties import enumerable_keys

logger = logging.getLogger(__name__)


class SelectorRegistry:
    """Registry mapping prefixes to selectors.

    Prefixes are tried in registration order and the first one a key starts
    with wins.
    """

    def __init__(self) -> None:
        """Initialize empty selector registry."""
        self._selectors: dict[str, Selector] = {}

    def register(self, prefix: str, selector: Selector | None = UNSET) -> Selector | None:
        """Get, set or remove the selector for prefix.

        Args:
            prefix: Non-empty prefix string.
            selector: Selector to install, None to remove it, omitted to look it up.

        Returns:
            The selector now registered for prefix, or None.

        Raises:
            ValueError: If prefix is empty.
        """
        if not prefix:
            raise ValueError("Selector prefix must be a non-empty string")
        if selector is None:
            if self._selectors.pop(prefix, None) is not None:
                logger.debug("Removed selector for prefix %r", prefix)
        elif selector is not UNSET:
            self._selectors[prefix] = selector
            logger.debug("Registered selector for prefix %r", prefix)
        return self._selectors.get(prefix)

    def prefixes(self) -> list[str]:
        """Registered prefixes in matching order."""
        return list(self._selectors)

    def match(self, key: str) -> tuple[str, Selector] | None:
        """Find the first selector whose prefix key starts with.

        Returns:
            (prefix, selector) if found, None otherwise.
        """
        for prefix, selector in self._selectors.items():
            if key.startswith(prefix):
                return prefix, selector
        return None

    def execute(
        self,
        source: Any,
        key: str,
        target_key: str | None,
        source_keys: dict[str, str | None],
        override_keys: set[str],
    ) -> bool:
        """Run the selector matching key, if any.

        Args:
            source: The source object.
            key: Key argument, including its prefix.
            target_key: Target name from a rename map, None to keep the key.
            source_keys: Selection being built.
            override_keys: Override exemptions being built.

        Returns:
            True if a selector handled key, False if key is a plain property name.
        """
        found = self.match(key)
        if found is None:
            return False

        prefix, selector = found
        source_key = key[len(prefix) :]
        selector(
            SelectorContext(
                source=source,
                source_key=source_key,
                target_key=target_key if target_key else source_key,
                source_keys=source_keys,
                override_keys=override_keys,
            )
        )
        return True


def select_all(source_keys: dict[str, str | None], source: Any) -> None:
    """Add every enumerable property of source as an identity mapping."""
    for key in enumerable_keys(source):
        source_keys[key] = key


def make_negation_selector(reporter: ErrorReporter) -> Selector:
    """Build the negation selector reporting through reporter.

    Selects everything when nothing is selected yet, then drops the key. So
    ``"!x"`` first means "all but x", while after other selections it only
    removes x from them.
    """

    def negation_selector(ctx: SelectorContext) -> None:
        if not ctx.source_keys:
            select_all(ctx.source_keys, ctx.source)

        if ctx.source_key in ctx.source_keys:
            del ctx.source_keys[ctx.source_key]
        else:
            reporter.property_not_found(ctx.source_key, ctx.source)

    return negation_selector


def override_selector(ctx: SelectorContext) -> None:
    """Select the key and exempt it from the override error."""
    ctx.override_keys.add(ctx.source_key)
    ctx.source_keys[ctx.source_key] = ctx.target_key
