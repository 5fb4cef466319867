"""Composition errors and the reporter that raises them.

Usage:
    reporter = ErrorReporter(ExtendSettings())
    reporter.illegal_argument(arg, "No source object found.")  # always raises

    # Gated by settings; returns False when the error is switched off
    if not reporter.property_not_found(key, source):
        ...  # skip the property
"""

from __future__ import annotations

import logging
from typing import Any, NoReturn

from extendthis.config import ExtendSettings
from extendthis.core.serialize import stringify

logger = logging.getLogger(__name__)


class ExtendError(Exception):
    """Base class for errors raised while composing objects."""

    title = "Extend error"

    def __init__(self, message: str, reason: str) -> None:
        super().__init__(message)
        self.reason = reason


class IllegalArgumentError(ExtendError, TypeError):
    """Raised when a composition method is called with a malformed argument list."""

    title = "Illegal argument"


class PropertyNotFoundError(ExtendError, LookupError):
    """Raised when a selected source property does not exist."""

    title = "Property not found"


class PropertyOverrideError(ExtendError):
    """Raised when a property was written over an existing target property."""

    title = "Property already exists"


class ErrorReporter:
    """Formats and raises composition errors according to the current settings.

    Settings are read when an error is reported, not when the reporter is built,
    so flags changed on the settings object apply to the next operation.
    """

    def __init__(self, settings: ExtendSettings) -> None:
        self.settings = settings

    def illegal_argument(self, arg: Any, message: str) -> NoReturn:
        """Raise IllegalArgumentError for arg. Not configurable.

        Raises:
            IllegalArgumentError: Always.
        """
        self._raise(IllegalArgumentError, f"{stringify(arg)}: {message}")

    def property_not_found(self, key: str, obj: Any) -> bool:
        """Report that key is missing from obj.

        Returns:
            False when the error is disabled and the caller should skip the property.

        Raises:
            PropertyNotFoundError: If throw_property_not_found_error is set.
        """
        if self.settings.throw_property_not_found_error:
            self._raise(PropertyNotFoundError, f"{key} in {stringify(obj)}")
        logger.debug("Property %r not found, skipping", key)
        return False

    def property_override(self, key: str, obj: Any) -> bool:
        """Report that key already existed on obj before it was written.

        Returns:
            False when the error is disabled.

        Raises:
            PropertyOverrideError: If throw_override_error is set.
        """
        if self.settings.throw_override_error:
            self._raise(PropertyOverrideError, f"{key} in {stringify(obj)}")
        logger.debug("Property %r overwritten on target", key)
        return False

    def _raise(self, error_cls: type[ExtendError], reason: str) -> NoReturn:
        raise error_cls(f"{self.settings.error_prefix}: {error_cls.title}: {reason}", reason)
