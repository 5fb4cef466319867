"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from extendthis import Extender, ExtendSettings
from extendthis.core import ErrorReporter, SelectorRegistry, make_negation_selector, override_selector


@pytest.fixture
def settings():
    """Default settings, independent of the environment."""
    return ExtendSettings(
        throw_property_not_found_error=True,
        throw_override_error=True,
        error_prefix="extendthis",
    )


@pytest.fixture
def extender(settings):
    """Fresh Extender with the built-in selectors and methods."""
    return Extender(settings)


@pytest.fixture
def extend(extender):
    return extender.extend


@pytest.fixture
def reporter(settings):
    return ErrorReporter(settings)


@pytest.fixture
def selectors(reporter):
    """Selector registry holding the built-in selectors."""
    registry = SelectorRegistry()
    registry.register("!", make_negation_selector(reporter))
    registry.register("#", override_selector)
    return registry
