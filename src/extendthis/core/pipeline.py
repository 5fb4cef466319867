"""Filter pipeline executor.

Applies parsed method parameters to a target: every selected property is read
from the source, passed through the filters in order and written to the target.
"""

from __future__ import annotations

import logging
from typing import Any

from extendthis.core.errors import ErrorReporter
from extendthis.core.models import FilterContext, MethodParams
from extendthis.core.properties import (
    bind_class_attribute,
    get_property,
    has_property,
    set_property,
)

logger = logging.getLogger(__name__)


def run_filters(ctx: FilterContext, params: MethodParams) -> bool:
    """Pass ctx through the filter pipeline.

    Returns:
        False as soon as a filter returns a falsy value or clears target_key.
        A selection that maps to no target key is rejected before any filter.
    """
    if ctx.target_key is None:
        return False
    for filter_fn in params.filters:
        if not filter_fn(ctx) or ctx.target_key is None:
            return False
    return True


def modify_target(target: Any, params: MethodParams, reporter: ErrorReporter) -> None:
    """Copy the selected source properties onto target.

    The write happens before the override error is reported, so a colliding
    property is overwritten even when the error is raised. Functions and
    method descriptors copied from a class onto a non-class target are bound
    to the target after the filters have run.

    Args:
        target: Object being modified.
        params: Parsed method parameters.
        reporter: Reports missing and overwritten properties.

    Raises:
        PropertyNotFoundError: If a selected property is missing from the source.
        PropertyOverrideError: If a property overwrote an existing target property.
    """
    source = params.source
    # Raw class attributes only work as is on another class
    bind_to_target = isinstance(source, type) and not isinstance(target, type)

    for source_key, target_key in params.source_keys.items():
        if not has_property(source, source_key):
            reporter.property_not_found(source_key, source)
            continue

        ctx = FilterContext(
            target=target,
            source=source,
            source_key=source_key,
            source_value=get_property(source, source_key),
            target_key=target_key,
        )

        if not run_filters(ctx, params):
            logger.debug("Property %r dropped by filter", source_key)
            continue

        value = ctx.source_value
        if bind_to_target:
            value = bind_class_attribute(value, target)

        overwritten = has_property(target, ctx.target_key)

        set_property(target, ctx.target_key, value)

        if overwritten and source_key not in params.override_keys:
            reporter.property_override(ctx.target_key, target)
