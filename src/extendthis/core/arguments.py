"""Parsing of composition method arguments.

Usage:
    params = parse_method_args([source, "!secret", {"name": "title"}], selectors, reporter)

The first argument is the source object, or a property name followed by its
value. The remaining arguments are, by kind:

    str       select the named property (or run the selector its prefix names)
    Pattern   select every property whose name matches
    Mapping   select properties by key and rename them to the values
    list      unpack in place and keep parsing
    callable  append a filter to the pipeline
"""

from __future__ import annotations

from collections import deque
from typing import Any

from extendthis.core.errors import ErrorReporter
from extendthis.core.models import ArgumentKind, MethodParams
from extendthis.core.properties import enumerable_keys
from extendthis.core.selectors import SelectorRegistry, select_all


def parse_method_args(
    args: list[Any],
    selectors: SelectorRegistry,
    reporter: ErrorReporter,
) -> MethodParams:
    """Split method arguments into a source, a selection and filters.

    Args:
        args: Positional arguments of the method call.
        selectors: Registry used to resolve prefixed keys.
        reporter: Raises argument errors.

    Returns:
        Parsed parameters. With no selection arguments (names, patterns or
        rename maps) every source property is selected. Once one is given the
        selection is used as built, even when it ends up empty.

    Raises:
        IllegalArgumentError: If no source can be found or an argument is malformed.
    """
    queue: deque[Any] = deque(args)

    params = MethodParams(source=_take_source(queue, reporter))
    selected = False

    while queue:
        arg = queue.popleft()

        match ArgumentKind.of(arg):
            case ArgumentKind.KEY:
                selected = True
                if not selectors.execute(
                    params.source, arg, None, params.source_keys, params.override_keys
                ):
                    params.source_keys[arg] = arg

            case ArgumentKind.PATTERN:
                selected = True
                for key in enumerable_keys(params.source):
                    if arg.search(key):
                        params.source_keys[key] = key

            case ArgumentKind.GROUP:
                queue.extendleft(reversed(arg))

            case ArgumentKind.MAPPING:
                selected = True
                _select_renamed(params, arg, selectors, reporter)

            case ArgumentKind.FILTER:
                params.filters.append(arg)

            case ArgumentKind.OBJECT | ArgumentKind.SCALAR:
                reporter.illegal_argument(arg, "Unsupported argument.")

    if not selected:
        select_all(params.source_keys, params.source)

    return params


def _take_source(queue: deque[Any], reporter: ErrorReporter) -> Any:
    first = queue.popleft() if queue else None

    match ArgumentKind.of(first):
        case ArgumentKind.KEY:
            if len(queue) != 1:
                reporter.illegal_argument(first, "Requires a single property value")
            return {first: queue.popleft()}

        case ArgumentKind.MAPPING | ArgumentKind.OBJECT:
            return first

        case _:
            reporter.illegal_argument(first, "No source object found.")


def _select_renamed(
    params: MethodParams,
    renames: Any,
    selectors: SelectorRegistry,
    reporter: ErrorReporter,
) -> None:
    for source_key, target_key in renames.items():
        if not isinstance(target_key, str):
            reporter.illegal_argument(target_key, "Target property name is not a string.")
        if not isinstance(source_key, str):
            reporter.illegal_argument(source_key, "Source property name is not a string.")

        if not selectors.execute(
            params.source, source_key, target_key, params.source_keys, params.override_keys
        ):
            params.source_keys[source_key] = target_key
