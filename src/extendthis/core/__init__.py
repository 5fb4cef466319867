"""Core functionalities: selection, filtering and application of properties.

Architecture Note:
    core/ holds the composition pipeline: argument parsing, selectors, filters,
    method handlers and the executor writing to the target. Registries are
    plain objects; the process-wide instances live in extender/.
"""

from extendthis.core.arguments import parse_method_args
from extendthis.core.errors import (
    ErrorReporter,
    ExtendError,
    IllegalArgumentError,
    PropertyNotFoundError,
    PropertyOverrideError,
)
from extendthis.core.filters import Delegate, bind_to, delegate_filter, exclude_name_filter
from extendthis.core.methods import (
    CallScope,
    MethodRegistry,
    delegate_method,
    make_call_method,
    mixin_method,
)
from extendthis.core.models import (
    UNSET,
    ArgumentKind,
    Filter,
    FilterContext,
    MethodHandler,
    MethodParams,
    ParseArgs,
    Selector,
    SelectorContext,
)
from extendthis.core.pipeline import modify_target, run_filters
from extendthis.core.selectors import (
    SelectorRegistry,
    make_negation_selector,
    override_selector,
    select_all,
)
from extendthis.core.serialize import stringify

__all__ = [
    # Models
    "UNSET",
    "ArgumentKind",
    "Filter",
    "FilterContext",
    "MethodHandler",
    "MethodParams",
    "ParseArgs",
    "Selector",
    "SelectorContext",
    # Errors
    "ErrorReporter",
    "ExtendError",
    "IllegalArgumentError",
    "PropertyNotFoundError",
    "PropertyOverrideError",
    "stringify",
    # Selectors
    "SelectorRegistry",
    "make_negation_selector",
    "override_selector",
    "select_all",
    # Arguments and pipeline
    "parse_method_args",
    "modify_target",
    "run_filters",
    # Filters
    "Delegate",
    "bind_to",
    "delegate_filter",
    "exclude_name_filter",
    # Methods
    "CallScope",
    "MethodRegistry",
    "delegate_method",
    "make_call_method",
    "mixin_method",
]
