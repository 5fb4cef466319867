"""extend-this: compose objects from the properties of other objects.

Usage:
    from extendthis import extend

    class Pet:
        def __init__(self, name):
            self._name = name

        def name(self):
            return self._name

    class Dog:
        def __init__(self):
            extend(self).with_call(Pet, "ralph")

    # Copy Pet's methods onto Dog under a new name
    extend(Dog).with_(Pet, {"name": "dog_name"})

    # Delegate public members to a helper; functions keep the helper as receiver
    extend(robot).with_delegate(Engine(), "start", "stop")
"""

__version__ = "0.1.0"

from extendthis.config import ExtendSettings
from extendthis.core import (
    ArgumentKind,
    Delegate,
    ExtendError,
    FilterContext,
    IllegalArgumentError,
    MethodParams,
    MethodRegistry,
    PropertyNotFoundError,
    PropertyOverrideError,
    SelectorContext,
    SelectorRegistry,
    exclude_name_filter,
)
from extendthis.extender import (
    Extender,
    MethodTable,
    extend,
    get_config,
    get_extender,
    register_method,
    register_selector,
    set_extender,
    set_wrapped_extend,
)

__all__ = [
    # Version
    "__version__",
    # Entry point
    "extend",
    "register_selector",
    "register_method",
    "set_wrapped_extend",
    "get_config",
    "get_extender",
    "set_extender",
    "Extender",
    "MethodTable",
    # Models
    "ArgumentKind",
    "FilterContext",
    "SelectorContext",
    "MethodParams",
    "SelectorRegistry",
    "MethodRegistry",
    "Delegate",
    "exclude_name_filter",
    # Config
    "ExtendSettings",
    # Errors
    "ExtendError",
    "IllegalArgumentError",
    "PropertyNotFoundError",
    "PropertyOverrideError",
]
