"""Configuration module using Pydantic Settings.

Provides the process-wide switches that decide which composition errors are raised.

Usage:
    from extendthis.config import ExtendSettings

    settings = ExtendSettings(throw_override_error=False)
"""

from extendthis.config.settings import ExtendSettings

__all__ = [
    "ExtendSettings",
]
