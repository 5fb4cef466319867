"""Configuration settings using Pydantic Settings.

Provides typed configuration with environment variable support for the error reporter.

Usage:
    from extendthis.config import ExtendSettings

    # Load from environment variables (EXTENDTHIS_*)
    settings = ExtendSettings()

    # Or override with explicit values
    settings = ExtendSettings(throw_property_not_found_error=False)

    # Flags may be flipped in place; the reporter reads them at raise time
    settings.throw_override_error = False
"""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class ExtendSettings(BaseSettings):  # type: ignore[misc]
    """Global configuration for composition error reporting.

    Attributes:
        throw_property_not_found_error: Raise when a selected source property
            does not exist. When disabled the property is skipped.
        throw_override_error: Raise when a property is written over an existing
            target property that was not marked with the override selector.
            The write happens either way.
        error_prefix: Text every error message starts with.

    Environment Variables:
        EXTENDTHIS_THROW_PROPERTY_NOT_FOUND_ERROR
        EXTENDTHIS_THROW_OVERRIDE_ERROR
        EXTENDTHIS_ERROR_PREFIX
    """

    model_config = SettingsConfigDict(
        env_prefix="EXTENDTHIS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        validate_assignment=True,
    )

    throw_property_not_found_error: bool = True
    throw_override_error: bool = True
    error_prefix: str = "extendthis"
