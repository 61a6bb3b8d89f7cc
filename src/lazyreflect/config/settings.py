"""Configuration settings using Pydantic Settings.

Usage:
    from lazyreflect.config import ReflectionSettings, configure, get_settings

    # Load from environment variables (LAZYREFLECT_*)
    settings = get_settings()

    # Or override with explicit values
    configure(allow_none=True)
"""

from __future__ import annotations

from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ReflectionSettings(BaseSettings):  # type: ignore[misc]
    """Process-wide defaults for cells, lookups and coercion.

    Attributes:
        thread_safe: Guard first evaluation of new cells with a lock.
        allow_none: Let None coerce to any requested type, not only optional ones.
        search_bases: Search base classes during member lookup unless
            BindingFlags.DECLARED_ONLY is passed.

    Environment Variables:
        LAZYREFLECT_THREAD_SAFE
        LAZYREFLECT_ALLOW_NONE
        LAZYREFLECT_SEARCH_BASES
    """

    model_config = SettingsConfigDict(
        env_prefix="LAZYREFLECT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    thread_safe: bool = Field(default=True, description="Lock first evaluation of cells")
    allow_none: bool = Field(default=False, description="None coerces to any type")
    search_bases: bool = Field(default=True, description="Walk the MRO during lookup")


_settings: ReflectionSettings | None = None


def get_settings() -> ReflectionSettings:
    """Access the process settings, loading them from the environment on first use.

    Returns:
        The active ReflectionSettings instance.
    """
    global _settings
    if _settings is None:
        _settings = ReflectionSettings()
    return _settings


def configure(settings: ReflectionSettings | None = None, **overrides: Any) -> ReflectionSettings:
    """Replace the process settings.

    Args:
        settings: Complete settings object to install. Loaded from the
            environment when omitted.
        **overrides: Individual fields to override on top of `settings`.

    Returns:
        The newly installed settings.
    """
    global _settings
    base = settings if settings is not None else ReflectionSettings()
    if overrides:
        # Overrides are validated like env values
        base = ReflectionSettings(**{**base.model_dump(), **overrides})
    _settings = base
    return _settings


def reset_settings() -> None:
    """Drop the installed settings so the next access reloads the environment."""
    global _settings
    _settings = None
