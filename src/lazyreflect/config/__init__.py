"""Configuration module using Pydantic Settings.

Usage:
    from lazyreflect.config import configure, get_settings

    configure(allow_none=True)
    assert get_settings().allow_none
"""

from lazyreflect.config.settings import (
    ReflectionSettings,
    configure,
    get_settings,
    reset_settings,
)

__all__ = [
    "ReflectionSettings",
    "configure",
    "get_settings",
    "reset_settings",
]
