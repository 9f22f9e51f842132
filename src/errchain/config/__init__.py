"""Configuration management using pydantic-settings.

Provides environment-based configuration with type safety and validation.
"""

from .settings import (
    ErrchainSettings,
    RenderSettings,
    StackSettings,
    clear_settings_cache,
    get_settings,
)

__all__ = [
    "ErrchainSettings",
    "RenderSettings",
    "StackSettings",
    "clear_settings_cache",
    "get_settings",
]
