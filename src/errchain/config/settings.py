"""Environment-based configuration using pydantic-settings.

Example:
    >>> from errchain.config import get_settings
    >>> settings = get_settings()
    >>> settings.stack.include_all_threads
    False

    # Or with environment variables:
    # ERRCHAIN_STACK_INCLUDE_ALL_THREADS=true
    # ERRCHAIN_RENDER_SORT_KEYS=false
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class StackSettings(BaseSettings):
    """Stack capture configuration."""

    model_config = SettingsConfigDict(
        env_prefix="ERRCHAIN_STACK_",
        extra="ignore",
    )

    include_all_threads: bool = Field(
        default=False,
        description="Append every other live thread's stack to the captured context",
    )


class RenderSettings(BaseSettings):
    """Diagnostic report rendering."""

    model_config = SettingsConfigDict(
        env_prefix="ERRCHAIN_RENDER_",
        extra="ignore",
    )

    sort_keys: bool = Field(default=True, description="Sort state keys in the JSON state line")


class ErrchainSettings(BaseSettings):
    """Root settings.

    Loads configuration from environment variables with ERRCHAIN_ prefix.
    Supports nested configuration and .env files.
    """

    model_config = SettingsConfigDict(
        env_prefix="ERRCHAIN_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    stack: StackSettings = Field(default_factory=StackSettings)
    render: RenderSettings = Field(default_factory=RenderSettings)


@lru_cache(maxsize=1)
def get_settings() -> ErrchainSettings:
    """Get the global settings instance (cached)."""
    return ErrchainSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing).

    After calling this, the next get_settings() call will
    reload configuration from environment.
    """
    get_settings.cache_clear()
