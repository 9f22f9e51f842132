"""Tests for environment-based settings."""

import pytest

from errchain.config import clear_settings_cache, get_settings


def test_defaults() -> None:
    settings = get_settings()
    assert settings.stack.include_all_threads is False
    assert settings.render.sort_keys is True


def test_cached() -> None:
    assert get_settings() is get_settings()


def test_env_override(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ERRCHAIN_STACK_INCLUDE_ALL_THREADS", "1")
    monkeypatch.setenv("ERRCHAIN_RENDER_SORT_KEYS", "false")
    clear_settings_cache()
    settings = get_settings()
    assert settings.stack.include_all_threads is True
    assert settings.render.sort_keys is False
