"""Shared fixtures."""

from collections.abc import Iterator

import pytest

from errchain.config import clear_settings_cache


@pytest.fixture(autouse=True)
def fresh_settings() -> Iterator[None]:
    """Reload settings from the environment for every test."""
    clear_settings_cache()
    yield
    clear_settings_cache()
