"""Shared fixtures."""

import pytest

from errorkit.foundation.config import clear_settings_cache


@pytest.fixture(autouse=True)
def fresh_settings():
    """Each test sees settings built from its own environment."""
    clear_settings_cache()
    yield
    clear_settings_cache()
