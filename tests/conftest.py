"""Pytest configuration and fixtures."""
from __future__ import annotations

from typing import Generator

import pytest

from ex_result.shared.config import Settings, get_settings


@pytest.fixture
def test_settings() -> Settings:
    """Test settings with verbose logging."""
    return Settings(
        log_level="DEBUG",
        log_format="console",
    )


@pytest.fixture
def clean_settings_cache() -> Generator[None, None, None]:
    """Clear the cached settings around a test that changes the environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
