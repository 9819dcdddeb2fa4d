"""Pytest configuration.

This configuration ensures:
1. Tests run with ENVIRONMENT=testing unless a test overrides it
2. Cached singletons (settings, logger) never leak between tests
3. Global structlog configuration is reset after each test
"""

import pytest
import structlog

from railway_result.core.config import get_settings
from railway_result.core.container import get_logger, get_user_repository


@pytest.fixture(autouse=True)
def testing_environment(monkeypatch):
    """Default every test to the testing environment."""
    monkeypatch.setenv("ENVIRONMENT", "testing")


@pytest.fixture(autouse=True)
def reset_singletons():
    """Clear lru_cache singletons and structlog state around each test."""
    get_settings.cache_clear()
    get_logger.cache_clear()
    get_user_repository.cache_clear()
    yield
    get_settings.cache_clear()
    get_logger.cache_clear()
    get_user_repository.cache_clear()
    structlog.reset_defaults()
