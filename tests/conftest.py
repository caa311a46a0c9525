"""Root test fixtures shared across all test types.

This conftest contains fixtures that can be used by both unit and integration tests.
Database-specific fixtures are in tests/integration/conftest.py.
"""

import os

# Point settings at an in-memory SQLite store before any app imports
os.environ.setdefault("APP_ENV", "testing")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("DATABASE_SSL_MODE", "disable")

# ruff: noqa: E402 - Imports must be after env var setup
import pytest

from src.codepad.core.config import Settings, get_settings

# Clear settings cache to ensure test environment variables are picked up
get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    """Settings for an app under test (small archive chunks to exercise streaming)."""
    return Settings(
        database_url="sqlite+aiosqlite:///:memory:",
        app_env="testing",
        database_timeout_seconds=5.0,
        archive_chunk_size=1024,
    )
