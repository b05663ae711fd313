"""Root conftest: shared test configuration."""

import os

import pytest

# Keep the developer's .env from leaking into test settings
os.environ.setdefault("DEBUGVAULT_LOG_FORMAT", "text")
os.environ.setdefault("DEBUGVAULT_SEARCH_DEBOUNCE_MS", "300")

from debugvault.config import get_settings  # noqa: E402


@pytest.fixture(autouse=True)
def _fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
