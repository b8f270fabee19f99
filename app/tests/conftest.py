"""Shared fixtures for adminkit tests."""

import pytest
import structlog

from adminkit.context import UserContextHolder
from adminkit.services.providers import (
    get_message_resolver,
    get_settings,
    get_translation_service,
)


@pytest.fixture(autouse=True)
def reset_global_state():
    """Clear provider caches, log context and user context after each test."""
    yield
    get_settings.cache_clear()
    get_message_resolver.cache_clear()
    get_translation_service.cache_clear()
    structlog.contextvars.clear_contextvars()
    UserContextHolder.clear()
