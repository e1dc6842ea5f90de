"""Pytest configuration shared by unit and integration tests.

This configuration ensures:
1. Custom markers are registered
2. Async tests are marked for pytest-asyncio even if the marker is forgotten
3. Container singletons are cleared between tests
"""

import inspect
from unittest.mock import MagicMock

import pytest

from courier.core.config import get_settings
from courier.core.container import (
    get_command_registry,
    get_dependency_registry,
    get_logger,
)
from courier.infrastructure.registry import (
    InMemoryCommandRegistry,
    InMemoryDependencyRegistry,
)

# Configure pytest-asyncio
pytest_plugins = ("pytest_asyncio",)


@pytest.fixture
def mock_logger():
    """Logger double satisfying LoggerProtocol."""
    logger = MagicMock()
    logger.bind.return_value = logger
    return logger


@pytest.fixture
def dependency_registry(mock_logger):
    """Fresh dependency registry per test."""
    return InMemoryDependencyRegistry(logger=mock_logger)


@pytest.fixture
def command_registry(mock_logger, dependency_registry):
    """Fresh command registry wired to the per-test dependency registry."""
    return InMemoryCommandRegistry(logger=mock_logger, resolver=dependency_registry)


@pytest.fixture(autouse=True)
def clear_container_caches():
    """Reset lru_cache singletons so tests never share registries."""
    yield
    get_command_registry.cache_clear()
    get_dependency_registry.cache_clear()
    get_logger.cache_clear()
    get_settings.cache_clear()


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: Integration tests with real adapters wired together"
    )
    config.addinivalue_line("markers", "asyncio: Async test that requires event loop")


# Test execution configuration
def pytest_collection_modifyitems(config, items):
    """Automatically add asyncio marker to async test functions.

    This ensures all async tests are properly marked even if
    the developer forgets to add @pytest.mark.asyncio.
    """
    for item in items:
        function = getattr(item, "function", None)
        if function is not None and inspect.iscoroutinefunction(function):
            item.add_marker(pytest.mark.asyncio)
