"""Container module - Centralized dependency injection.

This module re-exports all factory functions from submodules:

    from courier.core.container import get_command_registry, get_logger

The container is organized into modules by concern:
- infrastructure: Logging
- registries: Dependency registry and command registry
"""

from courier.core.container.infrastructure import get_logger
from courier.core.container.registries import (
    get_command_registry,
    get_dependency_registry,
)

__all__ = [
    "get_logger",
    "get_dependency_registry",
    "get_command_registry",
]
