"""Domain protocols (ports) package.

This package contains protocol definitions that adapters implement without
inheritance, plus the handler type aliases.

Usage:
    from courier.domain.protocols import CommandRegistryProtocol, LoggerProtocol
"""

from courier.domain.protocols.command_registry_protocol import (
    AsyncCommandHandler,
    CommandHandler,
    CommandRegistryProtocol,
)
from courier.domain.protocols.dependency_registry_protocol import (
    DependencyRegistryProtocol,
    DependencyResolverProtocol,
)
from courier.domain.protocols.logger_protocol import LoggerProtocol

__all__ = [
    # Handler aliases
    "CommandHandler",
    "AsyncCommandHandler",
    # Registry protocols
    "CommandRegistryProtocol",
    "DependencyRegistryProtocol",
    "DependencyResolverProtocol",
    # Logging
    "LoggerProtocol",
]
