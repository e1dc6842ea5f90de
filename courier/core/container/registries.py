"""Registry dependency factories.

Application-scoped singletons for the dependency registry and the command
registry. The command registry is wired to the dependency registry (as its
resolver) and to the registry policies from Settings.

These factories are the default composition root. The registry classes stay
plain constructors, so tests and embedding applications can build as many
independent registries as they need.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from courier.core.config import settings
from courier.core.container.infrastructure import get_logger

if TYPE_CHECKING:
    from courier.domain.protocols.command_registry_protocol import (
        CommandRegistryProtocol,
    )
    from courier.domain.protocols.dependency_registry_protocol import (
        DependencyRegistryProtocol,
    )


@lru_cache()
def get_dependency_registry() -> "DependencyRegistryProtocol":
    """Get dependency registry singleton (app-scoped).

    Returns:
        Dependency registry implementing DependencyRegistryProtocol.

    Usage:
        dependencies = get_dependency_registry()
        dependencies.register(Adder, add)
    """
    from courier.infrastructure.registry.in_memory_dependency_registry import (
        InMemoryDependencyRegistry,
    )

    return InMemoryDependencyRegistry(
        logger=get_logger().bind(component="dependency_registry"),
        thread_safe=settings.registry_thread_safe,
    )


@lru_cache()
def get_command_registry() -> "CommandRegistryProtocol":
    """Get command registry singleton (app-scoped).

    Policies come from Settings:
        - REGISTRY_DUPLICATE_POLICY: reject (default) or replace
        - DISPATCH_STRICT_MODE: raise on missing handler (default: no-op)
        - REGISTRY_THREAD_SAFE: per-store locks (default: off)

    Returns:
        Command registry implementing CommandRegistryProtocol.

    Usage:
        commands = get_command_registry()
        commands.register_sync(AddNumbers, handle_add_numbers, dependencies=(Adder, Printer))
        commands.dispatch(AddNumbers(a=3, b=5))
    """
    from courier.infrastructure.registry.in_memory_command_registry import (
        InMemoryCommandRegistry,
    )

    return InMemoryCommandRegistry(
        logger=get_logger().bind(component="command_registry"),
        resolver=get_dependency_registry(),
        duplicate_policy=settings.registry_duplicate_policy,
        strict=settings.dispatch_strict_mode,
        thread_safe=settings.registry_thread_safe,
    )
