"""Infrastructure registry implementations.

Registries:
    - InMemoryCommandRegistry: Sync/async command routing by command type
    - InMemoryDependencyRegistry: Collaborator store keyed by collaborator type

Usage:
    >>> from courier.infrastructure.registry import (
    ...     InMemoryCommandRegistry,
    ...     InMemoryDependencyRegistry,
    ... )
    >>>
    >>> dependencies = InMemoryDependencyRegistry(logger=logger)
    >>> dependencies.register(Adder, add)
    >>> dependencies.register(Printer, print)
    >>>
    >>> commands = InMemoryCommandRegistry(logger=logger, resolver=dependencies)
    >>> commands.register_sync(AddNumbers, handle_add_numbers, dependencies=(Adder, Printer))
"""

from courier.infrastructure.registry.in_memory_command_registry import (
    InMemoryCommandRegistry,
)
from courier.infrastructure.registry.in_memory_dependency_registry import (
    InMemoryDependencyRegistry,
)

__all__ = [
    "InMemoryCommandRegistry",
    "InMemoryDependencyRegistry",
]
