"""Command registry protocol (port) for command dispatch.

This module defines the CommandRegistryProtocol interface that command
registry implementations must satisfy, plus the handler type aliases shared
by the decoration and injection helpers.

Architecture:
    - Protocol (structural typing, NOT ABC inheritance)
    - Commands are frozen dataclasses; their class is their identity
    - Two independent stores: synchronous and asynchronous handlers
    - Container (courier/core/container) provides the factory function

Implementations:
    - InMemoryCommandRegistry: courier/infrastructure/registry/in_memory_command_registry.py

Usage:
    >>> @dataclass(frozen=True, kw_only=True)
    ... class AddNumbers:
    ...     a: int
    ...     b: int
    >>>
    >>> def handle_add_numbers(command: AddNumbers, adder: Adder, printer: Printer) -> None:
    ...     printer(adder(command.a, command.b))
    >>>
    >>> registry.register_sync(
    ...     AddNumbers, handle_add_numbers, dependencies=(Adder, Printer)
    ... )
    >>> registry.dispatch(AddNumbers(a=3, b=5))  # printer receives 8
"""

from collections.abc import Awaitable, Callable, Sequence
from typing import Protocol, TypeVar

C = TypeVar("C")

# Type alias for synchronous command handlers
CommandHandler = Callable[[C], None]
"""Synchronous handler: accepts one command instance, returns nothing.

Example:
    >>> def handle_do_something(command: DoSomething) -> None:
    ...     print(f"Hello {command.name}")
"""

# Type alias for asynchronous command handlers
AsyncCommandHandler = Callable[[C], Awaitable[None]]
"""Asynchronous handler: accepts one command instance, returns an awaitable.

Example:
    >>> async def handle_add_numbers(command: AddNumbers) -> None:
    ...     await asyncio.to_thread(print, command.a + command.b)
"""


class CommandRegistryProtocol(Protocol):
    """Protocol for command registry implementations.

    Routes a command instance to exactly one handler keyed by the command's
    class. The sync and async stores are independent: a command type may be
    registered in either, both, or neither.

    Key Requirements:
        1. **Exact type routing**: no subclass or wildcard matching.
        2. **Thin router**: handler and decorator errors propagate unchanged.
        3. **Eager binding**: dependencies are resolved at registration time.
        4. **One policy**: duplicate and missing-handler behavior is the same
           for both stores.
    """

    def register_sync(
        self,
        command_type: type[C],
        handler: Callable[..., None],
        *,
        dependencies: Sequence[type] = (),
    ) -> None:
        """Register a synchronous handler for command_type.

        Args:
            command_type: Command class the handler serves.
            handler: Single-argument handler, or a handler taking the command
                followed by one collaborator per entry in dependencies.
            dependencies: Collaborator identities to resolve now and bind
                after the command argument.

        Raises:
            InvalidIdentityError: If command_type is not a class.
            DuplicateRegistrationError: If already registered (reject policy).
            UnresolvedDependencyError: If a dependency cannot be resolved.
            TypeError: If handler cannot accept the bound collaborators.
        """
        ...

    def register_async(
        self,
        command_type: type[C],
        handler: Callable[..., Awaitable[None]],
        *,
        dependencies: Sequence[type] = (),
    ) -> None:
        """Register an asynchronous handler for command_type.

        Args:
            command_type: Command class the handler serves.
            handler: Coroutine function (or any callable returning an
                awaitable) taking the command, then bound collaborators.
            dependencies: Collaborator identities to resolve now.

        Raises:
            InvalidIdentityError: If command_type is not a class.
            DuplicateRegistrationError: If already registered (reject policy).
            UnresolvedDependencyError: If a dependency cannot be resolved.
            TypeError: If handler cannot accept the bound collaborators.
        """
        ...

    def dispatch(self, command: object) -> None:
        """Run the synchronous handler for type(command) to completion.

        Args:
            command: Command instance.

        Raises:
            NoHandlerRegisteredError: Strict mode only, when no handler exists.
            Exception: Whatever the handler or its decorators raise.
        """
        ...

    async def dispatch_async(self, command: object) -> None:
        """Await the asynchronous handler for type(command).

        Args:
            command: Command instance.

        Raises:
            NoHandlerRegisteredError: Strict mode only, when no handler exists.
            Exception: Whatever the handler's awaitable raises.
        """
        ...

    def has_handler(self, command_type: type) -> bool:
        """Check whether a synchronous handler is registered for command_type."""
        ...

    def has_async_handler(self, command_type: type) -> bool:
        """Check whether an asynchronous handler is registered for command_type."""
        ...
