"""In-memory command registry implementation.

This module implements the CommandRegistryProtocol using two in-memory
dictionaries: one for synchronous handlers, one for asynchronous handlers,
both keyed by command class.

Architecture:
    - Implements CommandRegistryProtocol (hexagonal adapter pattern)
    - Dictionary-based handler registry (command type -> single handler)
    - Thin router: handler errors are logged and re-raised unchanged
    - Eager dependency binding through an injected resolver
    - Configurable duplicate policy and missing-handler strictness

Usage:
    >>> # Container creates singleton instance
    >>> @lru_cache()
    >>> def get_command_registry() -> CommandRegistryProtocol:
    ...     return InMemoryCommandRegistry(
    ...         logger=get_logger(), resolver=get_dependency_registry()
    ...     )
    >>>
    >>> registry = get_command_registry()
    >>> registry.register_sync(AddNumbers, handle_add_numbers, dependencies=(Adder, Printer))
    >>> registry.dispatch(AddNumbers(a=3, b=5))
    >>>
    >>> registry.register_async(AddNumbers, handle_add_numbers_async, dependencies=(Adder, Printer))
    >>> await registry.dispatch_async(AddNumbers(a=8, b=4))
"""

import threading
from collections.abc import Awaitable, Callable, Sequence
from contextlib import AbstractContextManager, nullcontext
from typing import Any, TypeVar

from courier.application.injection import bind_dependencies, bind_dependencies_async
from courier.core.enums import DuplicatePolicy
from courier.core.errors import (
    DuplicateRegistrationError,
    InvalidIdentityError,
    NoHandlerRegisteredError,
    UnresolvedDependencyError,
)
from courier.domain.protocols.dependency_registry_protocol import (
    DependencyResolverProtocol,
)
from courier.domain.protocols.logger_protocol import LoggerProtocol

C = TypeVar("C")

SYNC_STORE = "sync"
ASYNC_STORE = "async"


def _handler_name(handler: Callable[..., Any]) -> str:
    return getattr(handler, "__qualname__", type(handler).__name__)


class _HandlerStore:
    """One handler store (sync or async) with its own lock."""

    def __init__(self, name: str, *, thread_safe: bool) -> None:
        self.name = name
        self.handlers: dict[type, Callable[[Any], Any]] = {}
        self.lock: AbstractContextManager[Any] = (
            threading.RLock() if thread_safe else nullcontext()
        )

    def get(self, command_type: type) -> Callable[[Any], Any] | None:
        with self.lock:
            return self.handlers.get(command_type)

    def __contains__(self, command_type: type) -> bool:
        with self.lock:
            return command_type in self.handlers


class InMemoryCommandRegistry:
    """In-memory command registry with one handler per command type.

    Dispatch routes ``type(command)`` (exact match, no inheritance) to the
    handler registered in the matching store and runs it in the caller's
    context. The registry keeps no reference to dispatched commands.

    Thread Safety:
        - Not locked by default: register during setup, then dispatch
        - thread_safe=True gives each store its own RLock so registration
          may interleave with dispatch; locks are never held while a
          handler runs

    Attributes:
        _sync: Store of synchronous handlers.
        _async: Store of asynchronous handlers.
        _resolver: Dependency resolver used to bind ``dependencies``.
        _duplicate_policy: REJECT raises, REPLACE overwrites.
        _strict: Raise NoHandlerRegisteredError instead of no-op.
        _logger: Logger for registration and dispatch tracing.

    Design Decisions:
        - **Fail-fast registration**: duplicates rejected by default
        - **Permissive dispatch**: missing handler is a silent no-op unless strict
        - **No error wrapping**: handler exceptions reach the dispatcher as-is
    """

    def __init__(
        self,
        logger: LoggerProtocol,
        *,
        resolver: DependencyResolverProtocol | None = None,
        duplicate_policy: DuplicatePolicy = DuplicatePolicy.REJECT,
        strict: bool = False,
        thread_safe: bool = False,
    ) -> None:
        """Initialize an empty command registry.

        Args:
            logger: Logger for registration (debug), replacement and handler
                failure (warning) events.
            resolver: Dependency resolver used when handlers are registered
                with ``dependencies``. Optional for registries that only take
                pre-bound handlers.
            duplicate_policy: Behavior on a second registration for the same
                command type in the same store.
            strict: Raise NoHandlerRegisteredError when dispatching a command
                with no handler. Applies to both dispatch calls.
            thread_safe: Guard each store with its own lock.
        """
        self._sync = _HandlerStore(SYNC_STORE, thread_safe=thread_safe)
        self._async = _HandlerStore(ASYNC_STORE, thread_safe=thread_safe)
        self._resolver = resolver
        self._duplicate_policy = duplicate_policy
        self._strict = strict
        self._logger = logger

    # =========================================================================
    # Registration
    # =========================================================================

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
            dependencies: Collaborator identities resolved NOW and bound after
                the command argument.

        Raises:
            InvalidIdentityError: If command_type is not a class.
            DuplicateRegistrationError: If already registered (REJECT policy).
            UnresolvedDependencyError: If a dependency cannot be resolved.
            TypeError: If handler cannot accept the bound collaborators.
        """
        self._check_identity(command_type)
        if dependencies:
            handler = bind_dependencies(
                handler, self._require_resolver(dependencies), *dependencies
            )
        self._store(self._sync, command_type, handler)

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
            handler: Callable returning an awaitable, taking the command then
                bound collaborators.
            dependencies: Collaborator identities resolved NOW.

        Raises:
            InvalidIdentityError: If command_type is not a class.
            DuplicateRegistrationError: If already registered (REJECT policy).
            UnresolvedDependencyError: If a dependency cannot be resolved.
            TypeError: If handler cannot accept the bound collaborators.
        """
        self._check_identity(command_type)
        if dependencies:
            handler = bind_dependencies_async(
                handler, self._require_resolver(dependencies), *dependencies
            )
        self._store(self._async, command_type, handler)

    def has_handler(self, command_type: type) -> bool:
        """Check whether a synchronous handler is registered for command_type."""
        return command_type in self._sync

    def has_async_handler(self, command_type: type) -> bool:
        """Check whether an asynchronous handler is registered for command_type."""
        return command_type in self._async

    # =========================================================================
    # Dispatch
    # =========================================================================

    def dispatch(self, command: object) -> None:
        """Run the synchronous handler for type(command) to completion.

        Flow:
            1. Look up handler for type(command) in the sync store
            2. No handler: return (or raise in strict mode)
            3. Call handler(command) in the caller's frame
            4. Handler raised: log warning, re-raise the original exception

        Args:
            command: Command instance.

        Raises:
            NoHandlerRegisteredError: Strict mode only, when no handler exists.
            Exception: Whatever the handler or its decorators raise.
        """
        handler = self._lookup(self._sync, command)
        if handler is None:
            return

        try:
            handler(command)
        except Exception as e:
            self._log_failure(self._sync, command, handler, e)
            raise

    async def dispatch_async(self, command: object) -> None:
        """Await the asynchronous handler for type(command).

        The handler is invoked before the first suspension point, so lookup
        and routing happen synchronously. Any work the handler schedules
        (threads, tasks) is awaited through the handler's own awaitable;
        cancellation semantics belong to that awaitable.

        Args:
            command: Command instance.

        Raises:
            NoHandlerRegisteredError: Strict mode only, when no handler exists.
            Exception: Whatever the handler's awaitable raises.
        """
        handler = self._lookup(self._async, command)
        if handler is None:
            return

        try:
            await handler(command)
        except Exception as e:
            self._log_failure(self._async, command, handler, e)
            raise

    # =========================================================================
    # Internals
    # =========================================================================

    @staticmethod
    def _check_identity(command_type: Any) -> None:
        if not isinstance(command_type, type):
            raise InvalidIdentityError(command_type)

    def _require_resolver(
        self, dependencies: Sequence[type]
    ) -> DependencyResolverProtocol:
        if self._resolver is None:
            raise UnresolvedDependencyError(
                dependencies[0], reason="command registry has no dependency resolver"
            )
        return self._resolver

    def _store(
        self,
        store: _HandlerStore,
        command_type: type,
        handler: Callable[[Any], Any],
    ) -> None:
        with store.lock:
            replaced = command_type in store.handlers
            if replaced and self._duplicate_policy is DuplicatePolicy.REJECT:
                raise DuplicateRegistrationError(command_type, store=store.name)
            store.handlers[command_type] = handler

        if replaced:
            self._logger.warning(
                "command_handler_replaced",
                command_type=command_type.__qualname__,
                store=store.name,
                handler_name=_handler_name(handler),
            )
        else:
            self._logger.debug(
                "command_handler_registered",
                command_type=command_type.__qualname__,
                store=store.name,
                handler_name=_handler_name(handler),
            )

    def _lookup(
        self, store: _HandlerStore, command: object
    ) -> Callable[[Any], Any] | None:
        command_type = type(command)
        handler = store.get(command_type)

        if handler is None:
            if self._strict:
                raise NoHandlerRegisteredError(command_type, store=store.name)
            # No handler registered (not an error in permissive mode)
            return None

        self._logger.debug(
            "command_dispatching",
            command_type=command_type.__qualname__,
            store=store.name,
            handler_name=_handler_name(handler),
        )
        return handler

    def _log_failure(
        self,
        store: _HandlerStore,
        command: object,
        handler: Callable[[Any], Any],
        error: Exception,
    ) -> None:
        self._logger.warning(
            "command_handler_failed",
            command_type=type(command).__qualname__,
            store=store.name,
            handler_name=_handler_name(handler),
            error_type=type(error).__name__,
            error_message=str(error),
        )
