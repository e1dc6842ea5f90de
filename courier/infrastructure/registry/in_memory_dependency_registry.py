"""In-memory dependency registry implementation.

Implements DependencyRegistryProtocol with a dictionary keyed by collaborator
type. Collaborators are registered once during setup and live for the rest
of the process.

Architecture:
    - Implements DependencyRegistryProtocol (hexagonal adapter pattern)
    - Dictionary-based store (collaborator type -> live instance)
    - Strict registration (duplicates raise, no silent overwrite)
    - Lookup-or-fail resolution (no None/default fallback)

Usage:
    >>> registry = InMemoryDependencyRegistry(logger=get_logger())
    >>> registry.register(Adder, lambda a, b: a + b)
    >>> registry.register(Printer, print)
    >>> registry.resolve(Adder)(3, 5)
    8
"""

import threading
from contextlib import AbstractContextManager, nullcontext
from typing import Any, TypeVar

from courier.core.errors import (
    DuplicateRegistrationError,
    InvalidIdentityError,
    UnresolvedDependencyError,
)
from courier.domain.protocols.logger_protocol import LoggerProtocol

T = TypeVar("T")


class InMemoryDependencyRegistry:
    """In-memory collaborator store.

    Thread Safety:
        - Not locked by default (registration happens during single-threaded
          setup, resolution is a plain dict read)
        - thread_safe=True guards the store with an RLock
        - Collaborators themselves must be safe for concurrent use

    Attributes:
        _instances: Dictionary mapping collaborator types to instances.
        _logger: Logger for registration tracing.
        _lock: RLock when thread_safe, otherwise a no-op context.
    """

    def __init__(self, logger: LoggerProtocol, *, thread_safe: bool = False) -> None:
        """Initialize an empty dependency registry.

        Args:
            logger: Logger for registration tracing (debug level).
            thread_safe: Guard the store with a lock.
        """
        self._instances: dict[type, Any] = {}
        self._logger = logger
        self._lock: AbstractContextManager[Any] = (
            threading.RLock() if thread_safe else nullcontext()
        )

    def register(self, identity: type[T], instance: T) -> None:
        """Store instance under identity.

        Args:
            identity: Collaborator type (Protocol or class).
            instance: Live collaborator satisfying identity.

        Raises:
            InvalidIdentityError: If identity is not a class.
            DuplicateRegistrationError: If identity is already registered.
        """
        if not isinstance(identity, type):
            raise InvalidIdentityError(identity)

        with self._lock:
            if identity in self._instances:
                raise DuplicateRegistrationError(identity, store="dependency")
            self._instances[identity] = instance

        self._logger.debug(
            "collaborator_registered",
            collaborator_type=identity.__qualname__,
        )

    def resolve(self, identity: type[T]) -> T:
        """Return the collaborator stored under identity.

        Args:
            identity: Collaborator type.

        Returns:
            The registered instance.

        Raises:
            UnresolvedDependencyError: If nothing is registered under identity.
        """
        with self._lock:
            try:
                instance: T = self._instances[identity]
            except KeyError:
                raise UnresolvedDependencyError(identity) from None
        return instance

    def is_registered(self, identity: type) -> bool:
        """Check whether a collaborator is stored under identity."""
        with self._lock:
            return identity in self._instances
