"""Dependency registry protocols (ports) for collaborator injection.

A collaborator is a capability a handler needs (a binary arithmetic
function, a sink for values, a repository...). It is identified by its own
nominal type, usually a ``typing.Protocol``, never by a string key.

Architecture:
    - Protocol (structural typing, NOT ABC inheritance)
    - Resolver is the read side used by binders and the command registry
    - Registry adds the write side used by the composition root

Implementations:
    - InMemoryDependencyRegistry: courier/infrastructure/registry/in_memory_dependency_registry.py

Usage:
    >>> class Adder(Protocol):
    ...     def __call__(self, a: int, b: int) -> int: ...
    >>>
    >>> registry.register(Adder, lambda a, b: a + b)
    >>> add = registry.resolve(Adder)  # typed as Adder
    >>> add(3, 5)
    8
"""

from typing import Protocol, TypeVar

T = TypeVar("T")


class DependencyResolverProtocol(Protocol):
    """Read side of a dependency registry.

    Resolution is lookup-or-fail: a missing identity raises
    UnresolvedDependencyError, never returns None or a default.
    """

    def resolve(self, identity: type[T]) -> T:
        """Return the collaborator stored under identity.

        Args:
            identity: Collaborator type (Protocol or class).

        Returns:
            The registered instance.

        Raises:
            UnresolvedDependencyError: If nothing is registered under identity.
        """
        ...

    def is_registered(self, identity: type) -> bool:
        """Check whether a collaborator is stored under identity.

        Args:
            identity: Collaborator type.

        Returns:
            True if resolve(identity) would succeed.
        """
        ...


class DependencyRegistryProtocol(DependencyResolverProtocol, Protocol):
    """Dependency registry with registration support.

    Exactly one live instance per identity. Registering the same identity
    twice raises DuplicateRegistrationError.
    """

    def register(self, identity: type[T], instance: T) -> None:
        """Store instance under identity.

        Args:
            identity: Collaborator type (Protocol or class).
            instance: Live collaborator satisfying identity.

        Raises:
            InvalidIdentityError: If identity is not a class.
            DuplicateRegistrationError: If identity is already registered.
        """
        ...
