"""Registry error classes.

Registry errors signal configuration faults (a handler registered twice, a
collaborator nobody provided, a command with nowhere to go). They are raised,
not returned: a misconfigured registry must stop the composition root before
any command is dispatched.

Errors raised by handlers and decorators are NOT wrapped in these types.
They propagate unchanged to whoever dispatched the command.

Error Types:
- RegistryError: Base class, carries ErrorCode and offending identity
- InvalidIdentityError: Identity is not a class (also a TypeError)
- DuplicateRegistrationError: Identity already holds an entry
- UnresolvedDependencyError: No collaborator stored under identity
- NoHandlerRegisteredError: Strict dispatch found no handler

Usage:
    from courier.core.errors import DuplicateRegistrationError

    try:
        registry.register_sync(AddNumbers, handle_add_numbers)
    except DuplicateRegistrationError as e:
        logger.error("duplicate_handler", identity=e.identity.__name__)
"""

from typing import Any

from courier.core.enums import ErrorCode


def identity_name(identity: Any) -> str:
    """Return a readable name for a registry identity.

    Args:
        identity: Class (or anything passed where a class was expected).

    Returns:
        Qualified class name, or repr() for non-class values.
    """
    if isinstance(identity, type):
        return identity.__qualname__
    return repr(identity)


class RegistryError(Exception):
    """Base exception for registry configuration faults.

    Attributes:
        code: Machine-readable error code (None on the base class).
        identity: The command or collaborator identity involved.
        message: Human-readable message.
    """

    code: ErrorCode | None = None

    def __init__(self, message: str, *, identity: Any) -> None:
        super().__init__(message)
        self.message = message
        self.identity = identity

    def __str__(self) -> str:
        """String representation of error."""
        if self.code is None:
            return self.message
        return f"{self.code.value}: {self.message}"


class InvalidIdentityError(RegistryError, TypeError):
    """Identity passed to a registry is not a class."""

    code = ErrorCode.INVALID_IDENTITY

    def __init__(self, identity: Any) -> None:
        super().__init__(
            f"Registry identities must be classes, got {identity_name(identity)}",
            identity=identity,
        )


class DuplicateRegistrationError(RegistryError):
    """Identity already holds an entry in the target store.

    Attributes:
        store: Store that rejected the registration
            ("sync", "async" or "dependency").
    """

    code = ErrorCode.DUPLICATE_REGISTRATION

    def __init__(self, identity: type, *, store: str) -> None:
        super().__init__(
            f"{identity_name(identity)} is already registered in the {store} store",
            identity=identity,
        )
        self.store = store


class UnresolvedDependencyError(RegistryError):
    """No collaborator is registered under identity."""

    code = ErrorCode.UNRESOLVED_DEPENDENCY

    def __init__(self, identity: Any, *, reason: str | None = None) -> None:
        message = f"No collaborator registered for {identity_name(identity)}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message, identity=identity)


class NoHandlerRegisteredError(RegistryError):
    """Dispatch in strict mode found no handler for the command's type.

    Attributes:
        store: Store that was searched ("sync" or "async").
    """

    code = ErrorCode.NO_HANDLER_REGISTERED

    def __init__(self, identity: type, *, store: str) -> None:
        super().__init__(
            f"No {store} handler registered for {identity_name(identity)}",
            identity=identity,
        )
        self.store = store
