"""Core errors package.

Exports all registry error classes for convenient importing.

Usage:
    from courier.core.errors import RegistryError, UnresolvedDependencyError
"""

from courier.core.errors.registry_errors import (
    DuplicateRegistrationError,
    InvalidIdentityError,
    NoHandlerRegisteredError,
    RegistryError,
    UnresolvedDependencyError,
    identity_name,
)

__all__ = [
    "RegistryError",
    "InvalidIdentityError",
    "DuplicateRegistrationError",
    "UnresolvedDependencyError",
    "NoHandlerRegisteredError",
    "identity_name",
]
