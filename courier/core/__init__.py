"""Core shared kernel.

This module provides foundational pieces used across all architectural layers:
- Settings (pydantic-settings) for registry policies and logging
- Enums for environments, error codes and duplicate policy
- Registry error classes
- Container (composition root) wiring the registries together

The core module has NO dependencies on the application layer.
"""

from courier.core.enums import DuplicatePolicy, Environment, ErrorCode
from courier.core.errors import (
    DuplicateRegistrationError,
    InvalidIdentityError,
    NoHandlerRegisteredError,
    RegistryError,
    UnresolvedDependencyError,
)

__all__ = [
    "DuplicatePolicy",
    "Environment",
    "ErrorCode",
    "RegistryError",
    "InvalidIdentityError",
    "DuplicateRegistrationError",
    "UnresolvedDependencyError",
    "NoHandlerRegisteredError",
]
