"""Registry error codes (machine-readable).

Error codes follow ENTITY_REASON naming convention and are attached to
every RegistryError so callers can branch on a stable value instead of
parsing messages.
"""

from enum import Enum


class ErrorCode(Enum):
    """Registry error codes (machine-readable)."""

    # Registration errors
    DUPLICATE_REGISTRATION = "duplicate_registration"
    INVALID_IDENTITY = "invalid_identity"

    # Resolution errors
    UNRESOLVED_DEPENDENCY = "unresolved_dependency"

    # Dispatch errors
    NO_HANDLER_REGISTERED = "no_handler_registered"
