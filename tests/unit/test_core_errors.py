"""Unit tests for registry error classes."""

from typing import Protocol

import pytest

from courier.core.enums import ErrorCode
from courier.core.errors import (
    DuplicateRegistrationError,
    InvalidIdentityError,
    NoHandlerRegisteredError,
    RegistryError,
    UnresolvedDependencyError,
    identity_name,
)


class Printer(Protocol):
    def __call__(self, value: object) -> None: ...


@pytest.mark.unit
class TestRegistryErrors:
    """Test error codes, attributes and messages."""

    @pytest.mark.parametrize(
        ("error", "code"),
        [
            (DuplicateRegistrationError(Printer, store="dependency"), ErrorCode.DUPLICATE_REGISTRATION),
            (UnresolvedDependencyError(Printer), ErrorCode.UNRESOLVED_DEPENDENCY),
            (NoHandlerRegisteredError(Printer, store="sync"), ErrorCode.NO_HANDLER_REGISTERED),
            (InvalidIdentityError("Printer"), ErrorCode.INVALID_IDENTITY),
        ],
    )
    def test_all_errors_are_registry_errors_with_code(self, error, code):
        """Test every error carries its ErrorCode and shares the base class."""
        assert isinstance(error, RegistryError)
        assert error.code is code
        assert str(error).startswith(f"{code.value}: ")

    def test_unresolved_dependency_reason_in_message(self):
        """Test optional reason is appended to the message."""
        error = UnresolvedDependencyError(Printer, reason="no resolver")

        assert error.message == "No collaborator registered for Printer (no resolver)"
        assert error.identity is Printer

    def test_invalid_identity_is_type_error(self):
        """Test InvalidIdentityError is catchable as TypeError."""
        with pytest.raises(TypeError):
            raise InvalidIdentityError(42)

    def test_base_error_without_code_renders_message(self):
        """Test the base class has no code and str() is the bare message."""
        error = RegistryError("registry misconfigured", identity=int)

        assert error.code is None
        assert str(error) == "registry misconfigured"


@pytest.mark.unit
class TestIdentityName:
    """Test identity_name helper."""

    def test_class_uses_qualname(self):
        """Test classes render as their qualified name."""
        assert identity_name(Printer) == "Printer"

    def test_non_class_uses_repr(self):
        """Test other values render with repr."""
        assert identity_name("Printer") == "'Printer'"
