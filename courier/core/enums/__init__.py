"""Core enums package.

Exports all core-level enums for convenient importing.

Usage:
    from courier.core.enums import DuplicatePolicy, Environment, ErrorCode
"""

from courier.core.enums.duplicate_policy import DuplicatePolicy
from courier.core.enums.environment import Environment
from courier.core.enums.error_code import ErrorCode

__all__ = ["DuplicatePolicy", "Environment", "ErrorCode"]
