"""Duplicate registration policy.

Controls what a command registry does when a handler is registered under a
command type that already holds one in the same store.
"""

from enum import Enum


class DuplicatePolicy(str, Enum):
    """What to do on a second registration for the same command type."""

    REJECT = "reject"  # Raise DuplicateRegistrationError (default)
    REPLACE = "replace"  # Overwrite the previous handler, log a warning
