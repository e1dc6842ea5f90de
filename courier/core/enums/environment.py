"""Runtime environment types.

Used by Settings to pick environment-specific behavior, most notably the
log renderer chosen by the container.

Environments:
- DEVELOPMENT: Local development, human-readable console logs
- TESTING: Automated test execution, JSON logs
- CI: Continuous integration, JSON logs
- PRODUCTION: Deployed service, JSON logs
"""

from enum import Enum


class Environment(str, Enum):
    """Runtime environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
