"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Logging (structlog console adapter)
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from courier.core.config import settings

if TYPE_CHECKING:
    from courier.domain.protocols.logger_protocol import LoggerProtocol


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here (composition root):
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    The configured app_name is bound to every log line.

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from courier.infrastructure.logging.console_adapter import ConsoleAdapter

    env = (
        settings.environment.value
        if hasattr(settings.environment, "value")
        else str(settings.environment)
    )
    level = "DEBUG" if settings.debug else settings.log_level

    adapter = ConsoleAdapter(use_json=env != "development", level=level)
    return adapter.bind(app=settings.app_name)
