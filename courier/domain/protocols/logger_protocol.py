"""LoggerProtocol definition for structured logging.

Registries log through this protocol so tests can pass a MagicMock and
assert on event names and context, and so the structlog adapter stays an
infrastructure detail.

Levels used by the registries:
    - DEBUG: collaborator_registered, command_handler_registered,
      command_dispatching
    - WARNING: command_handler_replaced, command_handler_failed

Usage:
    from courier.core.container import get_logger

    logger = get_logger().bind(component="command_registry")
    logger.debug("command_dispatching", command_type="AddNumbers", store="sync")
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters.

    Messages are snake_case event names; everything variable goes in context.
    """

    def debug(self, message: str, /, **context: Any) -> None: ...

    def info(self, message: str, /, **context: Any) -> None: ...

    def warning(self, message: str, /, **context: Any) -> None: ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error event.

        Args:
            message: Event name.
            error: Optional exception; adapters add error_type and
                error_message fields from it.
            **context: Structured key-value context fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None: ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return a new logger with context attached to every event.

        The original logger is left unchanged.
        """
        ...
