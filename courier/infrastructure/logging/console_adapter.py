"""Console logging adapter.

Outputs structured registry logs to stdout using structlog.
- Development: human-readable console renderer with colors
- Testing/CI/Production: JSON renderer for machine parsing

Every level goes through one emit path, so the error/critical exception
expansion (error_type, error_message) is applied the same way everywhere.

Implementation intentionally does NOT inherit from LoggerProtocol (PEP 544
structural subtyping).
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

_LEVELS = logging.getLevelNamesMapping()


def _configure(*, use_json: bool, level: str) -> None:
    """Configure structlog globally for stdout output at the given level."""
    try:
        min_level = _LEVELS[level.upper()]
    except KeyError:
        raise ValueError(f"Unknown log level: {level!r}") from None

    renderer: structlog.types.Processor = (
        structlog.processors.JSONRenderer()
        if use_json
        else structlog.dev.ConsoleRenderer(colors=True)
    )
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(min_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=True,
    )


class ConsoleAdapter:
    """Console logger writing structured registry events to stdout.

    Args:
        use_json (bool): JSON output when True, human-readable when False.
        level (str): Minimum level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).

    Raises:
        ValueError: If level is not a known level name.
    """

    def __init__(self, *, use_json: bool = False, level: str = "INFO") -> None:
        _configure(use_json=use_json, level=level)
        self._logger = structlog.get_logger()

    @classmethod
    def _from_bound(cls, logger: Any) -> ConsoleAdapter:
        # Skips __init__ so binding never reconfigures structlog
        adapter = cls.__new__(cls)
        adapter._logger = logger
        return adapter

    def _emit(
        self,
        method: str,
        message: str,
        error: Exception | None,
        context: dict[str, Any],
    ) -> None:
        if error is not None:
            context.setdefault("error_type", type(error).__name__)
            context.setdefault("error_message", str(error))
        getattr(self._logger, method)(message, **context)

    def debug(self, message: str, /, **context: Any) -> None:
        self._emit("debug", message, None, context)

    def info(self, message: str, /, **context: Any) -> None:
        self._emit("info", message, None, context)

    def warning(self, message: str, /, **context: Any) -> None:
        self._emit("warning", message, None, context)

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error; error= adds error_type and error_message fields."""
        self._emit("error", message, error, context)

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a critical event; error= is expanded like error()."""
        self._emit("critical", message, error, context)

    def bind(self, **context: Any) -> ConsoleAdapter:
        """Return a new adapter carrying context on every event.

        The container binds ``app`` once and each registry binds its
        ``component`` on top of it.
        """
        return ConsoleAdapter._from_bound(self._logger.bind(**context))
