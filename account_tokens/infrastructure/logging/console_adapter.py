"""structlog-backed implementation of LoggerProtocol.

Renderer follows the environment (see core.container.get_logger):
- development: colored key=value console output
- testing/ci/production: one JSON object per line

Structural subtyping only; the class does not inherit LoggerProtocol.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog


def _renderer(use_json: bool) -> structlog.types.Processor:
    if use_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=True)


class ConsoleAdapter:
    """Writes structured token lifecycle events to stdout.

    Example:
        >>> logger = ConsoleAdapter(use_json=True, level="DEBUG")
        >>> engine_logger = logger.bind(token_kind="password_reset")
        >>> engine_logger.info("Token issued", owner_id=str(owner_id))
    """

    def __init__(self, *, use_json: bool = False, level: str = "INFO") -> None:
        """Configure structlog and create the root bound logger.

        Args:
            use_json: Render JSON lines instead of colored console output.
            level: Minimum level name, case-insensitive.

        Raises:
            ValueError: If level is not a known logging level name.
        """
        threshold = logging.getLevelNamesMapping().get(level.upper())
        if threshold is None:
            raise ValueError(f"Unknown log level: {level}")

        structlog.configure(
            processors=[
                structlog.stdlib.add_log_level,
                structlog.processors.TimeStamper(fmt="iso", utc=True),
                _renderer(use_json),
            ],
            wrapper_class=structlog.make_filtering_bound_logger(threshold),
            context_class=dict,
            logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
            cache_logger_on_first_use=True,
        )
        self._logger = structlog.get_logger()

    @classmethod
    def _wrap(cls, bound_logger: Any) -> ConsoleAdapter:
        adapter = cls.__new__(cls)
        adapter._logger = bound_logger
        return adapter

    def _emit(
        self,
        method: str,
        message: str,
        error: Exception | None,
        context: dict[str, Any],
    ) -> None:
        if error is not None:
            context["error_type"] = type(error).__name__
            context["error_message"] = str(error)
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
        """Log at error level.

        Args:
            message: Event name.
            error: Exception whose type and text are added to the context.
            **context: Structured key-value context.
        """
        self._emit("error", message, error, context)

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log at critical level (same arguments as error())."""
        self._emit("critical", message, error, context)

    def bind(self, **context: Any) -> ConsoleAdapter:
        """Return a new adapter whose events all carry ``context``."""
        return self._wrap(self._logger.bind(**context))

    with_context = bind
