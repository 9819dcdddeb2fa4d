"""LoggerProtocol definition for structured logging.

Backend-agnostic logging contract used by Result producers (repositories,
API clients). The Result core itself never logs.

Log Levels:
    - DEBUG: Detailed diagnostic info
    - INFO: Normal operational events
    - WARNING: Expected failures captured as Failure results
    - ERROR: Operation failed, system continues
    - CRITICAL: System-wide failure

Usage:
    from railway_result.core.container import get_logger

    logger = get_logger()
    logger.warning("user_fetch_failed", error_code=error.code.value)

    scoped = logger.bind(operation="fetch_user")
    scoped.info("user_fetch_succeeded", user_id=user.id)
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters.

    All logging calls are structured: message + key-value context.
    """

    def debug(self, message: str, /, **context: Any) -> None: ...

    def info(self, message: str, /, **context: Any) -> None: ...

    def warning(self, message: str, /, **context: Any) -> None: ...

    def error(
        self, message: str, /, *, error: BaseException | None = None, **context: Any
    ) -> None:
        """Log an error-level message with optional exception details.

        Args:
            message: Event name (avoid f-strings; use context).
            error: Optional exception instance; implementation may include
                error_type and error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: BaseException | None = None, **context: Any
    ) -> None: ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return new logger with permanently bound context.

        Original logger instance remains unchanged.

        Args:
            **context: Context to bind to all future logs.

        Returns:
            New logger instance with bound context.
        """
        ...

    def with_context(self, **context: Any) -> LoggerProtocol:
        """Alias for bind()."""
        ...
