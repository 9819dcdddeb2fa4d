"""Base error payload for Failure results.

DomainError is the base class for application errors carried in Failure.
They flow through the system as data (Result types), not exceptions.

Architecture:
- Does NOT inherit from Exception (not raised, returned in Result)
- Uses dataclass inheritance (NOT Protocol/ABC)
- Type-safe with Result[T, DomainError]

Usage:
    @dataclass(frozen=True, slots=True, kw_only=True)
    class QuotaError(DomainError):
        limit: int

    return Failure(QuotaError(code=ErrorCode.VALIDATION_FAILED, message="...", limit=5))
"""

from dataclasses import dataclass
from typing import Any

from railway_result.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Base domain error (does NOT inherit from Exception).

    Attributes:
        code: Machine-readable error code (enum).
        message: Human-readable error message.
        details: Optional context for debugging.
    """

    code: ErrorCode
    message: str
    details: dict[str, str] | None = None

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"

    def log_context(self) -> dict[str, Any]:
        """Flatten the error into structured logging fields.

        Returns:
            dict: ``error_code``, ``error_message`` and the ``details`` entries.
        """
        context: dict[str, Any] = {
            "error_code": self.code.value,
            "error_message": self.message,
        }
        context.update(self.details or {})
        return context
