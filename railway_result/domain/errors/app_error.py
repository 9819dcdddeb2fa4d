"""Boundary error types returned by the user repository.

A captured exception from a network call or a decode step becomes one of
these payloads and travels inside Failure. The original exception is kept
as ``cause`` so a failure stays traceable to exactly one root cause.

Architecture:
- Domain layer errors
- Inherit from DomainError (core layer)
- Produced by ``guard``/``guard_async`` error mappers

Usage:
    from railway_result.core.result import guard
    from railway_result.domain.errors import ParsingError

    result = guard(
        lambda: User.from_json(payload),
        on_error=lambda exc, tb: ParsingError.from_cause(exc),
    )
"""

from dataclasses import dataclass
from types import TracebackType

from typing_extensions import TypeAliasType

from railway_result.core.enums import ErrorCode
from railway_result.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class NetworkError(DomainError):
    """The user API could not be reached or answered with a transport error.

    Attributes:
        code: ErrorCode.NETWORK_FAILED.
        message: "Network failed: <cause>".
        cause: Exception raised by the HTTP client.
    """

    cause: BaseException

    @classmethod
    def from_cause(
        cls, cause: BaseException, traceback: TracebackType | None = None
    ) -> "NetworkError":
        """Build from a captured exception (``guard_async`` on_error signature)."""
        return cls(
            code=ErrorCode.NETWORK_FAILED,
            message=f"Network failed: {cause}",
            cause=cause,
            details={"error_type": type(cause).__name__},
        )


@dataclass(frozen=True, slots=True, kw_only=True)
class ParsingError(DomainError):
    """The API body could not be decoded into a domain object.

    Attributes:
        code: ErrorCode.PARSING_FAILED.
        message: "Parsing failed: <cause>".
        cause: Exception raised while decoding.
    """

    cause: BaseException

    @classmethod
    def from_cause(
        cls, cause: BaseException, traceback: TracebackType | None = None
    ) -> "ParsingError":
        """Build from a captured exception (``guard`` on_error signature)."""
        return cls(
            code=ErrorCode.PARSING_FAILED,
            message=f"Parsing failed: {cause}",
            cause=cause,
            details={"error_type": type(cause).__name__},
        )


AppError = TypeAliasType("AppError", NetworkError | ParsingError)
