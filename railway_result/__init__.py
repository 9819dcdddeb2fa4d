"""Explicit success/failure values and combinators for fallible code.

Usage:
    from railway_result import Failure, Success, guard

    result = guard(lambda: int(raw), on_error=lambda exc, tb: "not a number")
    doubled = result.map(lambda n: n * 2)
    print(doubled.fold(on_success=str, on_failure=lambda e: f"error: {e}"))
"""

from railway_result.core import (
    Failure,
    Result,
    ResultAccessError,
    Success,
    error_or_none,
    failure,
    get_or_else,
    guard,
    guard_async,
    success,
    tap,
    tap_error,
    value_or_none,
)

__all__ = [
    "Failure",
    "Result",
    "ResultAccessError",
    "Success",
    "error_or_none",
    "failure",
    "get_or_else",
    "guard",
    "guard_async",
    "success",
    "tap",
    "tap_error",
    "value_or_none",
]
