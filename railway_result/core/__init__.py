"""Core shared kernel.

This module provides foundational utilities used across all layers:
- Result types for railway-oriented programming
- Boundary capture (guard, guard_async)
- Base error class for domain-level error payloads

The core module has NO dependencies on other application layers.
"""

from railway_result.core.enums import ErrorCode
from railway_result.core.errors import DomainError
from railway_result.core.exceptions import ResultAccessError
from railway_result.core.result import (
    Failure,
    Result,
    Success,
    failure,
    guard,
    guard_async,
    success,
)
from railway_result.core.result_extensions import (
    error_or_none,
    get_or_else,
    tap,
    tap_error,
    value_or_none,
)

__all__ = [
    "DomainError",
    "ErrorCode",
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
