"""Convenience helpers layered on the public Result contract.

Every helper here goes through ``fold``; none of them touch the variants
directly.

Usage:
    from railway_result.core.result_extensions import get_or_else, tap_error

    name = get_or_else(fetch_name(), lambda error: "anonymous")
    tap_error(result, lambda error: logger.warning("fetch_failed", error=str(error)))
"""

from collections.abc import Callable
from typing import TypeVar

from railway_result.core.result import Result

T = TypeVar("T")
E = TypeVar("E")


def value_or_none(result: Result[T, E]) -> T | None:
    """Return the success value, or None for a Failure."""
    return result.fold(on_success=lambda value: value, on_failure=lambda _: None)


def error_or_none(result: Result[T, E]) -> E | None:
    """Return the error, or None for a Success."""
    return result.fold(on_success=lambda _: None, on_failure=lambda error: error)


def get_or_else(result: Result[T, E], fallback: Callable[[E], T]) -> T:
    """Return the success value, or ``fallback(error)`` for a Failure.

    Args:
        result: Result to unwrap.
        fallback: Computes a replacement value from the error.

    Returns:
        The contained value or the fallback's value.
    """
    return result.fold(on_success=lambda value: value, on_failure=fallback)


def tap(result: Result[T, E], on_success: Callable[[T], object]) -> None:
    """Call ``on_success`` with the value for its side effect (Success only)."""
    result.fold(on_success=on_success, on_failure=lambda _: None)


def tap_error(result: Result[T, E], on_failure: Callable[[E], object]) -> None:
    """Call ``on_failure`` with the error for its side effect (Failure only)."""
    result.fold(on_success=lambda _: None, on_failure=on_failure)
