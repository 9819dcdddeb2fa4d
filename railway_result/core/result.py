"""Result types for railway-oriented programming.

This module implements the Result pattern to handle operations that can fail
without using exceptions. This approach makes error handling explicit and
testable.

The module is context free: no logging, no I/O, no opinion about the shape
of the error payload.

Usage:
    def divide(a: float, b: float) -> Result[float, str]:
        if b == 0:
            return Failure("Division by zero")
        return Success(a / b)

    result = divide(10, 2)
    match result:
        case Success(value):
            print(f"Result: {value}")
        case Failure(error):
            print(f"Error: {error}")

    # Or compose without branching
    message = (
        divide(10, 2)
        .map(round)
        .fold(on_success=lambda v: f"ok:{v}", on_failure=lambda e: f"fail:{e}")
    )

Boundary capture:
    user = guard(lambda: parse_user(raw), on_error=lambda e, tb: ParsingError(e))
    body = await guard_async(lambda: client.get(url), on_error=to_network_error)
"""

import asyncio
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from types import TracebackType
from typing import Generic, Literal, TypeVar, final

from typing_extensions import TypeAliasType

from railway_result.core.exceptions import ResultAccessError

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type
R = TypeVar("R")  # Mapped success type
F = TypeVar("F")  # Mapped error type

ErrorMapper = Callable[[BaseException, TracebackType | None], E]
"""Converts a captured exception and its traceback into a domain error."""


@final
@dataclass(frozen=True, slots=True)
class Success(Generic[T, E]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T

    @property
    def is_success(self) -> Literal[True]:
        return True

    @property
    def is_failure(self) -> Literal[False]:
        return False

    @property
    def error(self) -> E:
        """Always raises: a Success carries no error.

        Raises:
            ResultAccessError: Every time. Check ``is_failure`` or use
                ``fold`` instead.
        """
        raise ResultAccessError(accessor="error", variant="Success")

    def fold(
        self,
        *,
        on_success: Callable[[T], R],
        on_failure: Callable[[E], R],
    ) -> R:
        """Apply ``on_success`` to the value and return its result."""
        return on_success(self.value)

    def map(self, transform: Callable[[T], R]) -> "Success[R, E]":
        return Success(transform(self.value))

    def map_error(self, transform: Callable[[E], F]) -> "Success[T, F]":
        return Success(self.value)

    def and_then(self, next_: Callable[[T], "Result[R, E]"]) -> "Result[R, E]":
        return next_(self.value)

    def flat_map(self, next_: Callable[[T], "Result[R, E]"]) -> "Result[R, E]":
        """Alias for ``and_then``."""
        return self.and_then(next_)

    def recover(self, fallback: Callable[[E], T]) -> "Success[T, E]":
        return self

    def recover_with(
        self, fallback: Callable[[E], "Result[T, E]"]
    ) -> "Success[T, E]":
        return self


@final
@dataclass(frozen=True, slots=True)
class Failure(Generic[T, E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E

    @property
    def is_success(self) -> Literal[False]:
        return False

    @property
    def is_failure(self) -> Literal[True]:
        return True

    @property
    def value(self) -> T:
        """Always raises: a Failure carries no value.

        Raises:
            ResultAccessError: Every time. Check ``is_success`` or use
                ``fold`` instead.
        """
        raise ResultAccessError(accessor="value", variant="Failure")

    def fold(
        self,
        *,
        on_success: Callable[[T], R],
        on_failure: Callable[[E], R],
    ) -> R:
        """Apply ``on_failure`` to the error and return its result."""
        return on_failure(self.error)

    def map(self, transform: Callable[[T], R]) -> "Failure[R, E]":
        return Failure(self.error)

    def map_error(self, transform: Callable[[E], F]) -> "Failure[T, F]":
        return Failure(transform(self.error))

    def and_then(self, next_: Callable[[T], "Result[R, E]"]) -> "Failure[R, E]":
        return Failure(self.error)

    def flat_map(self, next_: Callable[[T], "Result[R, E]"]) -> "Failure[R, E]":
        """Alias for ``and_then``."""
        return self.and_then(next_)

    def recover(self, fallback: Callable[[E], T]) -> "Success[T, E]":
        return Success(fallback(self.error))

    def recover_with(
        self, fallback: Callable[[E], "Result[T, E]"]
    ) -> "Result[T, E]":
        return fallback(self.error)


# Type alias for Result union
Result = TypeAliasType("Result", Success[T, E] | Failure[T, E], type_params=(T, E))


def success(value: T) -> Success[T, E]:
    """Build a Success wrapping ``value``."""
    return Success(value)


def failure(error: E) -> Failure[T, E]:
    """Build a Failure wrapping ``error``."""
    return Failure(error)


def guard(action: Callable[[], T], *, on_error: ErrorMapper[E]) -> Result[T, E]:
    """Run a fallible synchronous action and capture any exception it raises.

    Args:
        action: Zero-argument callable (wrap arguments in a lambda).
        on_error: Maps the raised exception and its traceback to the error
            payload. Exceptions raised by ``on_error`` itself propagate.

    Returns:
        Success(value) when ``action`` returns normally.
        Failure(on_error(exc, traceback)) when ``action`` raises.

    Example:
        >>> guard(lambda: int("42"), on_error=lambda e, tb: str(e))
        Success(value=42)
        >>> guard(lambda: int("x"), on_error=lambda e, tb: type(e).__name__)
        Failure(error='ValueError')
    """
    try:
        value = action()
    except Exception as exc:
        return Failure(on_error(exc, exc.__traceback__))
    return Success(value)


async def guard_async(
    action: Callable[[], Awaitable[T]], *, on_error: ErrorMapper[E]
) -> Result[T, E]:
    """Await a fallible asynchronous action and capture any exception.

    Exceptions raised while calling ``action`` (before an awaitable exists)
    and exceptions raised once the awaitable settles are routed through the
    same ``on_error``. Cancellation of the pending action is captured as
    well, so callers observe it as a Failure rather than an aborted await.

    No timeout is applied; wrap ``action`` with ``asyncio.timeout`` when one
    is needed.

    Args:
        action: Zero-argument callable returning an awaitable.
        on_error: Maps the raised exception and its traceback to the error
            payload. Exceptions raised by ``on_error`` itself propagate.

    Returns:
        Success(value) or Failure(on_error(exc, traceback)).
    """
    try:
        value = await action()
    except (Exception, asyncio.CancelledError) as exc:
        return Failure(on_error(exc, exc.__traceback__))
    return Success(value)
