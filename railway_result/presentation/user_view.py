"""Render a user fetch outcome as text.

The one place the reference consumer leaves the Result world: a single
``fold`` decides what the caller sees.
"""

from railway_result.core.result import Result
from railway_result.domain.entities import User
from railway_result.domain.errors import AppError


def describe_user_result(result: Result[User, AppError] | None) -> str:
    """Summarize a user fetch for display.

    Args:
        result: Outcome of ``UserRepository.fetch_user``, or None before the
            first fetch.

    Returns:
        One-line description of the outcome.
    """
    if result is None:
        return "No user fetched yet."

    return result.fold(
        on_success=lambda user: f"Success: id={user.id} name={user.name}",
        on_failure=lambda error: f"Failure: {error.message}",
    )
