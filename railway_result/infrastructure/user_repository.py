"""User repository: the boundary where exceptions become Result values.

Both third-party calls that can raise are wrapped exactly once:
- the API call with ``guard_async`` (errors -> NetworkError)
- JSON decoding plus entity parsing with ``guard`` (errors -> ParsingError)

``and_then`` chains the two steps, so a network failure short-circuits and
the decoder never runs.
"""

import json
from typing import Any

from railway_result.core.result import Result, guard, guard_async
from railway_result.core.result_extensions import tap, tap_error
from railway_result.domain.entities import User
from railway_result.domain.errors import AppError, NetworkError, ParsingError
from railway_result.domain.protocols import LoggerProtocol, UserApiProtocol


def decode_user(body: str) -> User:
    """Decode a response body into a User.

    Raises:
        json.JSONDecodeError: If the body is not valid JSON.
        ValueError: If the JSON is not an object or has invalid fields.
    """
    decoded: Any = json.loads(body)
    if not isinstance(decoded, dict):
        raise ValueError("Expected a JSON object")
    return User.from_json(decoded)


class UserRepository:
    """Fetches users and reports every outcome as a Result.

    Args:
        api_client: Source of raw user JSON (may raise).
        logger: Structured logger.
    """

    def __init__(self, api_client: UserApiProtocol, *, logger: LoggerProtocol) -> None:
        self._api_client = api_client
        self._logger = logger.bind(component="user_repository")

    async def fetch_user(self, *, should_fail_network: bool) -> Result[User, AppError]:
        """Fetch and decode the current user.

        Args:
            should_fail_network: Ask the API client to simulate a transport
                failure.

        Returns:
            Success(User) on success.
            Failure(NetworkError) when the API call raised.
            Failure(ParsingError) when the body could not be decoded.
        """
        body_result: Result[str, AppError] = await guard_async(
            lambda: self._api_client.fetch_user_json(should_fail=should_fail_network),
            on_error=NetworkError.from_cause,
        )

        result: Result[User, AppError] = body_result.and_then(
            lambda body: guard(lambda: decode_user(body), on_error=ParsingError.from_cause)
        )

        tap(result, lambda user: self._logger.info("user_fetch_succeeded", user_id=user.id))
        tap_error(
            result,
            lambda error: self._logger.warning("user_fetch_failed", **error.log_context()),
        )
        return result
