"""Unit tests for UserRepository.

Tests cover:
- Success path (guard_async -> and_then -> guard)
- Network failure short-circuits decoding
- Parsing failures (invalid JSON, non-object JSON, invalid fields)
- Structured logging of outcomes
"""

import json
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from railway_result.core.enums import ErrorCode
from railway_result.core.result import Success
from railway_result.domain.entities import User
from railway_result.domain.errors import NetworkError, ParsingError
from railway_result.infrastructure.api.fake_api_client import FakeApiClient
from railway_result.infrastructure.user_repository import UserRepository, decode_user


@pytest.fixture
def logger() -> MagicMock:
    logger = MagicMock()
    logger.bind.return_value = logger
    return logger


def _repository(body: str, logger: MagicMock) -> UserRepository:
    client = FakeApiClient(base_url="https://api.example.test", latency_ms=0, body=body)
    return UserRepository(client, logger=logger)


@pytest.mark.unit
class TestDecodeUser:
    """Test decode_user."""

    def test_decodes_object(self):
        assert decode_user('{"id": 3, "name": "Ada"}') == User(id=3, name="Ada")

    def test_rejects_non_object(self):
        """Test a JSON array is refused."""
        with pytest.raises(ValueError, match="Expected a JSON object"):
            decode_user("[1, 2]")

    def test_invalid_json_raises_decode_error(self):
        with pytest.raises(json.JSONDecodeError):
            decode_user("{not json")


@pytest.mark.unit
class TestFetchUser:
    """Test UserRepository.fetch_user."""

    async def test_success(self, logger):
        """Test a valid body becomes Success(User)."""
        repository = _repository('{"id": 1, "name": "Hylke"}', logger)

        result = await repository.fetch_user(should_fail_network=False)

        assert result == Success(User(id=1, name="Hylke"))
        logger.info.assert_called_once_with("user_fetch_succeeded", user_id=1)
        logger.warning.assert_not_called()

    async def test_network_failure(self, logger):
        """Test a transport error becomes Failure(NetworkError)."""
        repository = _repository('{"id": 1, "name": "Hylke"}', logger)

        result = await repository.fetch_user(should_fail_network=True)

        assert result.is_failure
        assert isinstance(result.error, NetworkError)
        assert isinstance(result.error.cause, httpx.ConnectError)
        logger.warning.assert_called_once_with(
            "user_fetch_failed",
            error_code=ErrorCode.NETWORK_FAILED.value,
            error_message="Network failed: Simulated network error",
            error_type="ConnectError",
        )

    async def test_network_failure_skips_decoding(self, logger):
        """Test the decoder never runs after a network failure."""
        client = MagicMock()
        client.fetch_user_json = AsyncMock(side_effect=OSError("unreachable"))
        repository = UserRepository(client, logger=logger)

        result = await repository.fetch_user(should_fail_network=True)

        assert isinstance(result.error, NetworkError)
        client.fetch_user_json.assert_awaited_once_with(should_fail=True)

    @pytest.mark.parametrize(
        ("body", "cause_type"),
        [
            ('{"id": "oops", "name": 123}', ValueError),
            ("[]", ValueError),
            ("not json", json.JSONDecodeError),
        ],
    )
    async def test_parsing_failure(self, logger, body, cause_type):
        """Test decode failures become Failure(ParsingError)."""
        repository = _repository(body, logger)

        result = await repository.fetch_user(should_fail_network=False)

        assert isinstance(result.error, ParsingError)
        assert isinstance(result.error.cause, cause_type)
        assert result.error.code == ErrorCode.PARSING_FAILED
        logger.info.assert_not_called()

    async def test_repository_binds_component(self, logger):
        """Test the repository scopes its logger."""
        _repository("{}", logger)

        logger.bind.assert_called_once_with(component="user_repository")
