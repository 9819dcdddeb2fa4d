"""Unit tests for FakeApiClient.

Tests cover:
- Successful fetch over the mock transport
- Simulated transport failure
- Custom response bodies
"""

import httpx
import pytest

from railway_result.infrastructure.api.fake_api_client import (
    DEFAULT_USER_JSON,
    FakeApiClient,
)


@pytest.fixture
def client() -> FakeApiClient:
    return FakeApiClient(base_url="https://api.example.test/", latency_ms=0)


@pytest.mark.unit
class TestFakeApiClient:
    """Test FakeApiClient.fetch_user_json."""

    async def test_returns_body_on_success(self, client):
        """Test the default user JSON is returned."""
        body = await client.fetch_user_json(should_fail=False)

        assert body == DEFAULT_USER_JSON

    async def test_raises_connect_error_when_failing(self, client):
        """Test simulated network failure raises like a refused connection."""
        with pytest.raises(httpx.ConnectError, match="Simulated network error"):
            await client.fetch_user_json(should_fail=True)

    async def test_custom_body(self):
        """Test the served body can be swapped."""
        client = FakeApiClient(
            base_url="https://api.example.test",
            latency_ms=0,
            body='{"id":"oops","name":123}',
        )

        assert await client.fetch_user_json(should_fail=False) == '{"id":"oops","name":123}'
