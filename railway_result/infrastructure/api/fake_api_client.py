"""Simulated user API client.

Serves a canned JSON body through ``httpx.MockTransport`` after a configurable
delay, so the repository exercises a real async HTTP client without network
access. Transport failures raise ``httpx.ConnectError`` exactly like a
refused connection would.

Architecture:
    - Infrastructure layer (adapter for the user API)
    - Uses httpx for async HTTP
    - Raises on failure; Result conversion happens in the repository
"""

import asyncio
from functools import partial

import httpx
import structlog

DEFAULT_USER_JSON = '{"id": 1, "name": "Hylke"}'
USER_PATH = "/users/me"


class FakeApiClient:
    """User API client backed by an in-process mock transport.

    Attributes:
        _base_url: API base URL (without trailing slash).
        _latency_ms: Delay applied before every request.
        _timeout: HTTP request timeout in seconds.
        _body: JSON text returned on success.

    Example:
        >>> client = FakeApiClient(base_url="https://api.example.test", latency_ms=0)
        >>> body = await client.fetch_user_json(should_fail=False)
    """

    def __init__(
        self,
        *,
        base_url: str,
        latency_ms: int = 400,
        timeout: float = 10.0,
        body: str = DEFAULT_USER_JSON,
    ) -> None:
        """Initialize the fake client.

        Args:
            base_url: API base URL.
            latency_ms: Simulated latency in milliseconds.
            timeout: HTTP request timeout in seconds.
            body: JSON text served on success (swap it to trigger parsing
                failures).
        """
        self._base_url = base_url.rstrip("/")
        self._latency_ms = latency_ms
        self._timeout = timeout
        self._body = body
        self._logger = structlog.get_logger("user_api")

    async def fetch_user_json(self, *, should_fail: bool) -> str:
        """Fetch the user JSON body.

        Args:
            should_fail: Make the transport refuse the connection.

        Returns:
            Response body text.

        Raises:
            httpx.ConnectError: When ``should_fail`` is set.
            httpx.HTTPStatusError: On a non-2xx response.
        """
        await asyncio.sleep(self._latency_ms / 1000)

        transport = httpx.MockTransport(partial(self._handle, should_fail=should_fail))
        async with httpx.AsyncClient(
            base_url=self._base_url,
            transport=transport,
            timeout=self._timeout,
        ) as client:
            response = await client.get(USER_PATH)

        response.raise_for_status()
        self._logger.debug(
            "user_api_response",
            status_code=response.status_code,
            body_length=len(response.text),
        )
        return response.text

    def _handle(self, request: httpx.Request, *, should_fail: bool) -> httpx.Response:
        if should_fail:
            raise httpx.ConnectError("Simulated network error", request=request)
        return httpx.Response(
            200,
            text=self._body,
            headers={"Content-Type": "application/json"},
        )
