"""UserApiProtocol: port for fetching raw user payloads.

Implementations are allowed to raise (transport errors, HTTP errors).
The repository owns the boundary and converts those into Failure values
with ``guard_async``.
"""

from typing import Protocol


class UserApiProtocol(Protocol):
    """Source of raw user JSON."""

    async def fetch_user_json(self, *, should_fail: bool) -> str:
        """Fetch the raw JSON body for the current user.

        Args:
            should_fail: Simulate a transport failure.

        Returns:
            Response body text.
        """
        ...
