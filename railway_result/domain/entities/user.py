"""User domain entity decoded from the user API.

Pure business logic, no framework dependencies. Decoding raises on bad
input; callers wrap it in ``guard`` to turn that into a Failure.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True, kw_only=True)
class User:
    """User returned by the user API.

    Attributes:
        id: Numeric user identifier.
        name: Display name (never empty).
    """

    id: int
    name: str

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> "User":
        """Decode a user from a parsed JSON object.

        Args:
            data: Mapping with ``id`` and ``name`` keys.

        Returns:
            User: Decoded entity.

        Raises:
            ValueError: If ``id`` is not an int or ``name`` is not a
                non-empty string.
        """
        user_id = data.get("id")
        name = data.get("name")

        # bool is an int subclass
        if not isinstance(user_id, int) or isinstance(user_id, bool):
            raise ValueError("`id` must be an int")
        if not isinstance(name, str) or not name:
            raise ValueError("`name` must be a non-empty string")

        return cls(id=user_id, name=name)
