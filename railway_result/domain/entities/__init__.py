"""Domain entities."""

from railway_result.domain.entities.user import User

__all__ = ["User"]
