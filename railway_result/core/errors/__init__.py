"""Core errors package.

Usage:
    from railway_result.core.errors import DomainError
"""

from railway_result.core.errors.domain_error import DomainError

__all__ = ["DomainError"]
