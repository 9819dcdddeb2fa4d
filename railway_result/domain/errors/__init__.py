"""Domain errors package.

Usage:
    from railway_result.domain.errors import AppError, NetworkError, ParsingError
"""

from railway_result.domain.errors.app_error import AppError, NetworkError, ParsingError

__all__ = ["AppError", "NetworkError", "ParsingError"]
