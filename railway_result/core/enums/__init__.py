"""Core enums package.

Usage:
    from railway_result.core.enums import ErrorCode, Environment
"""

from railway_result.core.enums.environment import Environment
from railway_result.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode", "Environment"]
