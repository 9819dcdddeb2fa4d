"""Domain protocols (ports)."""

from railway_result.domain.protocols.logger_protocol import LoggerProtocol
from railway_result.domain.protocols.user_api_protocol import UserApiProtocol

__all__ = ["LoggerProtocol", "UserApiProtocol"]
