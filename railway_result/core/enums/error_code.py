"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
Carried by DomainError payloads inside Failure results.
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable)."""

    # Boundary errors
    NETWORK_FAILED = "network_failed"
    PARSING_FAILED = "parsing_failed"

    # Validation errors
    VALIDATION_FAILED = "validation_failed"
