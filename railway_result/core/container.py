"""Dependency factories (composition root).

Application-scoped singletons for ambient infrastructure:
- Logging (console, JSON or human-readable)
- User repository (reference consumer of the Result core)

Usage:
    from railway_result.core.container import get_logger

    logger = get_logger()
    logger.info("started", component="worker")
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from railway_result.core.config import get_settings

if TYPE_CHECKING:
    from railway_result.domain.protocols.logger_protocol import LoggerProtocol
    from railway_result.infrastructure.user_repository import UserRepository


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here:
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from railway_result.infrastructure.logging.console_adapter import ConsoleAdapter

    settings = get_settings()
    env = (
        settings.environment.value
        if hasattr(settings.environment, "value")
        else str(settings.environment)
    )

    adapter = ConsoleAdapter(
        use_json=env != "development",
        level=settings.log_level,
    )
    return adapter.bind(app=settings.app_name, environment=env)


@lru_cache()
def get_user_repository() -> "UserRepository":
    """Return the user repository singleton wired with the fake API client.

    Returns:
        UserRepository: Repository backed by FakeApiClient.
    """
    from railway_result.infrastructure.api.fake_api_client import FakeApiClient
    from railway_result.infrastructure.user_repository import UserRepository

    settings = get_settings()
    client = FakeApiClient(
        base_url=settings.api_base_url,
        latency_ms=settings.api_latency_ms,
        timeout=settings.api_timeout_seconds,
    )
    return UserRepository(client, logger=get_logger())
