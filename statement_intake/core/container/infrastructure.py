"""Infrastructure dependency factories.

Application-scoped singletons:
- Settings (pydantic-settings)
- Logging (structlog console adapter)
- Notifier (log-backed, for hosts without a toast surface)
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from statement_intake.core.config import get_settings

if TYPE_CHECKING:
    from statement_intake.domain.protocols.logger_protocol import LoggerProtocol
    from statement_intake.domain.protocols.notifier_protocol import NotifierProtocol


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter configuration is centralized here:
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Every event carries the application name and version.

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from statement_intake.infrastructure.logging.console_adapter import ConsoleAdapter

    settings = get_settings()
    env = (
        settings.environment.value
        if hasattr(settings.environment, "value")
        else str(settings.environment)
    )
    level = "DEBUG" if settings.debug else settings.log_level
    logger = ConsoleAdapter(use_json=env != "development", level=level)
    return logger.bind(app_name=settings.app_name, app_version=settings.app_version)


@lru_cache()
def get_notifier() -> "NotifierProtocol":
    """Return the log-backed notifier singleton.

    Returns:
        NotifierProtocol: LoggingNotifier writing through get_logger().
    """
    from statement_intake.infrastructure.notifications.logging_notifier import (
        LoggingNotifier,
    )

    return LoggingNotifier(get_logger())


__all__ = ["get_logger", "get_notifier", "get_settings"]
