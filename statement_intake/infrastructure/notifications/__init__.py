"""Notifier adapters implementing NotifierProtocol."""

from statement_intake.infrastructure.notifications.in_memory_notifier import (
    InMemoryNotifier,
)
from statement_intake.infrastructure.notifications.logging_notifier import (
    LoggingNotifier,
)

__all__ = ["InMemoryNotifier", "LoggingNotifier"]
