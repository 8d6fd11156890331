"""Notifier that writes toasts to the structured log.

Used when no UI host is attached (command-line runs, smoke checks). Error
toasts are logged at WARNING: they describe a refused user action, not a
failure of the application.
"""

from statement_intake.domain.enums.notification_kind import NotificationKind
from statement_intake.domain.protocols.logger_protocol import LoggerProtocol
from statement_intake.domain.value_objects.notification import Notification


class LoggingNotifier:
    """Render notifications as log events."""

    def __init__(self, logger: LoggerProtocol) -> None:
        self._logger = logger

    def notify(self, notification: Notification) -> None:
        """Log the notification with its kind, title and description."""
        context = {
            "kind": notification.kind.value,
            "title": notification.title,
            "description": notification.description,
        }
        if notification.kind is NotificationKind.ERROR:
            self._logger.warning("Notification", **context)
        else:
            self._logger.info("Notification", **context)
