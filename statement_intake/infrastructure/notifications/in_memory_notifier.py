"""Notifier that records notifications in order.

Headless hosts read ``notifications`` to render toasts after each event.
"""

from statement_intake.domain.enums.notification_kind import NotificationKind
from statement_intake.domain.value_objects.notification import Notification


class InMemoryNotifier:
    """Collect notifications instead of displaying them."""

    def __init__(self) -> None:
        self.notifications: list[Notification] = []

    def notify(self, notification: Notification) -> None:
        """Append the notification."""
        self.notifications.append(notification)

    @property
    def last(self) -> Notification | None:
        """Most recent notification, if any."""
        return self.notifications[-1] if self.notifications else None

    def of_kind(self, kind: NotificationKind) -> list[Notification]:
        """Notifications of one kind, in emission order."""
        return [n for n in self.notifications if n.kind is kind]

    def clear(self) -> None:
        """Forget recorded notifications."""
        self.notifications.clear()
