"""Notification port.

The host renders toasts; the intake core only describes them. One call per
accept, reject, advance or refused action. Return values are ignored.
"""

from typing import Protocol

from statement_intake.domain.value_objects.notification import Notification


class NotifierProtocol(Protocol):
    """Toast collaborator."""

    def notify(self, notification: Notification) -> None:
        """Show a notification to the user.

        Args:
            notification: Kind, title and description to render.
        """
        ...
