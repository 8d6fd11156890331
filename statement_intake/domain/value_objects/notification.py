"""Notification value object passed to the toast collaborator."""

from dataclasses import dataclass

from statement_intake.domain.enums.notification_kind import NotificationKind


@dataclass(frozen=True, slots=True, kw_only=True)
class Notification:
    """One user-facing toast.

    Attributes:
        kind: Success or error variant.
        title: Short headline.
        description: One-sentence detail.
    """

    kind: NotificationKind
    title: str
    description: str

    @classmethod
    def success(cls, title: str, description: str) -> "Notification":
        """Build a success notification."""
        return cls(kind=NotificationKind.SUCCESS, title=title, description=description)

    @classmethod
    def error(cls, title: str, description: str) -> "Notification":
        """Build an error notification."""
        return cls(kind=NotificationKind.ERROR, title=title, description=description)
