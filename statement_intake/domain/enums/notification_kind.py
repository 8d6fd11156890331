"""Notification kinds understood by the toast collaborator."""

from enum import Enum


class NotificationKind(str, Enum):
    """Toast variant."""

    SUCCESS = "success"
    ERROR = "error"
