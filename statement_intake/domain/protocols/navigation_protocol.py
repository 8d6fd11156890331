"""Navigation port for leaving the import page."""

from typing import Protocol


class NavigationProtocol(Protocol):
    """Page shell router."""

    def navigate(self, target: str) -> None:
        """Navigate to a fixed page identifier (e.g. "banking")."""
        ...
