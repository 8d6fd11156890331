"""File input control port.

The host's file picker keeps its last value. Unless it is reset after each
submission, choosing the same file again would not produce a change event,
and a rejected file would linger as the picker's value.
"""

from typing import Protocol


class FileInputProtocol(Protocol):
    """Hidden file picker control."""

    def open(self) -> None:
        """Open the host's file chooser."""
        ...

    def reset(self) -> None:
        """Clear the control's current value."""
        ...
