"""Field mapping port: the Map Fields stage.

Receives the hand-off payload once the Configure stage is left. The
collaborator owns content parsing, size-limit enforcement and field mapping.
"""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from statement_intake.application.commands.import_commands import (
        BeginFieldMapping,
    )


class FieldMappingProtocol(Protocol):
    """Downstream parse/mapping collaborator."""

    def begin_mapping(self, command: "BeginFieldMapping") -> None:
        """Start mapping the selected file.

        Args:
            command: Selected file and encoding, passed by value.
        """
        ...
