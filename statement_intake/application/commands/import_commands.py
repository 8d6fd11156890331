"""Import commands handed to the Map Fields stage.

Architecture:
    - Commands are immutable value objects representing user intent
    - Created by WizardNavigator when the Configure stage is left
    - Consumed by the field mapping collaborator (FieldMappingProtocol)
"""

from dataclasses import dataclass

from statement_intake.domain.enums.character_encoding import CharacterEncoding
from statement_intake.domain.value_objects.selected_file import SelectedFile


@dataclass(frozen=True, kw_only=True)
class BeginFieldMapping:
    """Command to start mapping the selected statement file.

    Attributes:
        file: File chosen on the Configure stage.
        encoding: Declared character encoding, not verified against content.

    Example:
        >>> command = BeginFieldMapping(
        ...     file=selected_file,
        ...     encoding=CharacterEncoding.UTF8,
        ... )
        >>> command.file_format
        'csv'
    """

    file: SelectedFile
    encoding: CharacterEncoding

    @property
    def file_name(self) -> str:
        """Name of the selected file (for logging)."""
        return self.file.name

    @property
    def file_format(self) -> str:
        """Format identifier of the selected file."""
        return self.file.format.value
