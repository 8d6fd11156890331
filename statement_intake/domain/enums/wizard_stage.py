"""Import wizard stages.

Stages run strictly forward: Configure → Map Fields → Preview.
Preview is terminal as far as the intake workflow is concerned.
"""

from enum import Enum


class WizardStage(int, Enum):
    """Step of the statement import wizard, valued by its ordinal."""

    CONFIGURE = 1
    MAP_FIELDS = 2
    PREVIEW = 3

    @property
    def ordinal(self) -> int:
        """1-based position in the sequence."""
        return self.value

    @property
    def label(self) -> str:
        """Label shown in the stepper."""
        return _LABELS[self]

    @property
    def progress_message(self) -> str:
        """Description shown when the wizard moves into this stage."""
        return _PROGRESS_MESSAGES[self]

    @property
    def is_terminal(self) -> bool:
        """True for the last stage."""
        return self is WizardStage.PREVIEW

    def next(self) -> "WizardStage | None":
        """Get the following stage.

        Returns:
            Next stage, or None at the terminal stage.
        """
        if self.is_terminal:
            return None
        return WizardStage(self.value + 1)


_LABELS: dict[WizardStage, str] = {
    WizardStage.CONFIGURE: "Configure",
    WizardStage.MAP_FIELDS: "Map Fields",
    WizardStage.PREVIEW: "Preview",
}

_PROGRESS_MESSAGES: dict[WizardStage, str] = {
    WizardStage.CONFIGURE: "Configuring import...",
    WizardStage.MAP_FIELDS: "Mapping fields...",
    WizardStage.PREVIEW: "Preparing preview...",
}
