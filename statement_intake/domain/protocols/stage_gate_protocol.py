"""Stage gate port for stages owned by downstream collaborators.

The Configure stage is gated by the intake controller. Later stages decide
for themselves whether they are complete; the navigator asks through this
port.
"""

from typing import Protocol

from statement_intake.domain.enums.wizard_stage import WizardStage


class StageGateProtocol(Protocol):
    """External gate for Map Fields and later stages."""

    def is_complete(self, stage: WizardStage) -> bool:
        """Return True when the wizard may leave ``stage``."""
        ...
