"""Wizard navigator: the Configure → Map Fields → Preview sequence.

Gating:
    - Configure: requires a selected file (read from IntakeController)
    - Map Fields: decided by the injected StageGateProtocol; open when no
      gate is injected
    - Preview: terminal, advancing fails with NoFurtherStageError

Flow (advance):
    1. Terminal stage → Failure(NoFurtherStageError)
    2. Gate closed → Failure(StageLockedError), stage unchanged
    3. Leaving Configure → BeginFieldMapping handed to the mapping collaborator
    4. Stage moves forward, "Moving to next step" notification
"""

from statement_intake.application.commands.import_commands import BeginFieldMapping
from statement_intake.application.services.encoding_selector import EncodingSelector
from statement_intake.application.services.intake_controller import IntakeController
from statement_intake.core.result import Failure, Result, Success
from statement_intake.domain.enums.wizard_stage import WizardStage
from statement_intake.domain.errors import (
    IntakeMessage,
    NoFurtherStageError,
    StageLockedError,
)
from statement_intake.domain.protocols.field_mapping_protocol import (
    FieldMappingProtocol,
)
from statement_intake.domain.protocols.logger_protocol import LoggerProtocol
from statement_intake.domain.protocols.notifier_protocol import NotifierProtocol
from statement_intake.domain.protocols.stage_gate_protocol import StageGateProtocol
from statement_intake.domain.value_objects.notification import Notification


class WizardNavigator:
    """Current wizard stage and forward transitions.

    Dependencies (injected via constructor):
        - IntakeController: Read-only, for the Configure gate
        - EncodingSelector: Read-only, for the hand-off payload
        - FieldMappingProtocol: Receives the hand-off payload
        - NotifierProtocol: For advance/refusal toasts
        - LoggerProtocol: For structured logging
        - StageGateProtocol (optional): Gate for stages past Configure
    """

    def __init__(
        self,
        intake: IntakeController,
        encoding: EncodingSelector,
        field_mapping: FieldMappingProtocol,
        notifier: NotifierProtocol,
        logger: LoggerProtocol,
        stage_gate: StageGateProtocol | None = None,
    ) -> None:
        self._intake = intake
        self._encoding = encoding
        self._field_mapping = field_mapping
        self._notifier = notifier
        self._logger = logger
        self._stage_gate = stage_gate
        self._stage = WizardStage.CONFIGURE

    def current_stage(self) -> WizardStage:
        """Return the current stage."""
        return self._stage

    def stages(self) -> tuple[WizardStage, ...]:
        """Return the full stage sequence in order."""
        return tuple(WizardStage)

    def can_advance(self) -> bool:
        """Whether advance() would move forward from the current stage."""
        if self._stage.is_terminal:
            return False
        if self._stage is WizardStage.CONFIGURE:
            return self._intake.has_selection
        if self._stage_gate is None:
            return True
        return self._stage_gate.is_complete(self._stage)

    def advance(self) -> Result[WizardStage, StageLockedError | NoFurtherStageError]:
        """Move to the next stage.

        Returns:
            Success(WizardStage): The new current stage.
            Failure(NoFurtherStageError): Already at the terminal stage.
            Failure(StageLockedError): Gate closed; stage unchanged.
        """
        stage = self._stage
        next_stage = stage.next()

        if next_stage is None:
            self._logger.info("Advance past terminal stage refused", stage=stage.ordinal)
            self._notifier.notify(
                Notification.error(
                    IntakeMessage.NO_FURTHER_STAGE_TITLE,
                    IntakeMessage.NO_FURTHER_STAGE_DESCRIPTION.format(stage=stage.label),
                )
            )
            return Failure(error=NoFurtherStageError.at(stage.ordinal))

        if not self.can_advance():
            return Failure(error=self._refuse_locked(stage))

        if stage is WizardStage.CONFIGURE:
            self._hand_off()

        self._stage = next_stage
        self._logger.info(
            "Wizard advanced",
            from_stage=stage.ordinal,
            to_stage=next_stage.ordinal,
        )
        self._notifier.notify(
            Notification.success(
                IntakeMessage.NEXT_STEP_TITLE,
                next_stage.progress_message,
            )
        )
        return Success(value=next_stage)

    def _refuse_locked(self, stage: WizardStage) -> StageLockedError:
        if stage is WizardStage.CONFIGURE:
            title = IntakeMessage.STAGE_LOCKED_TITLE
            description = IntakeMessage.STAGE_LOCKED_DESCRIPTION
            reason = "A supported statement file must be selected"
        else:
            title = IntakeMessage.STAGE_INCOMPLETE_TITLE
            description = IntakeMessage.STAGE_INCOMPLETE_DESCRIPTION.format(
                stage=stage.label
            )
            reason = f"Stage {stage.ordinal} is not complete"

        self._logger.info("Advance blocked", stage=stage.ordinal, reason=reason)
        self._notifier.notify(Notification.error(title, description))
        return StageLockedError.at(stage.ordinal, reason)

    def _hand_off(self) -> None:
        selected = self._intake.current_selection()
        # can_advance() guarantees a selection when leaving Configure
        assert selected is not None
        command = BeginFieldMapping(
            file=selected,
            encoding=self._encoding.current_encoding(),
        )
        self._field_mapping.begin_mapping(command)
        self._logger.info(
            "Statement handed off for field mapping",
            file_name=command.file_name,
            file_format=command.file_format,
            encoding=command.encoding.value,
        )
