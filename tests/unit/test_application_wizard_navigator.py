"""Unit tests for WizardNavigator.

Tests cover:
- Configure gate (requires a selected file)
- Hand-off payload on leaving Configure
- External gate for Map Fields
- Terminal stage refusal
"""

from unittest.mock import MagicMock

import pytest

from statement_intake.application.commands.import_commands import BeginFieldMapping
from statement_intake.application.services.encoding_selector import EncodingSelector
from statement_intake.application.services.intake_controller import IntakeController
from statement_intake.application.services.wizard_navigator import WizardNavigator
from statement_intake.core.enums import ErrorCode
from statement_intake.core.result import Failure, Success
from statement_intake.domain.enums.character_encoding import CharacterEncoding
from statement_intake.domain.enums.notification_kind import NotificationKind
from statement_intake.domain.enums.wizard_stage import WizardStage
from statement_intake.domain.errors import NoFurtherStageError, StageLockedError
from statement_intake.infrastructure.notifications.in_memory_notifier import (
    InMemoryNotifier,
)
from tests.conftest import make_candidate


def _handed_off(field_mapping: MagicMock) -> BeginFieldMapping:
    field_mapping.begin_mapping.assert_called_once()
    return field_mapping.begin_mapping.call_args.args[0]


# =============================================================================
# Configure gate
# =============================================================================


@pytest.mark.unit
class TestConfigureGate:
    """Tests for advancing out of Configure."""

    def test_starts_at_configure(self, navigator: WizardNavigator):
        """Stage 1 is initial."""
        assert navigator.current_stage() is WizardStage.CONFIGURE
        assert navigator.current_stage().label == "Configure"

    def test_cannot_advance_without_selection(self, navigator: WizardNavigator):
        """Gate is closed while nothing is selected."""
        assert navigator.can_advance() is False

    def test_advance_without_selection_is_locked(
        self,
        navigator: WizardNavigator,
        field_mapping: MagicMock,
        notifier: InMemoryNotifier,
    ):
        """No file → StageLockedError, stage stays 1, nothing handed off."""
        result = navigator.advance()

        assert isinstance(result, Failure)
        assert isinstance(result.error, StageLockedError)
        assert result.error.code == ErrorCode.STAGE_LOCKED
        assert result.error.stage == 1
        assert navigator.current_stage() is WizardStage.CONFIGURE
        field_mapping.begin_mapping.assert_not_called()
        assert notifier.last is not None
        assert notifier.last.kind is NotificationKind.ERROR

    @pytest.mark.parametrize("encoding", list(CharacterEncoding))
    def test_locked_for_every_encoding(
        self,
        navigator: WizardNavigator,
        selector: EncodingSelector,
        encoding: CharacterEncoding,
    ):
        """The encoding choice never opens the Configure gate."""
        selector.set_encoding(encoding)

        result = navigator.advance()

        assert isinstance(result, Failure)
        assert isinstance(result.error, StageLockedError)
        assert navigator.current_stage() is WizardStage.CONFIGURE

    def test_rejected_file_keeps_gate_closed(
        self, navigator: WizardNavigator, intake: IntakeController
    ):
        """A rejected candidate does not count as a selection."""
        intake.submit_candidate(make_candidate("statement.docx"))

        assert navigator.can_advance() is False


# =============================================================================
# Hand-off
# =============================================================================


@pytest.mark.unit
class TestHandOff:
    """Tests for the payload handed to Map Fields."""

    def test_advance_with_selection_moves_to_map_fields(
        self,
        navigator: WizardNavigator,
        intake: IntakeController,
        notifier: InMemoryNotifier,
    ):
        """x.csv selected → stage 2 and a "Moving to next step" toast."""
        intake.submit_candidate(make_candidate("x.csv"))

        result = navigator.advance()

        assert isinstance(result, Success)
        assert result.value is WizardStage.MAP_FIELDS
        assert navigator.current_stage() is WizardStage.MAP_FIELDS
        toast = notifier.last
        assert toast is not None
        assert toast.kind is NotificationKind.SUCCESS
        assert toast.title == "Moving to next step"
        assert toast.description == "Mapping fields..."

    def test_payload_carries_file_and_default_encoding(
        self,
        navigator: WizardNavigator,
        intake: IntakeController,
        field_mapping: MagicMock,
    ):
        """Hand-off payload = (x.csv, UTF-8)."""
        intake.submit_candidate(make_candidate("x.csv"))

        navigator.advance()

        command = _handed_off(field_mapping)
        assert command.file == intake.current_selection()
        assert command.file_name == "x.csv"
        assert command.file_format == "csv"
        assert command.encoding is CharacterEncoding.UTF8

    def test_payload_carries_chosen_encoding(
        self,
        navigator: WizardNavigator,
        intake: IntakeController,
        selector: EncodingSelector,
        field_mapping: MagicMock,
    ):
        """utf16 chosen before advancing travels with the payload."""
        selector.set_encoding("utf16")
        intake.submit_candidate(make_candidate("x.csv"))

        navigator.advance()

        assert _handed_off(field_mapping).encoding is CharacterEncoding.UTF16

    def test_payload_is_a_snapshot(
        self,
        navigator: WizardNavigator,
        intake: IntakeController,
        field_mapping: MagicMock,
    ):
        """Later selections do not change an already handed-off payload."""
        intake.submit_candidate(make_candidate("x.csv"))
        navigator.advance()
        command = _handed_off(field_mapping)

        intake.submit_candidate(make_candidate("y.ofx"))

        assert command.file.name == "x.csv"

    def test_map_fields_exit_does_not_hand_off_again(
        self,
        navigator: WizardNavigator,
        intake: IntakeController,
        field_mapping: MagicMock,
    ):
        """Only the Configure exit hands off."""
        intake.submit_candidate(make_candidate("x.csv"))
        navigator.advance()
        navigator.advance()

        assert navigator.current_stage() is WizardStage.PREVIEW
        assert field_mapping.begin_mapping.call_count == 1


# =============================================================================
# Later stages
# =============================================================================


@pytest.mark.unit
class TestLaterStages:
    """Tests for the external gate and the terminal stage."""

    def _navigator_at_map_fields(
        self,
        intake: IntakeController,
        selector: EncodingSelector,
        notifier: InMemoryNotifier,
        logger: MagicMock,
        gate: MagicMock | None,
    ) -> WizardNavigator:
        navigator = WizardNavigator(
            intake=intake,
            encoding=selector,
            field_mapping=MagicMock(),
            notifier=notifier,
            logger=logger,
            stage_gate=gate,
        )
        intake.submit_candidate(make_candidate("x.csv"))
        navigator.advance()
        return navigator

    def test_closed_external_gate_locks_map_fields(
        self,
        intake: IntakeController,
        selector: EncodingSelector,
        notifier: InMemoryNotifier,
        logger: MagicMock,
    ):
        """Map Fields stays current while its gate reports incomplete."""
        gate = MagicMock()
        gate.is_complete.return_value = False
        navigator = self._navigator_at_map_fields(
            intake, selector, notifier, logger, gate
        )

        result = navigator.advance()

        assert isinstance(result, Failure)
        assert isinstance(result.error, StageLockedError)
        assert result.error.stage == 2
        assert navigator.current_stage() is WizardStage.MAP_FIELDS
        gate.is_complete.assert_called_with(WizardStage.MAP_FIELDS)
        assert notifier.last is not None
        assert notifier.last.title == "Step not complete"

    def test_open_external_gate_reaches_preview(
        self,
        intake: IntakeController,
        selector: EncodingSelector,
        notifier: InMemoryNotifier,
        logger: MagicMock,
    ):
        """Map Fields → Preview once the gate reports complete."""
        gate = MagicMock()
        gate.is_complete.return_value = True
        navigator = self._navigator_at_map_fields(
            intake, selector, notifier, logger, gate
        )

        result = navigator.advance()

        assert isinstance(result, Success)
        assert result.value is WizardStage.PREVIEW
        assert notifier.last is not None
        assert notifier.last.description == "Preparing preview..."

    def test_advance_at_preview_fails_with_no_further_stage(
        self,
        navigator: WizardNavigator,
        intake: IntakeController,
        notifier: InMemoryNotifier,
    ):
        """Preview is terminal."""
        intake.submit_candidate(make_candidate("x.csv"))
        navigator.advance()
        navigator.advance()

        result = navigator.advance()

        assert isinstance(result, Failure)
        assert isinstance(result.error, NoFurtherStageError)
        assert result.error.code == ErrorCode.NO_FURTHER_STAGE
        assert navigator.current_stage() is WizardStage.PREVIEW
        assert navigator.can_advance() is False
        assert notifier.last is not None
        assert notifier.last.title == "No further steps"
