"""Import statement page.

Receives host UI events and dispatches each to the component that owns the
affected state. Every event runs to completion before the next one is
delivered; render() derives the current view afterwards.

Events:
    on_file_input_change  - picker delivered files
    on_choose_file_click  - open the picker
    on_drag_enter / over  - drag entered the drop zone
    on_drag_leave         - drag left the drop zone
    on_drop               - files dropped on the drop zone
    on_encoding_change    - encoding picker changed
    on_next_click         - advance the wizard
    on_back_click         - leave the page
    on_download_sample_click - request the sample file

Reads:
    render()              - current page view
    supported_formats()   - accepted formats for the host's help text
"""

from collections.abc import Sequence
from uuid import UUID

from uuid_extensions import uuid7

from statement_intake.application.services.encoding_selector import EncodingSelector
from statement_intake.application.services.intake_controller import IntakeController
from statement_intake.application.services.wizard_navigator import WizardNavigator
from statement_intake.core.config import Settings
from statement_intake.core.errors import DomainError
from statement_intake.core.result import Result
from statement_intake.domain.enums.character_encoding import CharacterEncoding
from statement_intake.domain.enums.wizard_stage import WizardStage
from statement_intake.domain.protocols.field_mapping_protocol import (
    FieldMappingProtocol,
)
from statement_intake.domain.protocols.file_input_protocol import FileInputProtocol
from statement_intake.domain.protocols.logger_protocol import LoggerProtocol
from statement_intake.domain.protocols.navigation_protocol import NavigationProtocol
from statement_intake.domain.protocols.notifier_protocol import NotifierProtocol
from statement_intake.domain.protocols.sample_file_protocol import SampleFileProtocol
from statement_intake.domain.protocols.stage_gate_protocol import StageGateProtocol
from statement_intake.domain.value_objects.candidate_file import CandidateFile
from statement_intake.domain.value_objects.selected_file import SelectedFile
from statement_intake.presentation.pages.import_statement_view import build_page_view
from statement_intake.schemas.import_page_schemas import (
    ImportPageView,
    SupportedFormatsView,
)


class ImportStatementPage:
    """One import session: the three state containers and their events.

    Dependencies (injected via constructor):
        - Settings: Bank name, back target, encodings, import history
        - NotifierProtocol: Toasts
        - LoggerProtocol: Structured logging, bound to the session id
        - NavigationProtocol: Back arrow
        - FieldMappingProtocol: Map Fields hand-off
        - SampleFileProtocol: Sample download link
        - FileInputProtocol: Hidden picker control
        - StageGateProtocol (optional): Gate past Configure
    """

    def __init__(
        self,
        *,
        settings: Settings,
        notifier: NotifierProtocol,
        logger: LoggerProtocol,
        navigation: NavigationProtocol,
        field_mapping: FieldMappingProtocol,
        sample_file: SampleFileProtocol,
        file_input: FileInputProtocol,
        stage_gate: StageGateProtocol | None = None,
        session_id: UUID | None = None,
    ) -> None:
        self.session_id = session_id or uuid7()
        self._settings = settings
        self._navigation = navigation
        self._sample_file = sample_file
        self._file_input = file_input
        self._logger = logger.bind(import_session_id=str(self.session_id))

        self.intake = IntakeController(notifier=notifier, logger=self._logger)
        self.encoding = EncodingSelector(
            notifier=notifier,
            logger=self._logger,
            domain=settings.supported_encodings,
        )
        self.navigator = WizardNavigator(
            intake=self.intake,
            encoding=self.encoding,
            field_mapping=field_mapping,
            notifier=notifier,
            logger=self._logger,
            stage_gate=stage_gate,
        )
        self._logger.info("Import session started", bank_name=settings.bank_name)

    # -------------------------------------------------------------------------
    # File selection
    # -------------------------------------------------------------------------

    def on_choose_file_click(self) -> None:
        """Open the file picker."""
        self._file_input.open()

    def on_file_input_change(
        self, files: Sequence[CandidateFile]
    ) -> Result[SelectedFile, DomainError] | None:
        """Submit the picked file, then clear the picker.

        Returns:
            Result of the submission, or None when the picker was cancelled.
        """
        try:
            return self.intake.receive_picker_change(files)
        finally:
            self._file_input.reset()

    def on_drag_enter(self) -> None:
        """Drag entered the drop zone."""
        self.intake.begin_drag()

    def on_drag_over(self) -> None:
        """Drag moved over the drop zone."""
        self.intake.begin_drag()

    def on_drag_leave(self) -> None:
        """Drag left the drop zone."""
        self.intake.end_drag()

    def on_drop(
        self, files: Sequence[CandidateFile]
    ) -> Result[SelectedFile, DomainError] | None:
        """Submit the dropped file.

        Returns:
            Result of the submission, or None for a drop without files.
        """
        return self.intake.receive_drop(files)

    # -------------------------------------------------------------------------
    # Configuration and navigation
    # -------------------------------------------------------------------------

    def on_encoding_change(
        self, value: str | CharacterEncoding
    ) -> Result[CharacterEncoding, DomainError]:
        """Apply the encoding picker's value."""
        return self.encoding.set_encoding(value)

    def on_next_click(self) -> Result[WizardStage, DomainError]:
        """Advance the wizard."""
        return self.navigator.advance()

    def on_back_click(self) -> None:
        """Leave the import page for the configured target."""
        target = self._settings.back_navigation_target
        self._logger.info("Import page left", target=target)
        self._navigation.navigate(target)

    def on_download_sample_click(self) -> None:
        """Request the sample import file."""
        self._logger.debug("Sample file requested")
        self._sample_file.request_sample()

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def render(self) -> ImportPageView:
        """Derive the page view from the current state."""
        return build_page_view(
            bank_name=self._settings.bank_name,
            intake=self.intake,
            navigator=self.navigator,
            selector=self.encoding,
            last_imported_on=self._settings.last_imported_on,
        )

    def supported_formats(self) -> SupportedFormatsView:
        """Formats the drop zone accepts, with their advisory size ceilings."""
        return SupportedFormatsView.build()
