"""Intake controller: the canonical selected-file state.

Owns the single SelectedFile (or None) and the drag state of the drop zone.
Picker changes and drops both funnel into submit_candidate(), the only
validation path.

Flow (drop):
    1. end_drag() - the drag gesture is over whatever the drop carries
    2. Fileless drop → nothing else happens
    3. submit_candidate(first file)
        a. Extension not in allow-list → Failure, selection unchanged,
           error notification
        b. Otherwise selection replaced, success notification

Size ceilings are advisory. A file above its format's ceiling is accepted
and a warning is logged; the parse stage enforces the limit.
"""

from collections.abc import Sequence

from statement_intake.core.result import Failure, Result, Success
from statement_intake.domain.errors import IntakeMessage, UnsupportedFormatError
from statement_intake.domain.protocols.logger_protocol import LoggerProtocol
from statement_intake.domain.protocols.notifier_protocol import NotifierProtocol
from statement_intake.domain.value_objects.candidate_file import CandidateFile
from statement_intake.domain.value_objects.notification import Notification
from statement_intake.domain.value_objects.selected_file import SelectedFile


class IntakeController:
    """Selected-file and drag state for one import session.

    Dependencies (injected via constructor):
        - NotifierProtocol: For accept/reject toasts
        - LoggerProtocol: For structured logging
    """

    def __init__(self, notifier: NotifierProtocol, logger: LoggerProtocol) -> None:
        self._notifier = notifier
        self._logger = logger
        self._selected: SelectedFile | None = None
        self._dragging = False

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------

    def current_selection(self) -> SelectedFile | None:
        """Return the selected file, or None when nothing is selected."""
        return self._selected

    @property
    def has_selection(self) -> bool:
        """True when a valid file is selected."""
        return self._selected is not None

    @property
    def is_dragging(self) -> bool:
        """True while a drag is over the drop zone."""
        return self._dragging

    # -------------------------------------------------------------------------
    # Drag state
    # -------------------------------------------------------------------------

    def begin_drag(self) -> None:
        """Mark a drag as active. Repeated calls are idempotent."""
        self._dragging = True

    def end_drag(self) -> None:
        """Mark the drag as finished."""
        self._dragging = False

    # -------------------------------------------------------------------------
    # Ingestion
    # -------------------------------------------------------------------------

    def receive_picker_change(
        self, candidates: Sequence[CandidateFile]
    ) -> Result[SelectedFile, UnsupportedFormatError] | None:
        """Handle a file picker change.

        Args:
            candidates: Files delivered by the picker; only the first counts.

        Returns:
            Result of submit_candidate(), or None when the picker was
            cancelled (no files).
        """
        if not candidates:
            return None
        return self.submit_candidate(candidates[0])

    def receive_drop(
        self, candidates: Sequence[CandidateFile]
    ) -> Result[SelectedFile, UnsupportedFormatError] | None:
        """Handle a drop on the drop zone.

        The drag always ends, so the drag-active state never outlives the
        drop event.

        Args:
            candidates: Files attached to the drop; only the first counts.

        Returns:
            Result of submit_candidate(), or None for a drop without files.
        """
        self.end_drag()
        if not candidates:
            self._logger.debug("Drop without files ignored")
            return None
        return self.submit_candidate(candidates[0])

    def submit_candidate(
        self, candidate: CandidateFile
    ) -> Result[SelectedFile, UnsupportedFormatError]:
        """Validate a candidate and make it the selected file.

        Args:
            candidate: File from the picker or from a drop.

        Returns:
            Success(SelectedFile): Candidate accepted, previous selection
                discarded.
            Failure(UnsupportedFormatError): Extension not allowed, selection
                unchanged.
        """
        selected = SelectedFile.from_candidate(candidate)

        if selected is None:
            error = UnsupportedFormatError.for_file(candidate.name)
            self._logger.info(
                "Statement file rejected",
                file_name=candidate.name,
                extension=error.extension,
                kept_selection=self._selected.name if self._selected else None,
            )
            self._notifier.notify(
                Notification.error(
                    IntakeMessage.INVALID_FILE_TYPE_TITLE,
                    IntakeMessage.INVALID_FILE_TYPE_DESCRIPTION,
                )
            )
            return Failure(error=error)

        if selected.exceeds_size_ceiling:
            self._logger.warning(
                "Statement file exceeds advisory size ceiling",
                file_name=selected.name,
                size=selected.size,
                max_size=selected.format.max_size_bytes,
                file_format=selected.format.value,
            )

        replaced = self._selected
        self._selected = selected
        self._logger.info(
            "Statement file selected",
            file_name=selected.name,
            size=selected.size,
            file_format=selected.format.value,
            replaced=replaced.name if replaced else None,
        )
        self._notifier.notify(
            Notification.success(
                IntakeMessage.FILE_SELECTED_TITLE,
                IntakeMessage.FILE_SELECTED_DESCRIPTION.format(file_name=selected.name),
            )
        )
        return Success(value=selected)
