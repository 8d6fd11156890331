"""Derived views for the import statement page.

Pure functions of the three state containers plus settings. Nothing here
mutates state; the page calls build_page_view() after every event.
"""

from datetime import date

from statement_intake.application.services.encoding_selector import EncodingSelector
from statement_intake.application.services.intake_controller import IntakeController
from statement_intake.application.services.wizard_navigator import WizardNavigator
from statement_intake.domain.enums.statement_format import StatementFormat
from statement_intake.schemas.import_page_schemas import (
    DropZoneState,
    DropZoneView,
    EncodingFieldView,
    EncodingOptionView,
    ImportPageView,
    NextButtonView,
    StepperView,
    StepView,
)

DROP_PROMPT = "Drag and drop file to import"
CHOOSE_FILE_LABEL = "Choose File"
CHANGE_FILE_LABEL = "Change File"
SIZE_LIMIT_NOTICE = (
    "Maximum File Size: 1 MB for CSV, TSV, XLS, OFX, QIF, CAMT.053 and CAMT.054"
    " • 5 MB for PDF files."
)
FORMAT_GUIDANCE = (
    "Ensure that the import file is in the correct format by comparing it with"
    " our sample file."
)
SAMPLE_LINK_LABEL = "Download sample file"
PAGE_TIPS = [
    "If you have files in other formats, you can convert it to an accepted file"
    " format using any online/offline converter.",
]


def accept_attribute() -> str:
    """Picker accept attribute built from the allow-list."""
    return ",".join(StatementFormat.extensions())


def build_stepper_view(navigator: WizardNavigator) -> StepperView:
    """Highlight the current stage; earlier stages are complete."""
    current = navigator.current_stage()
    return StepperView(
        steps=[
            StepView(
                ordinal=stage.ordinal,
                label=stage.label,
                is_current=stage is current,
                is_complete=stage.ordinal < current.ordinal,
            )
            for stage in navigator.stages()
        ]
    )


def build_drop_zone_view(
    intake: IntakeController, last_imported_on: date | None = None
) -> DropZoneView:
    """Drop zone state, headline and picker button label.

    A selected file wins over an active drag, matching the card styling
    where the selected border overrides the dragging border.
    """
    selected = intake.current_selection()
    if selected is not None:
        state = DropZoneState.SELECTED
    elif intake.is_dragging:
        state = DropZoneState.DRAGGING
    else:
        state = DropZoneState.IDLE

    hint = None
    if last_imported_on is not None:
        hint = f"Bank statement imported till {last_imported_on:%d/%m/%Y}"

    return DropZoneView(
        state=state,
        headline=selected.name if selected else DROP_PROMPT,
        choose_button_label=CHANGE_FILE_LABEL if selected else CHOOSE_FILE_LABEL,
        accept=accept_attribute(),
        import_history_hint=hint,
        size_limit_notice=SIZE_LIMIT_NOTICE,
    )


def build_encoding_view(selector: EncodingSelector) -> EncodingFieldView:
    """Encoding options and the current choice."""
    return EncodingFieldView(
        options=[
            EncodingOptionView(value=option.value, label=option.label)
            for option in selector.options()
        ],
        selected=selector.current_encoding().value,
    )


def build_page_view(
    *,
    bank_name: str,
    intake: IntakeController,
    navigator: WizardNavigator,
    selector: EncodingSelector,
    last_imported_on: date | None = None,
) -> ImportPageView:
    """Assemble the full page view."""
    return ImportPageView(
        title=f"Import Statements for {bank_name}",
        stepper=build_stepper_view(navigator),
        drop_zone=build_drop_zone_view(intake, last_imported_on),
        encoding=build_encoding_view(selector),
        next_button=NextButtonView(enabled=navigator.can_advance()),
        format_guidance=FORMAT_GUIDANCE,
        sample_link_label=SAMPLE_LINK_LABEL,
        page_tips=list(PAGE_TIPS),
    )
