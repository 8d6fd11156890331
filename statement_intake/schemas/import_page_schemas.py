"""View schemas for the import statement page.

Every view is derived from the intake state on demand and never stored or
mutated independently. The host renders these models as-is.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from statement_intake.domain.enums.statement_format import StatementFormat


class DropZoneState(str, Enum):
    """Visual state of the drop zone."""

    IDLE = "idle"
    DRAGGING = "dragging"
    SELECTED = "selected"


class StepView(BaseModel):
    """One entry of the stepper.

    Attributes:
        ordinal: 1-based stage number.
        label: Stage label.
        is_current: True for the current stage (highlighted).
        is_complete: True for stages already left.
    """

    model_config = ConfigDict(frozen=True)

    ordinal: int = Field(description="1-based stage number")
    label: str = Field(description="Stage label")
    is_current: bool = Field(description="Stage is the current one")
    is_complete: bool = Field(description="Stage has been left")


class StepperView(BaseModel):
    """Stepper across the top of the page."""

    model_config = ConfigDict(frozen=True)

    steps: list[StepView] = Field(description="Stages in order")

    @property
    def current(self) -> StepView:
        """The highlighted step."""
        return next(step for step in self.steps if step.is_current)


class DropZoneView(BaseModel):
    """Drop zone card with the picker button.

    Attributes:
        state: idle, dragging or selected.
        headline: Selected file name, or the drag-and-drop prompt.
        choose_button_label: "Change File" once a file is selected.
        accept: Value for the picker's accept attribute.
        import_history_hint: Last imported date, when known.
        size_limit_notice: Advisory size ceilings.
    """

    model_config = ConfigDict(frozen=True)

    state: DropZoneState = Field(description="Visual state")
    headline: str = Field(description="Selected file name or prompt")
    choose_button_label: str = Field(description="Picker button label")
    accept: str = Field(description="Picker accept attribute")
    import_history_hint: str | None = Field(
        default=None, description="Date statements were last imported till"
    )
    size_limit_notice: str = Field(description="Advisory size ceilings")


class EncodingOptionView(BaseModel):
    """One option of the encoding picker."""

    model_config = ConfigDict(frozen=True)

    value: str = Field(description="Picker value")
    label: str = Field(description="Picker label")


class EncodingFieldView(BaseModel):
    """Character encoding picker."""

    model_config = ConfigDict(frozen=True)

    label: str = Field(default="Character Encoding", description="Field label")
    options: list[EncodingOptionView] = Field(description="Options in order")
    selected: str = Field(description="Selected value")


class NextButtonView(BaseModel):
    """Next button at the bottom of the page."""

    model_config = ConfigDict(frozen=True)

    label: str = Field(default="Next", description="Button label")
    enabled: bool = Field(description="Advancing is currently allowed")


class ImportPageView(BaseModel):
    """Everything the host needs to render the import page."""

    title: str = Field(description="Page title")
    stepper: StepperView
    drop_zone: DropZoneView
    encoding: EncodingFieldView
    next_button: NextButtonView
    format_guidance: str = Field(description="Text above the sample link")
    sample_link_label: str = Field(description="Sample download link label")
    page_tips: list[str] = Field(description="Tips listed under the form")

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "title": "Import Statements for HDFC",
                "stepper": {
                    "steps": [
                        {"ordinal": 1, "label": "Configure", "is_current": True, "is_complete": False},
                        {"ordinal": 2, "label": "Map Fields", "is_current": False, "is_complete": False},
                        {"ordinal": 3, "label": "Preview", "is_current": False, "is_complete": False},
                    ]
                },
                "drop_zone": {
                    "state": "selected",
                    "headline": "statement.csv",
                    "choose_button_label": "Change File",
                    "accept": ".csv,.tsv,.xls,.xlsx,.ofx,.qif,.pdf",
                    "import_history_hint": "Bank statement imported till 28/01/2024",
                    "size_limit_notice": "Maximum File Size: 1 MB for CSV, TSV, XLS, OFX, QIF, CAMT.053 and CAMT.054 • 5 MB for PDF files.",
                },
                "encoding": {
                    "label": "Character Encoding",
                    "options": [
                        {"value": "utf8", "label": "UTF-8 (Unicode)"},
                        {"value": "utf16", "label": "UTF-16"},
                    ],
                    "selected": "utf8",
                },
                "next_button": {"label": "Next", "enabled": True},
                "format_guidance": "Ensure that the import file is in the correct format by comparing it with our sample file.",
                "sample_link_label": "Download sample file",
                "page_tips": [
                    "If you have files in other formats, you can convert it to an accepted file format using any online/offline converter."
                ],
            }
        },
    )


class FileFormatInfo(BaseModel):
    """Information about a supported file format.

    Attributes:
        format: Format identifier.
        name: Human-readable format name.
        extensions: File extensions for this format.
        max_size_bytes: Advisory size ceiling.
    """

    format: str = Field(description="Format identifier")
    name: str = Field(description="Human-readable format name")
    extensions: list[str] = Field(description="File extensions")
    max_size_bytes: int = Field(description="Advisory size ceiling in bytes")

    @classmethod
    def from_format(cls, statement_format: StatementFormat) -> "FileFormatInfo":
        """Create info from a StatementFormat member."""
        return cls(
            format=statement_format.value,
            name=statement_format.display_name,
            extensions=[statement_format.extension],
            max_size_bytes=statement_format.max_size_bytes,
        )


class SupportedFormatsView(BaseModel):
    """Supported file formats, in allow-list order."""

    formats: list[FileFormatInfo] = Field(description="List of supported formats")

    @classmethod
    def build(cls) -> "SupportedFormatsView":
        """List every supported statement format."""
        return cls(formats=[FileFormatInfo.from_format(fmt) for fmt in StatementFormat])
