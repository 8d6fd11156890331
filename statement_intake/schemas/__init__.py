"""Pydantic view schemas."""

from statement_intake.schemas.import_page_schemas import (
    DropZoneState,
    DropZoneView,
    EncodingFieldView,
    EncodingOptionView,
    FileFormatInfo,
    ImportPageView,
    NextButtonView,
    StepperView,
    StepView,
    SupportedFormatsView,
)

__all__ = [
    "DropZoneState",
    "DropZoneView",
    "EncodingFieldView",
    "EncodingOptionView",
    "FileFormatInfo",
    "ImportPageView",
    "NextButtonView",
    "StepperView",
    "StepView",
    "SupportedFormatsView",
]
