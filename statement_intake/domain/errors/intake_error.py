"""Intake domain errors.

Every refusal of the intake workflow is returned as Failure(<error>) and is
never raised. Each error leaves prior state untouched and maps to exactly one
error notification, whose wording lives in IntakeMessage.

Usage:
    from statement_intake.core.result import Failure
    from statement_intake.domain.errors import UnsupportedFormatError

    return Failure(error=UnsupportedFormatError.for_file(candidate.name))
"""

from dataclasses import dataclass

from statement_intake.core.enums import ErrorCode
from statement_intake.core.errors import ConflictError, ValidationError
from statement_intake.domain.enums.statement_format import StatementFormat
from statement_intake.domain.value_objects.candidate_file import extension_of


class IntakeMessage:
    """User-facing notification wording.

    These are NOT exceptions. They are text constants shared by the
    components that emit notifications.
    """

    # -------------------------------------------------------------------------
    # File selection
    # -------------------------------------------------------------------------

    FILE_SELECTED_TITLE = "File selected"
    FILE_SELECTED_DESCRIPTION = "{file_name} is ready for import."

    INVALID_FILE_TYPE_TITLE = "Invalid file type"
    INVALID_FILE_TYPE_DESCRIPTION = "Please upload a supported bank statement file."

    # -------------------------------------------------------------------------
    # Wizard navigation
    # -------------------------------------------------------------------------

    NEXT_STEP_TITLE = "Moving to next step"

    STAGE_LOCKED_TITLE = "Select a file to continue"
    STAGE_LOCKED_DESCRIPTION = (
        "Choose a supported bank statement file before moving to the next step."
    )
    STAGE_INCOMPLETE_TITLE = "Step not complete"
    STAGE_INCOMPLETE_DESCRIPTION = "Finish {stage} before moving to the next step."

    NO_FURTHER_STAGE_TITLE = "No further steps"
    NO_FURTHER_STAGE_DESCRIPTION = "{stage} is the last step of the import."

    # -------------------------------------------------------------------------
    # Encoding
    # -------------------------------------------------------------------------

    INVALID_ENCODING_TITLE = "Invalid character encoding"
    INVALID_ENCODING_DESCRIPTION = "{value} is not a supported encoding."


@dataclass(frozen=True, slots=True, kw_only=True)
class UnsupportedFormatError(ValidationError):
    """File extension is not in the allow-list.

    Attributes:
        file_name: Rejected file name.
        extension: Normalized extension ("" when the name has none).
    """

    file_name: str
    extension: str

    @classmethod
    def for_file(cls, file_name: str) -> "UnsupportedFormatError":
        """Build the error for a rejected file name."""
        extension = extension_of(file_name)
        return cls(
            code=ErrorCode.UNSUPPORTED_FILE_FORMAT,
            message=(
                f"Unsupported file format: {extension or '(none)'}. "
                f"Supported: {', '.join(StatementFormat.extensions())}"
            ),
            field="file",
            file_name=file_name,
            extension=extension,
        )


@dataclass(frozen=True, slots=True, kw_only=True)
class InvalidEncodingError(ValidationError):
    """Encoding value is outside the configured domain.

    Attributes:
        value: Rejected value, as received.
    """

    value: str

    @classmethod
    def for_value(cls, value: object, allowed: list[str]) -> "InvalidEncodingError":
        """Build the error for a rejected encoding value."""
        return cls(
            code=ErrorCode.INVALID_ENCODING,
            message=f"Unsupported encoding: {value!r}. Supported: {', '.join(allowed)}",
            field="encoding",
            value=str(value),
        )


@dataclass(frozen=True, slots=True, kw_only=True)
class StageLockedError(ConflictError):
    """Advance attempted while the current stage's gate is closed.

    Attributes:
        stage: Ordinal of the stage that stays current.
    """

    stage: int

    @classmethod
    def at(cls, stage: int, reason: str) -> "StageLockedError":
        """Build the error for a blocked advance."""
        return cls(
            code=ErrorCode.STAGE_LOCKED,
            message=reason,
            resource_type="wizard_stage",
            stage=stage,
        )


@dataclass(frozen=True, slots=True, kw_only=True)
class NoFurtherStageError(ConflictError):
    """Advance attempted at the terminal stage.

    Attributes:
        stage: Ordinal of the terminal stage.
    """

    stage: int

    @classmethod
    def at(cls, stage: int) -> "NoFurtherStageError":
        """Build the error for an advance past the last stage."""
        return cls(
            code=ErrorCode.NO_FURTHER_STAGE,
            message=f"Stage {stage} is the last stage",
            resource_type="wizard_stage",
            stage=stage,
        )
