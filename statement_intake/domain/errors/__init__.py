"""Domain errors package.

Usage:
    from statement_intake.domain.errors import UnsupportedFormatError
"""

from statement_intake.domain.errors.intake_error import (
    IntakeMessage,
    InvalidEncodingError,
    NoFurtherStageError,
    StageLockedError,
    UnsupportedFormatError,
)

__all__ = [
    "IntakeMessage",
    "InvalidEncodingError",
    "NoFurtherStageError",
    "StageLockedError",
    "UnsupportedFormatError",
]
