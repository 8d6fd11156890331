"""Machine-readable error codes.

Codes follow the ENTITY_REASON naming convention and travel inside
DomainError instances returned through Result types.
"""

from enum import Enum


class ErrorCode(Enum):
    """Machine-readable error codes for intake failures."""

    # Validation errors
    UNSUPPORTED_FILE_FORMAT = "unsupported_file_format"
    INVALID_ENCODING = "invalid_encoding"

    # Wizard state errors
    STAGE_LOCKED = "stage_locked"
    NO_FURTHER_STAGE = "no_further_stage"
