"""Generic error categories shared by all intake components.

Error Types:
- ValidationError: user input refused (file type, encoding value)
- ConflictError: request conflicts with current state (wizard stage)
"""

from dataclasses import dataclass

from statement_intake.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        field: Input that failed validation.
        details: Additional context.
    """

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class ConflictError(DomainError):
    """Request conflicts with the current state.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        resource_type: Kind of state in conflict.
        details: Additional context.
    """

    resource_type: str
