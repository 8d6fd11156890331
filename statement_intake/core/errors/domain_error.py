"""Base error class for Result-based error handling.

DomainError is the base for every refusal the intake workflow can produce.
Errors flow through the system as data (inside Failure), not as exceptions.

Architecture:
- Does NOT inherit from Exception (returned, never raised)
- Dataclass inheritance, frozen and slotted
- Type-safe with Result[T, DomainError]

Usage:
    @dataclass(frozen=True, slots=True, kw_only=True)
    class MyError(DomainError):
        pass  # Inherits code, message, details
"""

from dataclasses import dataclass

from statement_intake.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Base domain error (does NOT inherit from Exception).

    Attributes:
        code: Machine-readable error code (enum).
        message: Human-readable error message.
        details: Optional context for debugging.
    """

    code: ErrorCode
    message: str
    details: dict[str, str] | None = None

    def __str__(self) -> str:
        """String representation of error."""
        return f"{self.code.value}: {self.message}"
