"""Result types for railway-oriented programming.

Intake operations that can be refused by the user-facing rules (unsupported
file type, locked stage, unknown encoding) return a Result instead of raising,
so the caller decides how to surface the refusal.

Usage:
    def pick(name: str) -> Result[SelectedFile, DomainError]:
        if not name.endswith(".csv"):
            return Failure(error=UnsupportedFormatError(...))
        return Success(value=SelectedFile(...))

    match pick("statement.csv"):
        case Success(value=selected):
            print(selected.name)
        case Failure(error=error):
            print(error.message)
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


# Type alias for Result union
type Result[T, E] = Success[T] | Failure[E]
