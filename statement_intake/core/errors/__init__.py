"""Core errors package.

Usage:
    from statement_intake.core.errors import DomainError, ValidationError
"""

from statement_intake.core.errors.common_errors import ConflictError, ValidationError
from statement_intake.core.errors.domain_error import DomainError

__all__ = [
    "DomainError",
    "ValidationError",
    "ConflictError",
]
