"""Core enums package.

Usage:
    from statement_intake.core.enums import ErrorCode, Environment
"""

from statement_intake.core.enums.environment import Environment
from statement_intake.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode", "Environment"]
