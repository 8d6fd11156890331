"""Dependency container (composition root).

Usage:
    from statement_intake.core.container import (
        create_import_statement_page,
        get_logger,
    )
"""

from statement_intake.core.container.infrastructure import (
    get_logger,
    get_notifier,
    get_settings,
)
from statement_intake.core.container.pages import create_import_statement_page

__all__ = [
    "create_import_statement_page",
    "get_logger",
    "get_notifier",
    "get_settings",
]
