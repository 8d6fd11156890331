"""Host-facing pages."""

from statement_intake.presentation.pages.import_statement_page import (
    ImportStatementPage,
)

__all__ = ["ImportStatementPage"]
