"""Domain enums package."""

from statement_intake.domain.enums.character_encoding import CharacterEncoding
from statement_intake.domain.enums.notification_kind import NotificationKind
from statement_intake.domain.enums.statement_format import StatementFormat
from statement_intake.domain.enums.wizard_stage import WizardStage

__all__ = [
    "CharacterEncoding",
    "NotificationKind",
    "StatementFormat",
    "WizardStage",
]
