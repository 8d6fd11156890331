"""Commands handed to collaborators outside the intake core."""

from statement_intake.application.commands.import_commands import BeginFieldMapping

__all__ = ["BeginFieldMapping"]
