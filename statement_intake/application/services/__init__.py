"""Stateful application services owning the intake state."""

from statement_intake.application.services.encoding_selector import EncodingSelector
from statement_intake.application.services.intake_controller import IntakeController
from statement_intake.application.services.wizard_navigator import WizardNavigator

__all__ = ["EncodingSelector", "IntakeController", "WizardNavigator"]
