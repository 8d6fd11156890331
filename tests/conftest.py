"""Pytest configuration and shared fixtures.

Collaborators outside the intake core (router, mapping stage, picker
control, sample download) are MagicMocks; notifications are recorded with
InMemoryNotifier so tests can assert on exact toasts.
"""

from unittest.mock import MagicMock

import pytest

from statement_intake.application.services.encoding_selector import EncodingSelector
from statement_intake.application.services.intake_controller import IntakeController
from statement_intake.application.services.wizard_navigator import WizardNavigator
from statement_intake.core.config import Settings
from statement_intake.core.enums import Environment
from statement_intake.domain.value_objects.candidate_file import CandidateFile
from statement_intake.infrastructure.notifications.in_memory_notifier import (
    InMemoryNotifier,
)
from statement_intake.presentation.pages.import_statement_page import (
    ImportStatementPage,
)


def make_candidate(name: str, size: int = 2048) -> CandidateFile:
    """Helper to create a CandidateFile for testing.

    Args:
        name: File name including extension.
        size: Size in bytes (default: 2 KB, below every ceiling).

    Returns:
        CandidateFile instance for testing.
    """
    return CandidateFile(name=name, size=size)


@pytest.fixture
def notifier() -> InMemoryNotifier:
    """Notifier recording every toast."""
    return InMemoryNotifier()


@pytest.fixture
def logger() -> MagicMock:
    """Logger mock; bind() returns the same mock."""
    mock_logger = MagicMock()
    mock_logger.bind.return_value = mock_logger
    return mock_logger


@pytest.fixture
def field_mapping() -> MagicMock:
    """Map Fields collaborator mock."""
    return MagicMock()


@pytest.fixture
def intake(notifier: InMemoryNotifier, logger: MagicMock) -> IntakeController:
    """Fresh intake controller."""
    return IntakeController(notifier=notifier, logger=logger)


@pytest.fixture
def selector(notifier: InMemoryNotifier, logger: MagicMock) -> EncodingSelector:
    """Encoding selector over the default domain."""
    return EncodingSelector(notifier=notifier, logger=logger)


@pytest.fixture
def navigator(
    intake: IntakeController,
    selector: EncodingSelector,
    field_mapping: MagicMock,
    notifier: InMemoryNotifier,
    logger: MagicMock,
) -> WizardNavigator:
    """Navigator without an external stage gate."""
    return WizardNavigator(
        intake=intake,
        encoding=selector,
        field_mapping=field_mapping,
        notifier=notifier,
        logger=logger,
    )


@pytest.fixture
def settings() -> Settings:
    """Settings for tests (no environment lookups needed)."""
    return Settings(environment=Environment.TESTING)


@pytest.fixture
def page(
    settings: Settings,
    notifier: InMemoryNotifier,
    logger: MagicMock,
    field_mapping: MagicMock,
) -> ImportStatementPage:
    """Import page with mocked host collaborators."""
    return ImportStatementPage(
        settings=settings,
        notifier=notifier,
        logger=logger,
        navigation=MagicMock(),
        field_mapping=field_mapping,
        sample_file=MagicMock(),
        file_input=MagicMock(),
    )


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
