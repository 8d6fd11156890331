"""Page factories.

Request-scoped: every call creates a fresh import session. Collaborators
that only the host can provide (router, mapping stage, picker control,
sample download) are passed in; settings, logger and notifier fall back to
the application singletons.
"""

from typing import TYPE_CHECKING

from statement_intake.core.container.infrastructure import (
    get_logger,
    get_notifier,
    get_settings,
)

if TYPE_CHECKING:
    from statement_intake.core.config import Settings
    from statement_intake.domain.protocols import (
        FieldMappingProtocol,
        FileInputProtocol,
        LoggerProtocol,
        NavigationProtocol,
        NotifierProtocol,
        SampleFileProtocol,
        StageGateProtocol,
    )
    from statement_intake.presentation.pages.import_statement_page import (
        ImportStatementPage,
    )


def create_import_statement_page(
    *,
    navigation: "NavigationProtocol",
    field_mapping: "FieldMappingProtocol",
    sample_file: "SampleFileProtocol",
    file_input: "FileInputProtocol",
    stage_gate: "StageGateProtocol | None" = None,
    notifier: "NotifierProtocol | None" = None,
    logger: "LoggerProtocol | None" = None,
    settings: "Settings | None" = None,
) -> "ImportStatementPage":
    """Create a new import statement page session.

    Returns:
        ImportStatementPage wired with the given collaborators.

    Usage:
        page = create_import_statement_page(
            navigation=router,
            field_mapping=mapping_stage,
            sample_file=sample_downloads,
            file_input=picker,
        )
        page.on_drop([CandidateFile(name="statement.csv", size=2048)])
        view = page.render()
    """
    from statement_intake.presentation.pages.import_statement_page import (
        ImportStatementPage,
    )

    return ImportStatementPage(
        settings=settings or get_settings(),
        notifier=notifier or get_notifier(),
        logger=logger or get_logger(),
        navigation=navigation,
        field_mapping=field_mapping,
        sample_file=sample_file,
        file_input=file_input,
        stage_gate=stage_gate,
    )
