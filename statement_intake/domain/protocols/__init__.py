"""Domain protocols (ports) for collaborators outside the intake core.

Implementations satisfy these structurally (PEP 544); nothing inherits from
them.
"""

from statement_intake.domain.protocols.field_mapping_protocol import (
    FieldMappingProtocol,
)
from statement_intake.domain.protocols.file_input_protocol import FileInputProtocol
from statement_intake.domain.protocols.logger_protocol import LoggerProtocol
from statement_intake.domain.protocols.navigation_protocol import NavigationProtocol
from statement_intake.domain.protocols.notifier_protocol import NotifierProtocol
from statement_intake.domain.protocols.sample_file_protocol import SampleFileProtocol
from statement_intake.domain.protocols.stage_gate_protocol import StageGateProtocol

__all__ = [
    "FieldMappingProtocol",
    "FileInputProtocol",
    "LoggerProtocol",
    "NavigationProtocol",
    "NotifierProtocol",
    "SampleFileProtocol",
    "StageGateProtocol",
]
