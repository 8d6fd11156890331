"""Domain value objects.

Usage:
    from statement_intake.domain.value_objects import CandidateFile, SelectedFile
"""

from statement_intake.domain.value_objects.candidate_file import (
    CandidateFile,
    extension_of,
)
from statement_intake.domain.value_objects.notification import Notification
from statement_intake.domain.value_objects.selected_file import SelectedFile

__all__ = [
    "CandidateFile",
    "Notification",
    "SelectedFile",
    "extension_of",
]
