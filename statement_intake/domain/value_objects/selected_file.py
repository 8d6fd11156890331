"""The file currently chosen for import."""

from dataclasses import dataclass, field

from statement_intake.domain.enums.statement_format import StatementFormat
from statement_intake.domain.value_objects.candidate_file import CandidateFile


@dataclass(frozen=True, kw_only=True)
class SelectedFile:
    """A candidate that passed the allow-list check.

    Only IntakeController creates instances, through from_candidate().
    The extension always belongs to the allow-list.

    Attributes:
        name: File name as supplied by the host.
        size: Size in bytes.
        extension: Lowercase extension with leading dot.
        format: Statement format matching the extension.
        media_type: MIME type reported by the host, if any.
        content: Raw bytes, when the host supplied them.
    """

    name: str
    size: int
    extension: str
    format: StatementFormat
    media_type: str | None = None
    content: bytes | None = field(default=None, repr=False)

    @classmethod
    def from_candidate(cls, candidate: CandidateFile) -> "SelectedFile | None":
        """Promote a candidate whose extension is allowed.

        Args:
            candidate: File offered by the host.

        Returns:
            SelectedFile, or None when the extension is not in the allow-list.
        """
        statement_format = StatementFormat.from_extension(candidate.extension)
        if statement_format is None:
            return None
        return cls(
            name=candidate.name,
            size=candidate.size,
            extension=statement_format.extension,
            format=statement_format,
            media_type=candidate.media_type,
            content=candidate.content,
        )

    @property
    def exceeds_size_ceiling(self) -> bool:
        """True when the file is larger than its format's advisory ceiling."""
        return self.size > self.format.max_size_bytes
