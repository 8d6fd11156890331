"""Candidate file offered by the host.

A candidate is the normalized form of whatever the host delivered, from the
file picker or from a drop. Both origins produce the same value, so the
intake controller has one validation path.
"""

from dataclasses import dataclass, field


def extension_of(file_name: str) -> str:
    """Extract the lowercase trailing extension of a file name.

    The extension is everything from the last "." to the end of the name.

    Args:
        file_name: Name as supplied by the host.

    Returns:
        Lowercase extension with leading dot, or "" when the name has no ".".

    Example:
        >>> extension_of("Statement.Jan.CSV")
        '.csv'
        >>> extension_of("README")
        ''
    """
    index = file_name.rfind(".")
    if index == -1:
        return ""
    return file_name[index:].lower()


@dataclass(frozen=True, kw_only=True)
class CandidateFile:
    """File submitted for validation, regardless of origin.

    Attributes:
        name: File name including extension.
        size: Size in bytes as reported by the host.
        media_type: MIME type reported by the host, if any.
        content: Raw bytes when the host has already read the file.
    """

    name: str
    size: int = 0
    media_type: str | None = None
    content: bytes | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        """Reject sizes no host can report."""
        if self.size < 0:
            raise ValueError(f"File size cannot be negative: {self.size}")

    @classmethod
    def from_bytes(
        cls, name: str, content: bytes, media_type: str | None = None
    ) -> "CandidateFile":
        """Build a candidate whose size is taken from its content.

        Args:
            name: File name.
            content: File bytes.
            media_type: Optional MIME type.

        Returns:
            CandidateFile with size == len(content).
        """
        return cls(name=name, size=len(content), media_type=media_type, content=content)

    @property
    def extension(self) -> str:
        """Lowercase trailing extension, "" when absent."""
        return extension_of(self.name)
