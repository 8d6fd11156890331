"""Supported bank statement file formats.

The extensions of all members together form the import allow-list:
.csv, .tsv, .xls, .xlsx, .ofx, .qif, .pdf. Matching is case-insensitive.

Size ceilings are advisory. They are shown to the user and passed along
with the selection, but enforcement belongs to the parse stage.
"""

from enum import Enum

_MEGABYTE = 1024 * 1024


class StatementFormat(str, Enum):
    """Bank statement file format.

    Examples:
        >>> StatementFormat.from_extension(".OFX")
        <StatementFormat.OFX: 'ofx'>
        >>> StatementFormat.from_extension(".docx") is None
        True
    """

    CSV = "csv"
    """Comma-separated values export."""

    TSV = "tsv"
    """Tab-separated values export."""

    XLS = "xls"
    """Legacy Excel workbook."""

    XLSX = "xlsx"
    """Excel workbook (Office Open XML)."""

    OFX = "ofx"
    """Open Financial Exchange."""

    QIF = "qif"
    """Quicken Interchange Format."""

    PDF = "pdf"
    """PDF statement (scanned or generated)."""

    @property
    def extension(self) -> str:
        """Lowercase extension including the leading dot."""
        return f".{self.value}"

    @property
    def display_name(self) -> str:
        """Human-readable format name."""
        return _DISPLAY_NAMES[self]

    @property
    def max_size_bytes(self) -> int:
        """Advisory size ceiling in bytes (1 MB, or 5 MB for PDF)."""
        if self is StatementFormat.PDF:
            return 5 * _MEGABYTE
        return _MEGABYTE

    @classmethod
    def extensions(cls) -> list[str]:
        """Get the allow-list of extensions in declaration order.

        Returns:
            List of lowercase extensions with leading dot.
        """
        return [fmt.extension for fmt in cls]

    @classmethod
    def from_extension(cls, extension: str) -> "StatementFormat | None":
        """Look up a format by extension.

        Args:
            extension: Extension with leading dot, any case.

        Returns:
            Matching format, or None when the extension is not allowed.
        """
        normalized = extension.lower()
        for fmt in cls:
            if fmt.extension == normalized:
                return fmt
        return None


_DISPLAY_NAMES: dict[StatementFormat, str] = {
    StatementFormat.CSV: "Comma-Separated Values",
    StatementFormat.TSV: "Tab-Separated Values",
    StatementFormat.XLS: "Microsoft Excel 97-2003",
    StatementFormat.XLSX: "Microsoft Excel",
    StatementFormat.OFX: "Open Financial Exchange",
    StatementFormat.QIF: "Quicken Interchange Format",
    StatementFormat.PDF: "Portable Document Format",
}
