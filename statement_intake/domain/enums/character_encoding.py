"""Character encodings offered for the parse step.

The encoding is a declared hint handed downstream with the selected file.
It is never checked against the file content here.
"""

from enum import Enum


class CharacterEncoding(str, Enum):
    """Character encoding choice.

    Values match the identifiers used by the encoding picker
    ("utf8", "utf16").

    Examples:
        >>> CharacterEncoding.parse(" UTF16 ")
        <CharacterEncoding.UTF16: 'utf16'>
        >>> CharacterEncoding.UTF8.codec
        'utf-8'
    """

    UTF8 = "utf8"
    """UTF-8 (Unicode)."""

    UTF16 = "utf16"
    """UTF-16."""

    @property
    def label(self) -> str:
        """Label shown in the encoding picker."""
        return _LABELS[self]

    @property
    def codec(self) -> str:
        """Python codec name for decoding the statement."""
        return _CODECS[self]

    @classmethod
    def parse(cls, value: "str | CharacterEncoding") -> "CharacterEncoding | None":
        """Resolve a picker value to an encoding.

        Args:
            value: Encoding member, its picker value or its codec name
                ("utf8", "UTF-8", "utf-16"); case-insensitive.

        Returns:
            Matching encoding, or None when unknown.
        """
        if isinstance(value, CharacterEncoding):
            return value
        if not isinstance(value, str):
            return None
        normalized = value.strip().lower().replace("-", "").replace("_", "")
        for encoding in cls:
            if encoding.value == normalized:
                return encoding
        return None


_LABELS: dict[CharacterEncoding, str] = {
    CharacterEncoding.UTF8: "UTF-8 (Unicode)",
    CharacterEncoding.UTF16: "UTF-16",
}

_CODECS: dict[CharacterEncoding, str] = {
    CharacterEncoding.UTF8: "utf-8",
    CharacterEncoding.UTF16: "utf-16",
}
