"""Unit tests for CandidateFile and SelectedFile value objects."""

import pytest

from statement_intake.domain.enums.statement_format import StatementFormat
from statement_intake.domain.value_objects import (
    CandidateFile,
    SelectedFile,
    extension_of,
)


@pytest.mark.unit
class TestExtensionOf:
    """Tests for extension extraction."""

    @pytest.mark.parametrize(
        ("file_name", "expected"),
        [
            ("statement.csv", ".csv"),
            ("Statement.Jan.PDF", ".pdf"),
            ("statement.", "."),
            (".qif", ".qif"),
            ("statement", ""),
            ("", ""),
        ],
    )
    def test_extension_is_text_after_last_dot(self, file_name: str, expected: str):
        """Everything from the last "." on, lower-cased."""
        assert extension_of(file_name) == expected


@pytest.mark.unit
class TestCandidateFile:
    """Tests for CandidateFile."""

    def test_from_bytes_takes_size_from_content(self):
        """Size equals content length."""
        candidate = CandidateFile.from_bytes("a.csv", b"date,amount\n")

        assert candidate.size == 12
        assert candidate.content == b"date,amount\n"

    def test_negative_size_is_rejected(self):
        """Hosts never report negative sizes."""
        with pytest.raises(ValueError, match="negative"):
            CandidateFile(name="a.csv", size=-1)

    def test_content_is_not_in_repr(self):
        """File bytes stay out of log output."""
        candidate = CandidateFile.from_bytes("a.csv", b"secret-account-number")

        assert "secret-account-number" not in repr(candidate)


@pytest.mark.unit
class TestSelectedFile:
    """Tests for promotion from candidate."""

    def test_promotes_allowed_candidate(self):
        """Allowed extension becomes a SelectedFile."""
        candidate = CandidateFile(name="Q1.OFX", size=300, media_type="application/x-ofx")

        selected = SelectedFile.from_candidate(candidate)

        assert selected is not None
        assert selected.extension == ".ofx"
        assert selected.format is StatementFormat.OFX
        assert selected.media_type == "application/x-ofx"

    def test_refuses_other_candidates(self):
        """Disallowed extension yields None."""
        assert SelectedFile.from_candidate(CandidateFile(name="a.docx")) is None

    def test_size_exactly_at_ceiling_is_within(self):
        """The ceiling itself is allowed."""
        selected = SelectedFile.from_candidate(
            CandidateFile(name="a.csv", size=1024 * 1024)
        )

        assert selected is not None
        assert selected.exceeds_size_ceiling is False
