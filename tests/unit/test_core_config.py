"""Unit tests for Settings.

Settings are built with explicit values or monkeypatched environment
variables; no .env file is read.
"""

from datetime import date

import pytest
from pydantic import ValidationError

from statement_intake.core.config import Settings, get_settings
from statement_intake.core.enums import Environment
from statement_intake.domain.enums.character_encoding import CharacterEncoding


@pytest.mark.unit
class TestSettingsDefaults:
    """Tests for default values."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch):
        """Defaults describe the HDFC import page."""
        for name in ("ENVIRONMENT", "BANK_NAME", "SUPPORTED_ENCODINGS", "LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings()

        assert settings.environment == Environment.DEVELOPMENT
        assert settings.bank_name == "HDFC"
        assert settings.back_navigation_target == "banking"
        assert settings.last_imported_on is None
        assert settings.supported_encodings == [
            CharacterEncoding.UTF8,
            CharacterEncoding.UTF16,
        ]
        assert settings.default_encoding is CharacterEncoding.UTF8
        assert settings.is_development is True


@pytest.mark.unit
class TestSettingsFromEnvironment:
    """Tests for environment parsing."""

    def test_supported_encodings_from_comma_separated_env(
        self, monkeypatch: pytest.MonkeyPatch
    ):
        """Comma-separated list, order kept, duplicates dropped."""
        monkeypatch.setenv("SUPPORTED_ENCODINGS", "UTF16, utf8, utf16")

        settings = Settings()

        assert settings.supported_encodings == [
            CharacterEncoding.UTF16,
            CharacterEncoding.UTF8,
        ]
        assert settings.default_encoding is CharacterEncoding.UTF16

    def test_supported_encodings_accept_codec_names(
        self, monkeypatch: pytest.MonkeyPatch
    ):
        """Hyphenated codec names collapse onto the same members."""
        monkeypatch.setenv("SUPPORTED_ENCODINGS", "UTF-16,utf-8,utf16")

        settings = Settings()

        assert settings.supported_encodings == [
            CharacterEncoding.UTF16,
            CharacterEncoding.UTF8,
        ]

    def test_unknown_encoding_is_rejected(self, monkeypatch: pytest.MonkeyPatch):
        """Only enumerated encodings are configurable."""
        monkeypatch.setenv("SUPPORTED_ENCODINGS", "utf8,latin1")

        with pytest.raises(ValidationError):
            Settings()

    def test_empty_encodings_are_rejected(self, monkeypatch: pytest.MonkeyPatch):
        """The encoding choice can never be unset."""
        monkeypatch.setenv("SUPPORTED_ENCODINGS", " , ")

        with pytest.raises(ValidationError):
            Settings()

    def test_last_imported_on_and_environment(self, monkeypatch: pytest.MonkeyPatch):
        """ISO dates and environment names parse."""
        monkeypatch.setenv("LAST_IMPORTED_ON", "2024-01-28")
        monkeypatch.setenv("ENVIRONMENT", "testing")

        settings = Settings()

        assert settings.last_imported_on == date(2024, 1, 28)
        assert settings.is_testing is True

    def test_log_level_is_normalized(self):
        """Lowercase level names are accepted."""
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_unknown_log_level_is_rejected(self):
        """Non-standard level names fail."""
        with pytest.raises(ValidationError):
            Settings(log_level="chatty")


@pytest.mark.unit
def test_get_settings_is_cached():
    """Same instance per process."""
    get_settings.cache_clear()

    assert get_settings() is get_settings()
