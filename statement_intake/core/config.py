"""
Configuration management using Pydantic Settings.

Type-safe, validated configuration loaded from environment variables
(prefix-free, case-insensitive).

Architecture:
- Flat Settings structure (no nesting)
- All config loaded from environment variables
- Type validation via Pydantic

Usage:
    from statement_intake.core.config import get_settings

    settings = get_settings()
    settings.bank_name
    settings.supported_encodings
"""

from datetime import date
from functools import lru_cache
from typing import Annotated, Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from statement_intake.core.enums import Environment
from statement_intake.domain.enums.character_encoding import CharacterEncoding


class Settings(BaseSettings):
    """
    Statement intake settings (flat structure).

    Configuration precedence:
        1. Environment variables
        2. Default values
    """

    # Environment detection
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Application environment (development, testing, ci, production)",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug logging",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    # Application metadata
    app_name: str = Field(
        default="Statement Intake",
        description="Application name",
    )
    app_version: str = Field(
        default="0.1.0",
        description="Application version",
    )

    # Import page
    bank_name: str = Field(
        default="HDFC",
        description="Bank whose statements are imported (shown in the page title)",
    )
    back_navigation_target: str = Field(
        default="banking",
        description="Page identifier the back arrow navigates to",
    )
    last_imported_on: date | None = Field(
        default=None,
        description="Date up to which statements were already imported, if known",
    )
    supported_encodings: Annotated[list[CharacterEncoding], NoDecode] = Field(
        default_factory=lambda: list(CharacterEncoding),
        description="Encodings offered in the picker (comma-separated); the first is the default",
    )

    model_config = SettingsConfigDict(
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Validate and normalize the log level name.

        Args:
            v: Level name, any case.

        Returns:
            str: Uppercase level name.

        Raises:
            ValueError: If the level is not a standard logging level.
        """
        normalized = v.strip().upper()
        if normalized not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Invalid log_level: {v}")
        return normalized

    @field_validator("supported_encodings", mode="before")
    @classmethod
    def parse_supported_encodings(cls, v: Any) -> Any:
        """
        Parse comma-separated encodings and drop duplicates.

        Args:
            v: Comma-separated string or a sequence of values.

        Returns:
            list: Encoding values in first-seen order.

        Raises:
            ValueError: If no encoding is given.
        """
        if isinstance(v, str):
            v = [item.strip() for item in v.split(",") if item.strip()]
        v = [CharacterEncoding.parse(item) or item for item in v]
        values: list[Any] = []
        for item in v:
            if item not in values:
                values.append(item)
        if not values:
            raise ValueError("supported_encodings must list at least one encoding")
        return values

    # Convenience properties for environment checks
    @property
    def is_development(self) -> bool:
        """
        Check if running in development environment.

        Returns:
            bool: True if environment is DEVELOPMENT, False otherwise.
        """
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_testing(self) -> bool:
        """
        Check if running in testing environment.

        Returns:
            bool: True if environment is TESTING, False otherwise.
        """
        return self.environment == Environment.TESTING

    @property
    def default_encoding(self) -> CharacterEncoding:
        """First configured encoding, preselected in the picker."""
        return self.supported_encodings[0]


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()
