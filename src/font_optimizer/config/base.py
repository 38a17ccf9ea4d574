"""Base configuration settings."""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from font_optimizer.core.constants import (
    CHROME_USER_AGENT,
    DEFAULT_SANS_SERIF_FONT,
    DEFAULT_SERIF_FONT,
    GOOGLE_FONT_PROVIDER,
    IE_USER_AGENT,
)


class Settings(BaseSettings):
    """Application settings.

    Values are read from ``FONT_OPTIMIZER_*`` environment variables or a
    ``.env`` file in the working directory.
    """

    model_config = SettingsConfigDict(
        env_prefix="FONT_OPTIMIZER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    log_level: str = "INFO"
    log_format: str = "console"

    # Optimization
    optimize_fonts: bool = True
    google_font_provider: str = GOOGLE_FONT_PROVIDER
    default_serif_font: str = DEFAULT_SERIF_FONT
    default_sans_serif_font: str = DEFAULT_SANS_SERIF_FONT

    # Network
    legacy_user_agent: str = IE_USER_AGENT
    modern_user_agent: str = CHROME_USER_AGENT
    http_timeout: float = Field(
        default=30.0, gt=0, description="Transport timeout in seconds"
    )

    # Data files
    font_metrics_path: Optional[Path] = Field(
        default=None, description="Metrics table JSON, bundled table when unset"
    )
    font_manifest_path: Optional[Path] = Field(
        default=None, description="Prebuilt stylesheet manifest JSON"
    )

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """Validate the log renderer name."""
        v = v.lower()
        if v not in ("console", "json"):
            raise ValueError("log_format must be 'console' or 'json'")
        return v

    @field_validator("legacy_user_agent", "modern_user_agent")
    @classmethod
    def validate_user_agent(cls, v: str) -> str:
        """Validate that a user agent can be sent as a header value."""
        if not v.isascii():
            raise ValueError("user agent must be ASCII")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate the log level name."""
        v = v.upper()
        if v not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {v}")
        return v
