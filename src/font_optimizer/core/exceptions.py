"""Core Exceptions Module.

This module defines custom exceptions used throughout Font Optimizer.
"""

from typing import Optional


class FontOptimizerError(Exception):
    """Base exception for all Font Optimizer errors."""

    def __init__(self, message: str, code: Optional[str] = None):
        """Initialize exception.

        Args:
            message: Error message
            code: Optional error code
        """
        super().__init__(message)
        self.code = code


class FontMetricsError(FontOptimizerError):
    """Raised when font metrics cannot be loaded or used."""


class FontMetricsNotFoundError(FontMetricsError):
    """Raised when a font family has no entry in the metrics table."""

    def __init__(self, font_family: str, font_key: str):
        """Initialize FontMetricsNotFoundError."""
        super().__init__(
            f"No font metrics found for {font_family!r} (key {font_key!r})",
            "FONT_METRICS_NOT_FOUND",
        )
        self.font_family = font_family
        self.font_key = font_key


class InvalidFontMetricsError(FontMetricsError):
    """Raised when a metrics record does not have the expected shape."""

    def __init__(self, font_key: str, reason: str):
        """Initialize InvalidFontMetricsError."""
        super().__init__(
            f"Invalid font metrics for {font_key!r}: {reason}",
            "INVALID_FONT_METRICS",
        )
        self.font_key = font_key


class FontManifestError(FontOptimizerError):
    """Raised when a font manifest file cannot be read or written."""

    def __init__(self, message: str = "Font manifest operation failed"):
        """Initialize FontManifestError."""
        super().__init__(message, "FONT_MANIFEST_ERROR")


class StylesheetFetchError(FontOptimizerError):
    """Raised when downloading a font stylesheet fails."""

    def __init__(self, url: str, user_agent: str):
        """Initialize StylesheetFetchError."""
        super().__init__(
            f"Failed to download {url} as {user_agent!r}", "STYLESHEET_FETCH_ERROR"
        )
        self.url = url
        self.user_agent = user_agent
