"""Configuration module for Font Optimizer."""

from font_optimizer.config.base import Settings
from font_optimizer.config.loader import get_settings

__all__ = ["Settings", "get_settings"]
