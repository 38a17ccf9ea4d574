"""Data models for Font Optimizer."""

from font_optimizer.models.font import (
    FontManifest,
    FontManifestEntry,
    FontMetricsRecord,
    FontMetricsTable,
    OptimizationResult,
    OverrideValues,
)

__all__ = [
    "FontManifest",
    "FontManifestEntry",
    "FontMetricsRecord",
    "FontMetricsTable",
    "OptimizationResult",
    "OverrideValues",
]
