"""Font stylesheet and metric override models."""

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field

FontMetricsTable = Mapping[str, Mapping[str, Any]]


class FontManifestEntry(BaseModel):
    """A stylesheet URL and the CSS fetched for it at build time."""

    model_config = ConfigDict(frozen=True)

    url: str
    content: str


FontManifest = Sequence[Optional[FontManifestEntry]]


class FontMetricsRecord(BaseModel):
    """Metrics table row for a single font family.

    Ratios are relative to the font's units per em.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", allow_inf_nan=False)

    category: str
    ascent_override: float = Field(alias="ascentOverride")
    descent_override: float = Field(alias="descentOverride")
    line_gap_override: float = Field(alias="lineGapOverride")


@dataclass(frozen=True)
class OverrideValues:
    """Percentages (two decimals) and fallback font for one family."""

    ascent: str
    descent: str
    line_gap: str
    fallback_font: str


@dataclass(frozen=True)
class OptimizationResult:
    """Outcome of a fail-soft optimization step.

    An applied result always carries text, which may legitimately be empty
    (a stylesheet without any font families). A skipped result carries the
    reason optimization was not possible instead.
    """

    content: Optional[str] = None
    reason: Optional[str] = None

    @classmethod
    def applied(cls, content: str) -> "OptimizationResult":
        """Create a result carrying generated or fetched CSS."""
        return cls(content=content)

    @classmethod
    def skipped(cls, reason: str) -> "OptimizationResult":
        """Create a result for an optimization that did not happen."""
        return cls(reason=reason)

    @property
    def is_applied(self) -> bool:
        """Whether the step produced text."""
        return self.content is not None

    @property
    def text(self) -> str:
        """CSS text, empty when skipped."""
        return self.content if self.content is not None else ""

    def __bool__(self) -> bool:
        """Truthy when applied."""
        return self.is_applied
