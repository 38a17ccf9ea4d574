"""Font metric override generation.

Fallback ``@font-face`` rules point at a locally installed font and scale its
ascent, descent and line gap to match the web font, so text keeps its layout
box when the web font swaps in.
"""

import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Dict, List

from pydantic import ValidationError

from font_optimizer.core.constants import (
    DEFAULT_SANS_SERIF_FONT,
    DEFAULT_SERIF_FONT,
    GOOGLE_FONT_PROVIDER,
    SERIF_CATEGORY,
)
from font_optimizer.core.exceptions import (
    FontMetricsError,
    FontMetricsNotFoundError,
    InvalidFontMetricsError,
)
from font_optimizer.models import (
    FontMetricsRecord,
    FontMetricsTable,
    OptimizationResult,
    OverrideValues,
)
from font_optimizer.services.stylesheet_fetcher import is_provider_url
from font_optimizer.utils.logging import get_logger

logger = get_logger(__name__)

FONT_FAMILY_PATTERN = re.compile(r"font-family: ([^;]*)")
# One quote layer at either end only
SURROUNDING_QUOTE_PATTERN = re.compile(r"\A['\"]|['\"]\Z")

FALLBACK_FONT_FACE_TEMPLATE = """
@font-face {{
  font-family: "{font_name}-fallback";
  ascent-override: {ascent}%;
  descent-override: {descent}%;
  line-gap-override: {line_gap}%;
  src: local("{fallback_font}");
}}
"""

_HUNDREDTH = Decimal("0.01")


def parse_font_family_names(css: str) -> List[str]:
    """Collect the distinct ``font-family`` values of a stylesheet in order."""
    font_names: Dict[str, None] = {}
    for match in FONT_FAMILY_PATTERN.finditer(css):
        font_family = SURROUNDING_QUOTE_PATTERN.sub("", match.group(1))
        font_names.setdefault(font_family, None)
    return list(font_names)


def get_font_key(font: str) -> str:
    """Normalize a family name into a metrics table key."""
    return font.lower().strip().replace(" ", "")


def get_fallback_font_name(font: str) -> str:
    """Build the CSS family name of the fallback face for ``font``."""
    return font.lower().strip().replace(" ", "-")


def format_percentage(ratio: float, font_key: str = "") -> str:
    """Scale a ratio to a percentage with two decimals, ties away from zero.

    Raises:
        InvalidFontMetricsError: the percentage is not representable
    """
    try:
        value = Decimal(ratio * 100).quantize(_HUNDREDTH, rounding=ROUND_HALF_UP)
    except InvalidOperation as e:
        raise InvalidFontMetricsError(font_key, f"ratio {ratio!r} out of range") from e
    return format(value, "f")


def calculate_override_values(
    font: str,
    font_metrics: FontMetricsTable,
    serif_font: str = DEFAULT_SERIF_FONT,
    sans_serif_font: str = DEFAULT_SANS_SERIF_FONT,
) -> OverrideValues:
    """Compute override percentages and the fallback font for a family.

    Raises:
        FontMetricsNotFoundError: the family is not in the metrics table
        InvalidFontMetricsError: the family's record is malformed
    """
    font_key = get_font_key(font)
    if font_key not in font_metrics:
        raise FontMetricsNotFoundError(font, font_key)

    try:
        record = FontMetricsRecord.model_validate(font_metrics[font_key])
    except ValidationError as e:
        raise InvalidFontMetricsError(font_key, str(e)) from e

    fallback_font = serif_font if record.category == SERIF_CATEGORY else sans_serif_font

    return OverrideValues(
        ascent=format_percentage(record.ascent_override, font_key),
        descent=format_percentage(record.descent_override, font_key),
        line_gap=format_percentage(record.line_gap_override, font_key),
        fallback_font=fallback_font,
    )


def calculate_override_css(
    font: str,
    font_metrics: FontMetricsTable,
    serif_font: str = DEFAULT_SERIF_FONT,
    sans_serif_font: str = DEFAULT_SANS_SERIF_FONT,
) -> str:
    """Render the fallback ``@font-face`` rule for one family."""
    values = calculate_override_values(font, font_metrics, serif_font, sans_serif_font)
    return FALLBACK_FONT_FACE_TEMPLATE.format(
        font_name=get_fallback_font_name(font),
        ascent=values.ascent,
        descent=values.descent,
        line_gap=values.line_gap,
        fallback_font=values.fallback_font,
    )


def get_font_override_css(
    url: str,
    css: str,
    font_metrics: FontMetricsTable,
    provider_prefix: str = GOOGLE_FONT_PROVIDER,
    serif_font: str = DEFAULT_SERIF_FONT,
    sans_serif_font: str = DEFAULT_SANS_SERIF_FONT,
) -> OptimizationResult:
    """Generate fallback rules for every family in a provider stylesheet.

    Only provider stylesheets are handled, since the metrics table is keyed
    by the provider's family names. A single family without usable metrics
    skips the whole stylesheet rather than emitting partial rules.
    """
    if not is_provider_url(url, provider_prefix):
        return OptimizationResult.skipped("not a font provider stylesheet")

    try:
        font_css = "".join(
            calculate_override_css(font, font_metrics, serif_font, sans_serif_font)
            for font in parse_font_family_names(css)
        )
    except FontMetricsError as e:
        logger.error("Error getting font override values - %s", e, url=url)
        return OptimizationResult.skipped(str(e))

    return OptimizationResult.applied(font_css)
