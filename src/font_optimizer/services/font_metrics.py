"""Font metrics table loading."""

import json
from importlib import resources
from pathlib import Path
from types import MappingProxyType
from typing import Optional, Union

from font_optimizer.core.constants import FONT_METRICS_FILENAME
from font_optimizer.core.exceptions import FontMetricsError
from font_optimizer.models import FontMetricsTable
from font_optimizer.utils.logging import get_logger

logger = get_logger(__name__)


def load_font_metrics(path: Optional[Union[str, Path]] = None) -> FontMetricsTable:
    """Load the font metrics table.

    Args:
        path: JSON file mapping normalized family names to metrics records.
            The table bundled with the package is used when omitted.

    Returns:
        Read-only mapping of normalized family name to record

    Raises:
        FontMetricsError: the file is unreadable or not a JSON object
    """
    try:
        if path is None:
            source = resources.files("font_optimizer") / "data" / FONT_METRICS_FILENAME
            raw = source.read_text(encoding="utf-8")
        else:
            raw = Path(path).read_text(encoding="utf-8")
        table = json.loads(raw)
    except OSError as e:
        raise FontMetricsError(f"Cannot read font metrics: {e}") from e
    except json.JSONDecodeError as e:
        raise FontMetricsError(f"Font metrics are not valid JSON: {e}") from e

    if not isinstance(table, dict):
        raise FontMetricsError("Font metrics must be a JSON object")

    logger.debug("Loaded font metrics", fonts=len(table))
    return MappingProxyType(table)
