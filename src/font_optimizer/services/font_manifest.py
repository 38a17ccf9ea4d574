"""Font manifest lookup, persistence and building.

A font manifest records the stylesheet text fetched for each font URL during
a build, so rendering can inline stylesheets without network access.
"""

import asyncio
import json
from pathlib import Path
from typing import Iterable, List, Tuple, Union

from pydantic import TypeAdapter, ValidationError

from font_optimizer.core.exceptions import FontManifestError
from font_optimizer.models import FontManifest, FontManifestEntry, OptimizationResult
from font_optimizer.services.stylesheet_fetcher import StylesheetFetcher
from font_optimizer.utils.logging import get_logger

logger = get_logger(__name__)

_manifest_adapter = TypeAdapter(List[FontManifestEntry])


def get_font_definition_from_manifest(
    url: str, manifest: FontManifest
) -> OptimizationResult:
    """Return the stylesheet stored for ``url``; first matching entry wins."""
    for entry in manifest:
        if entry is not None and entry.url == url:
            return OptimizationResult.applied(entry.content)
    return OptimizationResult.skipped("not in font manifest")


def load_font_manifest(path: Union[str, Path]) -> Tuple[FontManifestEntry, ...]:
    """Load a font manifest JSON file.

    Raises:
        FontManifestError: the file is unreadable or not a list of entries
    """
    try:
        raw = Path(path).read_bytes()
        entries = _manifest_adapter.validate_json(raw)
    except OSError as e:
        raise FontManifestError(f"Cannot read font manifest {path}: {e}") from e
    except ValidationError as e:
        raise FontManifestError(f"Invalid font manifest {path}: {e}") from e

    logger.debug("Loaded font manifest", path=str(path), entries=len(entries))
    return tuple(entries)


def save_font_manifest(manifest: FontManifest, path: Union[str, Path]) -> None:
    """Write a font manifest as a JSON array."""
    data = [entry.model_dump() for entry in manifest if entry is not None]
    try:
        Path(path).write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError as e:
        raise FontManifestError(f"Cannot write font manifest {path}: {e}") from e


async def build_font_manifest(
    urls: Iterable[str], fetcher: StylesheetFetcher
) -> Tuple[FontManifestEntry, ...]:
    """Fetch every stylesheet URL and collect the successful downloads.

    URLs are fetched concurrently; each URL's own requests keep their order.
    Failed downloads are left out of the manifest.
    """
    unique_urls = list(dict.fromkeys(urls))
    results = await asyncio.gather(*(fetcher.fetch(url) for url in unique_urls))

    entries = tuple(
        FontManifestEntry(url=url, content=result.text)
        for url, result in zip(unique_urls, results)
        if result.is_applied
    )
    logger.info(
        "Built font manifest",
        requested=len(unique_urls),
        fetched=len(entries),
    )
    return entries
