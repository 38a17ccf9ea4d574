"""Font Optimization Service.

Resolves font stylesheets, from a prebuilt manifest when one is loaded or
from the network otherwise, and produces the inline styles a page pipeline
injects in place of the stylesheet link.
"""

import html
from typing import Iterable, Optional, Tuple

from font_optimizer.config import Settings, get_settings
from font_optimizer.models import (
    FontManifest,
    FontManifestEntry,
    FontMetricsTable,
    OptimizationResult,
)
from font_optimizer.services.font_manifest import (
    build_font_manifest,
    get_font_definition_from_manifest,
    load_font_manifest,
)
from font_optimizer.services.font_metrics import load_font_metrics
from font_optimizer.services.font_override import get_font_override_css
from font_optimizer.services.stylesheet_fetcher import StylesheetFetcher
from font_optimizer.utils.logging import get_logger

logger = get_logger(__name__)


class FontOptimizationService:
    """Inline font stylesheets together with metric override fallbacks."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        font_metrics: Optional[FontMetricsTable] = None,
        font_manifest: Optional[FontManifest] = None,
        fetcher: Optional[StylesheetFetcher] = None,
    ):
        """Initialize the service.

        Args:
            settings: Application settings
            font_metrics: Metrics table; loaded from settings when omitted
            font_manifest: Prebuilt manifest; loaded from settings when
                omitted and a manifest path is configured
            fetcher: Stylesheet fetcher for manifest misses
        """
        self.settings = settings or get_settings()

        if font_metrics is None:
            font_metrics = load_font_metrics(self.settings.font_metrics_path)
        self.font_metrics = font_metrics

        if font_manifest is None and self.settings.font_manifest_path is not None:
            font_manifest = load_font_manifest(self.settings.font_manifest_path)
        self.font_manifest: Tuple[Optional[FontManifestEntry], ...] = tuple(
            font_manifest or ()
        )

        self.fetcher = fetcher or StylesheetFetcher(self.settings)

    async def close(self) -> None:
        """Release network resources."""
        await self.fetcher.close()

    async def get_font_definition(self, url: str) -> OptimizationResult:
        """Get the stylesheet text for ``url``."""
        if self.font_manifest:
            result = get_font_definition_from_manifest(url, self.font_manifest)
            if result.is_applied:
                return result
            logger.debug("Font manifest miss, fetching stylesheet", url=url)

        return await self.fetcher.fetch(url)

    def get_font_override_css(self, url: str, css: str) -> OptimizationResult:
        """Generate fallback rules for a stylesheet fetched from ``url``."""
        return get_font_override_css(
            url,
            css,
            self.font_metrics,
            provider_prefix=self.settings.google_font_provider,
            serif_font=self.settings.default_serif_font,
            sans_serif_font=self.settings.default_sans_serif_font,
        )

    async def render_inline_style(self, url: str) -> OptimizationResult:
        """Render a ``<style>`` element replacing the stylesheet link.

        Skipped when optimization is disabled or the stylesheet is
        unavailable; the page then keeps loading the stylesheet itself.
        """
        if not self.settings.optimize_fonts:
            return OptimizationResult.skipped("font optimization disabled")

        definition = await self.get_font_definition(url)
        if not definition.is_applied:
            return definition

        overrides = self.get_font_override_css(url, definition.text)
        return OptimizationResult.applied(
            f'<style data-href="{html.escape(url)}">'
            f"{definition.text}{overrides.text}</style>"
        )

    async def build_manifest(
        self, urls: Iterable[str]
    ) -> Tuple[FontManifestEntry, ...]:
        """Fetch ``urls`` into a new font manifest."""
        return await build_font_manifest(urls, self.fetcher)


# Module-level singleton instance
_font_optimization_service_instance: Optional[FontOptimizationService] = None


def get_font_optimization_service() -> FontOptimizationService:
    """Get the singleton FontOptimizationService instance."""
    global _font_optimization_service_instance
    if _font_optimization_service_instance is None:
        _font_optimization_service_instance = FontOptimizationService()
    return _font_optimization_service_instance
