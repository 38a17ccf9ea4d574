"""Tests for the font optimization service."""

import pytest

from font_optimizer.config import Settings
from font_optimizer.models import FontManifestEntry
from font_optimizer.services import font_optimization_service
from font_optimizer.services.font_manifest import save_font_manifest
from font_optimizer.services.font_optimization_service import (
    FontOptimizationService,
    get_font_optimization_service,
)
from font_optimizer.services.stylesheet_fetcher import StylesheetFetcher
from tests.stylesheet_server import GENERIC_URL, LEGACY_CSS, MODERN_CSS, PROVIDER_URL

ROBOTO_URL = "https://fonts.googleapis.com/css?family=Roboto"
ROBOTO_CSS = "@font-face { font-family: 'Roboto'; src: url(roboto.woff2); }"


@pytest.fixture
def make_service(settings, font_metrics, stylesheet_server):
    def _make(manifest=None, service_settings=None):
        service_settings = service_settings or settings
        return FontOptimizationService(
            settings=service_settings,
            font_metrics=font_metrics,
            font_manifest=manifest,
            fetcher=StylesheetFetcher(service_settings, stylesheet_server.client()),
        )

    return _make


class TestFontOptimizationService:
    """Test FontOptimizationService."""

    @pytest.mark.asyncio
    async def test_manifest_hit_skips_network(self, make_service, stylesheet_server):
        service = make_service([FontManifestEntry(url=ROBOTO_URL, content=ROBOTO_CSS)])

        result = await service.get_font_definition(ROBOTO_URL)

        assert result.text == ROBOTO_CSS
        assert stylesheet_server.requests == []

    @pytest.mark.asyncio
    async def test_manifest_miss_fetches(self, make_service, stylesheet_server):
        service = make_service([FontManifestEntry(url=ROBOTO_URL, content=ROBOTO_CSS)])

        result = await service.get_font_definition(PROVIDER_URL)

        assert result.text == LEGACY_CSS + MODERN_CSS
        assert len(stylesheet_server.requests) == 2

    def test_override_css_uses_settings(self, font_metrics, make_service):
        settings = Settings(_env_file=None, default_sans_serif_font="Helvetica")
        service = make_service(service_settings=settings)

        result = service.get_font_override_css(ROBOTO_URL, ROBOTO_CSS)

        assert 'src: local("Helvetica");' in result.text

    @pytest.mark.asyncio
    async def test_render_inline_style(self, make_service):
        service = make_service([FontManifestEntry(url=ROBOTO_URL, content=ROBOTO_CSS)])

        result = await service.render_inline_style(ROBOTO_URL)

        assert result.is_applied
        assert result.text.startswith(
            '<style data-href="https://fonts.googleapis.com/css?family=Roboto">'
            + ROBOTO_CSS
        )
        assert 'font-family: "roboto-fallback";' in result.text
        assert result.text.endswith("</style>")

    @pytest.mark.asyncio
    async def test_render_inline_style_escapes_url(self, make_service):
        url = "https://fonts.googleapis.com/css?family=Roboto&display=swap"
        service = make_service([FontManifestEntry(url=url, content=ROBOTO_CSS)])

        result = await service.render_inline_style(url)

        assert 'data-href="https://fonts.googleapis.com/css?family=Roboto&amp;display=swap"' in result.text

    @pytest.mark.asyncio
    async def test_render_inline_style_generic_url(self, make_service, stylesheet_server):
        """Generic stylesheets are inlined without fallbacks."""
        service = make_service()

        result = await service.render_inline_style(GENERIC_URL)

        assert result.text == f'<style data-href="{GENERIC_URL}">{MODERN_CSS}</style>'

    @pytest.mark.asyncio
    async def test_render_inline_style_unknown_font(self, make_service):
        """Override failures still inline the stylesheet itself."""
        css = "font-family: 'Comic Neue';"
        service = make_service([FontManifestEntry(url=ROBOTO_URL, content=css)])

        result = await service.render_inline_style(ROBOTO_URL)

        assert result.text == f'<style data-href="{ROBOTO_URL}">{css}</style>'

    @pytest.mark.asyncio
    async def test_render_inline_style_download_failure(
        self, make_service, stylesheet_server
    ):
        stylesheet_server.fail_for = lambda request: True
        service = make_service()

        result = await service.render_inline_style(PROVIDER_URL)

        assert not result.is_applied
        assert result.text == ""

    @pytest.mark.asyncio
    async def test_render_inline_style_disabled(self, make_service, stylesheet_server):
        settings = Settings(_env_file=None, optimize_fonts=False)
        service = make_service(service_settings=settings)

        result = await service.render_inline_style(PROVIDER_URL)

        assert not result.is_applied
        assert stylesheet_server.requests == []

    @pytest.mark.asyncio
    async def test_build_manifest(self, make_service):
        service = make_service()

        manifest = await service.build_manifest([GENERIC_URL])

        assert manifest == (FontManifestEntry(url=GENERIC_URL, content=MODERN_CSS),)

    def test_manifest_loaded_from_settings(self, tmp_path, font_metrics):
        path = tmp_path / "font-manifest.json"
        save_font_manifest([FontManifestEntry(url=ROBOTO_URL, content=ROBOTO_CSS)], path)
        settings = Settings(_env_file=None, font_manifest_path=path)

        service = FontOptimizationService(settings=settings, font_metrics=font_metrics)

        assert service.font_manifest == (
            FontManifestEntry(url=ROBOTO_URL, content=ROBOTO_CSS),
        )

    def test_bundled_metrics_by_default(self, settings):
        service = FontOptimizationService(settings=settings)
        assert "opensans" in service.font_metrics


def test_get_font_optimization_service_is_singleton(monkeypatch):
    monkeypatch.setattr(
        font_optimization_service, "_font_optimization_service_instance", None
    )

    service = get_font_optimization_service()

    assert get_font_optimization_service() is service
