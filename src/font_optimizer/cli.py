"""Font Optimizer CLI.

Command-line interface for fetching font stylesheets, generating metric
override fallbacks and building font manifests.
"""

import asyncio
import sys
from pathlib import Path
from typing import Optional, Tuple

import click

from font_optimizer.config import get_settings
from font_optimizer.models import FontManifestEntry, OptimizationResult
from font_optimizer.services.font_manifest import (
    load_font_manifest,
    save_font_manifest,
)
from font_optimizer.services.font_optimization_service import FontOptimizationService
from font_optimizer.utils.logging import setup_logging


def _echo_result(result: OptimizationResult) -> None:
    """Print an applied result, or report the skip and exit non-zero."""
    if not result.is_applied:
        click.echo(f"Skipped: {result.reason}", err=True)
        sys.exit(1)
    click.echo(result.text)


@click.group()
def cli() -> None:
    """Font Optimizer tools."""
    setup_logging()


@cli.command()
@click.argument("url")
def fetch(url: str) -> None:
    """Download the stylesheet for URL."""

    async def _run() -> OptimizationResult:
        service = FontOptimizationService(font_manifest=())
        try:
            return await service.fetcher.fetch(url)
        finally:
            await service.close()

    _echo_result(asyncio.run(_run()))


@cli.command()
@click.argument("url")
@click.option(
    "--manifest",
    "-m",
    "manifest_path",
    help="Font manifest to read the stylesheet from",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
def overrides(url: str, manifest_path: Optional[Path]) -> None:
    """Print metric override fallbacks for the stylesheet at URL."""

    async def _run() -> OptimizationResult:
        manifest = load_font_manifest(manifest_path) if manifest_path else None
        service = FontOptimizationService(font_manifest=manifest)
        try:
            definition = await service.get_font_definition(url)
        finally:
            await service.close()

        if not definition.is_applied:
            return definition
        return service.get_font_override_css(url, definition.text)

    _echo_result(asyncio.run(_run()))


@cli.command("build-manifest")
@click.argument("urls", nargs=-1, required=True)
@click.option(
    "--output",
    "-o",
    help="Path of the font manifest to write",
    type=click.Path(dir_okay=False, path_type=Path),
)
def build_manifest(urls: Tuple[str, ...], output: Optional[Path]) -> None:
    """Fetch URLS and save them as a font manifest."""
    output = output or get_settings().font_manifest_path
    if output is None:
        raise click.UsageError("No --output given and no manifest path configured")

    async def _run() -> Tuple[FontManifestEntry, ...]:
        service = FontOptimizationService(font_manifest=())
        try:
            return await service.build_manifest(urls)
        finally:
            await service.close()

    manifest = asyncio.run(_run())
    save_font_manifest(manifest, output)
    click.echo(f"Fonts fetched: {len(manifest)} of {len(set(urls))}")
    click.echo(f"Manifest: {output}")


def main() -> None:
    """Entry point for the ``font-optimizer`` command."""
    cli()


if __name__ == "__main__":
    main()
