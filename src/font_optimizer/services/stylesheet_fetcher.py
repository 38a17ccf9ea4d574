"""Font stylesheet downloader.

The font provider tailors its stylesheet to the requesting browser: legacy
clients get woff/ttf sources while modern ones get woff2. Provider
stylesheets are therefore requested twice, legacy first, and the bodies are
concatenated so the modern formats come later in the cascade and win.
"""

from types import TracebackType
from typing import List, Optional, Tuple, Type

import httpx

from font_optimizer.config import Settings, get_settings
from font_optimizer.core.constants import GOOGLE_FONT_PROVIDER
from font_optimizer.core.exceptions import StylesheetFetchError
from font_optimizer.models import OptimizationResult
from font_optimizer.utils.logging import get_logger

logger = get_logger(__name__)


def is_provider_url(url: str, provider_prefix: str = GOOGLE_FONT_PROVIDER) -> bool:
    """Check whether a stylesheet URL is served by the font provider."""
    return url.startswith(provider_prefix)


class StylesheetFetcher:
    """Async downloader for font stylesheets."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        """Initialize the fetcher.

        Args:
            settings: Application settings, defaults to the cached settings
            client: HTTP client to use; one is created lazily when omitted
                and closed together with the fetcher
        """
        self.settings = settings or get_settings()
        self._client = client
        self._owns_client = client is None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.settings.http_timeout),
            )
        return self._client

    async def close(self) -> None:
        """Close HTTP client if it was created by this fetcher."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "StylesheetFetcher":
        """Enter the fetcher context."""
        return self

    async def __aexit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        """Close the fetcher on context exit."""
        await self.close()

    def user_agents_for(self, url: str) -> Tuple[str, ...]:
        """Return the client signatures to request ``url`` with, in order."""
        if is_provider_url(url, self.settings.google_font_provider):
            return (self.settings.legacy_user_agent, self.settings.modern_user_agent)
        return (self.settings.modern_user_agent,)

    async def fetch_for_user_agent(self, url: str, user_agent: str) -> str:
        """Download ``url`` with the given user agent and return the body.

        Raises:
            StylesheetFetchError: the request or the body stream failed
        """
        client = await self._get_client()
        body = bytearray()
        try:
            async with client.stream(
                "GET", url, headers={"user-agent": user_agent}
            ) as response:
                async for chunk in response.aiter_bytes():
                    body.extend(chunk)
        except (httpx.HTTPError, httpx.StreamError, httpx.InvalidURL) as e:
            raise StylesheetFetchError(url, user_agent) from e

        return body.decode("utf-8", errors="replace")

    async def fetch(self, url: str) -> OptimizationResult:
        """Download the stylesheet for ``url``.

        Requests run one after another in the order given by
        :meth:`user_agents_for`. The first failure aborts the sequence and
        the result is skipped; no exception reaches the caller.
        """
        parts: List[str] = []
        try:
            for user_agent in self.user_agents_for(url):
                parts.append(await self.fetch_for_user_agent(url, user_agent))
        except StylesheetFetchError as e:
            logger.warning(
                "Failed to download the stylesheet for %s. Skipped optimizing this font.",
                url,
                error=str(e.__cause__),
            )
            return OptimizationResult.skipped(f"download failed: {e.__cause__}")

        return OptimizationResult.applied("".join(parts))
