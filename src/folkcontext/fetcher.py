"""HTTP page fetcher backed by the in-process page cache.

All network I/O for the site goes through a single Fetcher instance shared
across tool calls. The Fetcher receives an httpx.AsyncClient and a PageCache
via constructor injection; the lifespan owns both lifecycles.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx
import structlog
from bs4 import BeautifulSoup

from folkcontext.errors import FetchError, NetworkError
from folkcontext.paths import to_url

if TYPE_CHECKING:
    from folkcontext.config import FetcherSettings
    from folkcontext.protocols import CacheProtocol

log = structlog.get_logger()


def build_http_client(settings: FetcherSettings | None = None) -> httpx.AsyncClient:
    """Create the shared httpx client. Called once at startup."""
    timeout = settings.request_timeout_seconds if settings else 30.0
    user_agent = settings.user_agent if settings else "folkcontext/1.0"
    return httpx.AsyncClient(
        follow_redirects=True,
        timeout=httpx.Timeout(timeout),
        headers={"User-Agent": user_agent},
        limits=httpx.Limits(
            max_connections=10,
            max_keepalive_connections=5,
        ),
    )


def parse_html(html: str) -> BeautifulSoup:
    """Parse an HTML payload. Never cached; callers re-parse on every access."""
    return BeautifulSoup(html, "html.parser")


class Fetcher:
    """Cache-first page fetcher for Mainly Norfolk."""

    def __init__(self, client: httpx.AsyncClient, cache: CacheProtocol) -> None:
        self._client = client
        self._cache = cache

    async def fetch(self, path: str) -> BeautifulSoup:
        """Fetch a site path or full URL and return the parsed document."""
        return parse_html(await self.fetch_text(path))

    async def fetch_text(self, path: str) -> str:
        """Return the raw HTML for ``path``, from cache when fresh.

        A fresh hit skips the network entirely. On a miss or stale entry one
        GET is issued; only a successful response is written to the cache, so
        a failure never replaces or poisons an existing entry. Raises
        FetchError on non-2xx responses and NetworkError on transport failures.
        """
        url = to_url(path)

        cached = self._cache.get(url)
        if cached is not None:
            log.debug("cache_hit", url=url)
            return cached.payload

        log.info("cache_miss_fetching", url=url, stale=self._cache.peek(url) is not None)
        try:
            response = await self._client.get(url)
        except httpx.HTTPError as exc:
            log.warning("fetch_network_error", url=url, error=str(exc))
            raise NetworkError(url, str(exc) or type(exc).__name__) from exc

        if not response.is_success:
            log.warning("fetch_http_error", url=url, status_code=response.status_code)
            raise FetchError(url, response.status_code)

        html = response.text
        self._cache.set(url, html)
        log.info(
            "fetch_complete",
            url=url,
            status_code=response.status_code,
            content_length=len(html),
        )
        return html
