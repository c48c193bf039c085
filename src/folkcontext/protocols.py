"""Protocol interfaces for swappable components.

Tool handlers and AppState reference these protocols, not the concrete
implementations. This allows:
- Tests to use lightweight fakes that count network calls
- A different cache backend to be swapped in without changing tool code
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from bs4 import BeautifulSoup

    from folkcontext.models.cache import CacheEntry


class CacheProtocol(Protocol):
    """Interface for the page cache backend."""

    def get(self, key: str) -> CacheEntry | None: ...

    def peek(self, key: str) -> CacheEntry | None: ...

    def set(self, key: str, payload: str) -> CacheEntry: ...

    def clear(self) -> None: ...


class FetcherProtocol(Protocol):
    """Interface for the cached page fetcher."""

    async def fetch(self, path: str) -> BeautifulSoup: ...

    async def fetch_text(self, path: str) -> str: ...
