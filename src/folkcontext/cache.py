"""In-process page cache with a fixed freshness window.

One ``PageCache`` is created at server startup and shared by every tool call
through ``AppState``. Entries are whole-value replacements keyed by full URL,
so concurrent writers for the same key cannot leave a partial entry behind:
the last write to complete wins.

Stale entries are not removed on read; they stay until overwritten by a
successful refetch or evicted. Capacity is bounded by a cachetools
``LRUCache``; freshness is tracked on the entries themselves rather than with
``TTLCache``, which would drop stale entries on access.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime, timedelta

import structlog
from cachetools import Cache, LRUCache

from folkcontext.config import CACHE_TTL_SECONDS
from folkcontext.models.cache import CacheEntry

log = structlog.get_logger()


def _utcnow() -> datetime:
    return datetime.now(UTC)


class _PageLRU(LRUCache):
    """LRUCache that logs evictions and can be read without reordering."""

    def popitem(self) -> tuple[str, CacheEntry]:
        key, entry = super().popitem()
        log.debug("cache_evicted", key=key, max_entries=self.maxsize)
        return key, entry

    def peek(self, key: str) -> CacheEntry | None:
        if key not in self:
            return None
        # Cache.__getitem__ skips LRUCache's recency update
        return Cache.__getitem__(self, key)


class PageCache:
    """Bounded LRU cache of raw page bodies implementing CacheProtocol."""

    def __init__(
        self,
        max_entries: int = 512,
        ttl: timedelta = timedelta(seconds=CACHE_TTL_SECONDS),
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        if max_entries < 1:
            raise ValueError("max_entries must be at least 1")
        self._entries = _PageLRU(maxsize=max_entries)
        self._ttl = ttl
        self._clock = clock

    def __len__(self) -> int:
        return len(self._entries)

    def peek(self, key: str) -> CacheEntry | None:
        """Return the stored entry regardless of freshness, without touching LRU order."""
        return self._entries.peek(key)

    def get(self, key: str) -> CacheEntry | None:
        """Return the entry for ``key`` if it is still fresh, else None."""
        entry = self._entries.peek(key)
        if entry is None:
            return None
        if not entry.is_fresh(self._clock()):
            log.debug("cache_stale", key=key, expired_at=entry.expires_at.isoformat())
            return None
        return self._entries[key]

    def set(self, key: str, payload: str) -> CacheEntry:
        """Store ``payload`` under ``key`` with a fresh expiry, replacing any old entry."""
        now = self._clock()
        entry = CacheEntry(
            key=key,
            payload=payload,
            fetched_at=now,
            expires_at=now + self._ttl,
        )
        self._entries[key] = entry
        return entry

    def clear(self) -> None:
        """Drop every entry. Called once at shutdown."""
        count = len(self._entries)
        # Replaced rather than cleared: MutableMapping.clear goes through popitem
        self._entries = _PageLRU(maxsize=self._entries.maxsize)
        log.info("cache_cleared", entry_count=count)
