from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


class CacheEntry(BaseModel):
    """Raw HTML for one page, keyed by its full URL."""

    key: str  # Full URL, origin included
    payload: str  # Response body as fetched
    fetched_at: datetime
    expires_at: datetime  # Fixed at write time, never extended by reads

    def is_fresh(self, now: datetime) -> bool:
        return now < self.expires_at
