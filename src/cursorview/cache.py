"""In-memory page cache.

Maps a resource URL to its last successfully decoded payload, either a
listing ``Page`` or an ``ItemDetail``. Entries live for the lifetime of the
owning session: there is no TTL, no eviction and no clear. A write for a URL
replaces the previous entry wholesale, so with overlapping fetches of the
same URL the last one to complete wins.

Owned by FetchCoordinator. DetailResolver receives the same instance and
writes back resolved details; nothing else mutates it.
"""

from __future__ import annotations

from datetime import UTC, datetime

import structlog

from cursorview.models.cache import CacheEntry
from cursorview.models.page import ItemDetail, Page

log = structlog.get_logger()


class PageCache:
    """Process-lifetime URL → payload cache implementing CacheProtocol."""

    def __init__(self) -> None:
        self._entries: dict[str, CacheEntry] = {}

    def __contains__(self, url: object) -> bool:
        return url in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def get_entry(self, url: str) -> CacheEntry | None:
        return self._entries.get(url)

    # ------------------------------------------------------------------
    # Listing pages
    # ------------------------------------------------------------------

    def get_page(self, url: str) -> Page | None:
        """Return the cached listing page for ``url``, or ``None`` on miss."""
        entry = self._entries.get(url)
        if entry is None or not isinstance(entry.payload, Page):
            return None
        return entry.payload

    def set_page(self, page: Page) -> None:
        self._put(page.url, page)

    # ------------------------------------------------------------------
    # Item details
    # ------------------------------------------------------------------

    def get_detail(self, url: str) -> ItemDetail | None:
        """Return the cached detail for ``url``, or ``None`` on miss."""
        entry = self._entries.get(url)
        if entry is None or not isinstance(entry.payload, ItemDetail):
            return None
        return entry.payload

    def set_detail(self, detail: ItemDetail) -> None:
        self._put(detail.url, detail)

    def _put(self, url: str, payload: Page | ItemDetail) -> None:
        replaced = url in self._entries
        self._entries[url] = CacheEntry(
            url=url,
            payload=payload,
            fetched_at=datetime.now(UTC),
        )
        log.debug(
            "cache_write",
            url=url,
            kind=type(payload).__name__,
            replaced=replaced,
        )
