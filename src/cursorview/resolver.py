"""Concurrent detail resolution for one listing page.

Given a page's item references, returns a URL → ItemDetail mapping. Cached
details are reused; the rest are fetched concurrently with no cap on
fan-out (a page holds at most a few dozen items). The join waits for every
fetch to settle. A failed fetch drops that item from the result and is
logged; it never fails the batch.
"""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

import structlog

from cursorview.errors import CursorViewError, DetailFetchError, ErrorCode
from cursorview.parser import parse_detail

if TYPE_CHECKING:
    from collections.abc import Iterable

    from cursorview.models.page import ItemDetail, ItemRef
    from cursorview.protocols import CacheProtocol, FetcherProtocol

log = structlog.get_logger()


class DetailResolver:
    """Fetches each detail URL at most once and writes results back to the cache."""

    def __init__(self, cache: CacheProtocol, fetcher: FetcherProtocol) -> None:
        self._cache = cache
        self._fetcher = fetcher
        # Detail URL → fetch task, shared by every batch waiting on that URL.
        self._in_flight: dict[str, asyncio.Task[ItemDetail]] = {}
        self.last_failures: dict[str, DetailFetchError] = {}

    async def resolve_all(self, item_refs: Iterable[ItemRef]) -> dict[str, ItemDetail]:
        """Resolve details for ``item_refs``, tolerating per-item failures.

        The returned mapping follows item order and omits items whose detail
        could not be fetched. Failures of this call are kept in
        ``last_failures``.
        """
        urls = list(dict.fromkeys(ref.url for ref in item_refs))
        resolved: dict[str, ItemDetail] = {}
        pending: list[str] = []

        for url in urls:
            cached = self._cache.get_detail(url)
            if cached is not None:
                resolved[url] = cached
            else:
                pending.append(url)

        failures: dict[str, DetailFetchError] = {}
        if pending:
            log.debug("detail_fetch_started", count=len(pending), cached=len(resolved))
            # Shielded so a cancelled batch never cancels a fetch another batch shares.
            outcomes = await asyncio.gather(
                *(asyncio.shield(self._shared_fetch(url)) for url in pending),
                return_exceptions=True,
            )
            for url, outcome in zip(pending, outcomes, strict=True):
                if isinstance(outcome, BaseException):
                    failures[url] = _as_detail_error(url, outcome)
                    log.warning(
                        "detail_fetch_failed",
                        url=url,
                        code=failures[url].cause.code,
                        error=failures[url].cause.message,
                    )
                else:
                    resolved[url] = outcome

        self.last_failures = failures
        log.info(
            "details_resolved",
            requested=len(urls),
            resolved=len(resolved),
            failed=len(failures),
        )
        return {url: resolved[url] for url in urls if url in resolved}

    def _shared_fetch(self, url: str) -> asyncio.Task[ItemDetail]:
        task = self._in_flight.get(url)
        # A finished task may linger until its done-callback runs; never reuse it.
        if task is None or task.done():
            task = asyncio.create_task(self._fetch_detail(url))
            self._in_flight[url] = task
            task.add_done_callback(self._forget)
        return task

    def _forget(self, task: asyncio.Task[ItemDetail]) -> None:
        for url, current in list(self._in_flight.items()):
            if current is task:
                del self._in_flight[url]

    async def _fetch_detail(self, url: str) -> ItemDetail:
        payload = await self._fetcher.fetch_json(url)
        detail = parse_detail(url, payload)
        self._cache.set_detail(detail)
        return detail


def _as_detail_error(url: str, exc: BaseException) -> DetailFetchError:
    if isinstance(exc, CursorViewError):
        return DetailFetchError(url, exc)
    cause = CursorViewError(
        code=ErrorCode.UNEXPECTED_ERROR,
        message=str(exc) or type(exc).__name__,
    )
    return DetailFetchError(url, cause)
