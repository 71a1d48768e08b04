"""Fetch orchestration for a paginated, cursor-linked collection.

FetchCoordinator drives a single logical fetch per ``load()`` call:

  1. Optimistic read: a cached page for the URL is published immediately.
  2. Network fetch: always issued, cache hit or not.
  3. Detail fan-out: DetailResolver resolves every listed item.
  4. Merge: cache, cursor, items and details are updated together and
     the final view is published.

All state changes happen on the event loop thread, so no locking is needed.
Overlapping ``load()`` calls are not cancelled: whichever completes last
determines both the cached page and the published view.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from cursorview.config import SearchSettings
from cursorview.errors import CursorViewError, ErrorCode
from cursorview.models.view import CurrentView, FetchState, LoadMode
from cursorview.pagination import PaginationCursor
from cursorview.parser import parse_page
from cursorview.resolver import DetailResolver
from cursorview.search import filter_items, suggest_names

if TYPE_CHECKING:
    from collections.abc import Callable

    from cursorview.models.page import ItemDetail, ItemRef, Page
    from cursorview.protocols import CacheProtocol, FetcherProtocol

    Listener = Callable[[CurrentView], None]

log = structlog.get_logger()

_LOADING_STATES = frozenset({FetchState.INITIAL_LOADING, FetchState.REFRESHING})


class FetchCoordinator:
    """Owns the page cache and publishes a CurrentView on every state change."""

    def __init__(
        self,
        seed_url: str,
        *,
        cache: CacheProtocol,
        fetcher: FetcherProtocol,
        resolver: DetailResolver | None = None,
        search_settings: SearchSettings | None = None,
    ) -> None:
        self.seed_url = seed_url
        self._cache = cache
        self._fetcher = fetcher
        self._resolver = resolver or DetailResolver(cache, fetcher)
        self._search = search_settings or SearchSettings()
        self._listeners: list[Listener] = []

        self._url: str | None = None
        self._items: tuple[ItemRef, ...] = ()
        self._details: dict[str, ItemDetail] = {}
        self._cursor = PaginationCursor()
        self._state = FetchState.IDLE
        self._error: CursorViewError | None = None
        self._query = ""

    # ------------------------------------------------------------------
    # Read side
    # ------------------------------------------------------------------

    @property
    def state(self) -> FetchState:
        return self._state

    @property
    def cursor(self) -> PaginationCursor:
        return self._cursor

    @property
    def view(self) -> CurrentView:
        """Build the current view. Recomputed on every access."""
        visible = filter_items(self._items, self._query)
        suggestions: list[str] = []
        if not visible and self._items and self._query.strip():
            suggestions = suggest_names(
                self._items,
                self._query,
                score_cutoff=self._search.fuzzy_score_cutoff,
                limit=self._search.fuzzy_max_results,
            )
        return CurrentView(
            url=self._url,
            query=self._query,
            items=visible,
            details={
                item.url: self._details[item.url]
                for item in visible
                if item.url in self._details
            },
            next=self._cursor.next,
            previous=self._cursor.previous,
            state=self._state,
            error_message=self._error.message if self._error else None,
            error_code=self._error.code if self._error else None,
            error_suggestion=(self._error.suggestion or None) if self._error else None,
            error_recoverable=self._error.recoverable if self._error else False,
            suggestions=suggestions,
        )

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener`` for published views. Returns an unsubscribe callable."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # ------------------------------------------------------------------
    # Write side
    # ------------------------------------------------------------------

    def set_query(self, query: str) -> None:
        self._query = query
        self._publish()

    async def start(self) -> None:
        await self.load(self.seed_url, LoadMode.INITIAL)

    async def refresh(self) -> None:
        """Pull-to-refresh: re-fetch the current page, or the seed page before any load."""
        await self.load(self._url or self.seed_url, LoadMode.REFRESH)

    async def next_page(self) -> None:
        await self.load(self._cursor.next, LoadMode.NAVIGATE)

    async def previous_page(self) -> None:
        await self.load(self._cursor.previous, LoadMode.NAVIGATE)

    async def load(self, url: str | None, mode: LoadMode = LoadMode.INITIAL) -> None:
        """Fetch ``url`` and merge it into the view. Never raises.

        A null URL (no further page) is a no-op. Failures leave the last
        successfully published items and details in place and move the
        state to ``ERRORED``.
        """
        mode = LoadMode(mode)
        if not url:
            log.debug("load_skipped", mode=mode, reason="no_url")
            return

        load_log = log.bind(url=url, mode=mode)
        self._url = url

        cached_page = self._cache.get_page(url)
        if cached_page is not None:
            load_log.info("cache_hit", items=len(cached_page.items))
            self._apply_page(cached_page, self._cached_details(cached_page))
            self._error = None

        if mode is LoadMode.REFRESH:
            self._state = FetchState.REFRESHING
        elif cached_page is None:
            self._state = FetchState.INITIAL_LOADING
        else:
            self._state = FetchState.READY
        self._publish()

        try:
            payload = await self._fetcher.fetch_json(url)
            page = parse_page(url, payload)
            self._cache.set_page(page)
            details = await self._resolver.resolve_all(page.items)

            self._apply_page(page, details)
            self._state = FetchState.READY
            self._error = None
            load_log.info(
                "load_complete",
                items=len(page.items),
                details=len(details),
                has_next=page.next is not None,
                has_previous=page.previous is not None,
            )
        except CursorViewError as exc:
            load_log.warning(
                "load_failed",
                code=exc.code,
                message=exc.message,
                recoverable=exc.recoverable,
            )
            self._fail(exc)
        except Exception as exc:
            load_log.error("load_unexpected_error", exc_info=True)
            self._fail(
                CursorViewError(
                    code=ErrorCode.UNEXPECTED_ERROR,
                    message=str(exc) or type(exc).__name__,
                    suggestion="Pull to refresh to try again.",
                )
            )
        finally:
            # Loading flags always reach a rest state, including on cancellation.
            if self._state in _LOADING_STATES:
                load_log.warning("load_interrupted")
                self._fail(
                    CursorViewError(
                        code=ErrorCode.UNEXPECTED_ERROR,
                        message="Load interrupted",
                        suggestion="Pull to refresh to try again.",
                        recoverable=True,
                    )
                )
            self._publish()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _cached_details(self, page: Page) -> dict[str, ItemDetail]:
        details: dict[str, ItemDetail] = {}
        for item in page.items:
            detail = self._cache.get_detail(item.url)
            if detail is not None:
                details[item.url] = detail
        return details

    def _apply_page(self, page: Page, details: dict[str, ItemDetail]) -> None:
        self._items = page.items
        self._details = details
        self._cursor = PaginationCursor.from_page(page)

    def _fail(self, error: CursorViewError) -> None:
        self._state = FetchState.ERRORED
        self._error = error

    def _publish(self) -> None:
        if not self._listeners:
            return
        view = self.view
        for listener in list(self._listeners):
            try:
                listener(view)
            except Exception:
                log.warning("listener_error", exc_info=True)
