"""Protocol interfaces for swappable components.

FetchCoordinator and DetailResolver reference these protocols, not the
concrete implementations. This allows:
- Tests to use lightweight in-memory fetchers with controllable timing
- Other transports to be swapped in without changing the engine
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from cursorview.models.page import ItemDetail, Page


class CacheProtocol(Protocol):
    """Interface for the URL-keyed payload cache."""

    def get_page(self, url: str) -> Page | None: ...

    def set_page(self, page: Page) -> None: ...

    def get_detail(self, url: str) -> ItemDetail | None: ...

    def set_detail(self, detail: ItemDetail) -> None: ...


class FetcherProtocol(Protocol):
    """Interface for the upstream GET-only JSON API."""

    async def fetch_json(self, url: str) -> Any: ...
