"""Session state container.

AppState is created once per mounted screen (inside ``open_session``) and
handed to the presentation layer. Everything it holds, the page cache
included, is discarded when the session closes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx

    from cursorview.cache import PageCache
    from cursorview.config import Settings
    from cursorview.coordinator import FetchCoordinator
    from cursorview.protocols import FetcherProtocol
    from cursorview.resolver import DetailResolver


@dataclass
class AppState:
    """Holds all shared runtime state for one session."""

    settings: Settings
    http_client: httpx.AsyncClient
    cache: PageCache
    fetcher: FetcherProtocol
    resolver: DetailResolver
    coordinator: FetchCoordinator
