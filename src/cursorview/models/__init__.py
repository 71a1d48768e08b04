from __future__ import annotations

from cursorview.models.cache import CacheEntry
from cursorview.models.page import ItemDetail, ItemRef, Page
from cursorview.models.view import CurrentView, FetchState, LoadMode

__all__ = [
    # page
    "ItemRef",
    "Page",
    "ItemDetail",
    # cache
    "CacheEntry",
    # view
    "FetchState",
    "LoadMode",
    "CurrentView",
]
