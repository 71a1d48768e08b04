from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from cursorview.models.page import ItemDetail, Page


class CacheEntry(BaseModel):
    """Last successfully decoded payload for a URL."""

    model_config = ConfigDict(frozen=True)

    url: str
    payload: Page | ItemDetail
    fetched_at: datetime
