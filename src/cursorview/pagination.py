"""Pagination cursor for the currently displayed page.

The server-supplied ``next``/``previous`` URLs are opaque tokens: they are
taken verbatim and never validated or rewritten.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict

if TYPE_CHECKING:
    from cursorview.models.page import Page


class PaginationCursor(BaseModel):
    model_config = ConfigDict(frozen=True)

    next: str | None = None
    previous: str | None = None

    @classmethod
    def from_page(cls, page: Page) -> PaginationCursor:
        return cls(next=page.next, previous=page.previous)

    @property
    def has_next(self) -> bool:
        return self.next is not None

    @property
    def has_previous(self) -> bool:
        return self.previous is not None
