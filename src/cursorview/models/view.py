from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict

from cursorview.errors import ErrorCode
from cursorview.models.page import ItemDetail, ItemRef


class FetchState(StrEnum):
    IDLE = "idle"
    INITIAL_LOADING = "initial_loading"
    REFRESHING = "refreshing"
    READY = "ready"
    ERRORED = "errored"


class LoadMode(StrEnum):
    INITIAL = "initial"
    NAVIGATE = "navigate"
    REFRESH = "refresh"


class CurrentView(BaseModel):
    """Snapshot published to the presentation layer on every state change.

    Derived from coordinator state; never mutated after construction.
    """

    model_config = ConfigDict(frozen=True)

    url: str | None = None
    query: str = ""
    items: list[ItemRef] = []
    details: dict[str, ItemDetail] = {}  # detail URL → detail, visible items only
    next: str | None = None
    previous: str | None = None
    state: FetchState = FetchState.IDLE
    error_message: str | None = None
    error_code: ErrorCode | None = None
    error_suggestion: str | None = None
    error_recoverable: bool = False
    suggestions: list[str] = []  # fuzzy name matches when the query filters out everything

    @property
    def is_loading(self) -> bool:
        return self.state in (FetchState.INITIAL_LOADING, FetchState.REFRESHING)
