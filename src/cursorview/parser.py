"""Decoding of upstream JSON payloads.

Listing endpoints return ``{results: [{name, url}], next, previous}``; detail
endpoints return an arbitrary JSON object. Anything else is a DecodeError.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ValidationError, field_validator

from cursorview.errors import DecodeError
from cursorview.models.page import ItemDetail, ItemRef, Page


class _ListingPayload(BaseModel):
    results: list[ItemRef] = []
    next: str | None = None
    previous: str | None = None

    @field_validator("next", "previous", mode="before")
    @classmethod
    def blank_cursor_is_none(cls, v: Any) -> Any:
        # Servers signal "no further page" with null; treat "" the same way.
        return v or None

    @field_validator("results", mode="before")
    @classmethod
    def null_results_is_empty(cls, v: Any) -> Any:
        return [] if v is None else v


def parse_page(url: str, payload: Any) -> Page:
    """Decode a listing response fetched from ``url`` into a Page."""
    if not isinstance(payload, dict):
        raise DecodeError(f"Expected a JSON object from {url}, got {type(payload).__name__}")
    try:
        listing = _ListingPayload.model_validate(payload)
    except ValidationError as exc:
        raise DecodeError(
            f"Malformed listing from {url}: {exc.error_count()} invalid field(s)"
        ) from exc
    return Page(
        url=url,
        items=tuple(listing.results),
        next=listing.next,
        previous=listing.previous,
    )


def parse_detail(url: str, payload: Any) -> ItemDetail:
    """Wrap a detail response fetched from ``url``. Only the outer type is checked."""
    if not isinstance(payload, dict):
        raise DecodeError(f"Expected a JSON object from {url}, got {type(payload).__name__}")
    return ItemDetail(url=url, data=payload)
