from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


class ItemRef(BaseModel):
    """Single entry of a listing page: a display name and its detail URL.

    ``url`` is the item's identity and the cache key for its detail.
    """

    model_config = ConfigDict(frozen=True)

    name: str = ""
    url: str

    @field_validator("name", mode="before")
    @classmethod
    def null_name_is_blank(cls, v: Any) -> Any:
        return "" if v is None else v


class Page(BaseModel):
    """One decoded listing response.

    Superseded, never mutated, by later fetches of the same URL.
    """

    model_config = ConfigDict(frozen=True)

    url: str
    items: tuple[ItemRef, ...] = ()
    next: str | None = None
    previous: str | None = None


class ItemDetail(BaseModel):
    """Decoded detail payload for one item.

    The payload is opaque; only a couple of optional display fields are
    read out of it.
    """

    model_config = ConfigDict(frozen=True)

    url: str
    data: dict[str, Any]

    @property
    def sprite_url(self) -> str | None:
        sprites = self.data.get("sprites")
        if not isinstance(sprites, dict):
            return None
        front = sprites.get("front_default")
        return front if isinstance(front, str) else None

    @property
    def type_names(self) -> list[str]:
        names: list[str] = []
        slots = self.data.get("types")
        if not isinstance(slots, list):
            return names
        for slot in slots:
            kind = slot.get("type") if isinstance(slot, dict) else None
            if isinstance(kind, dict) and isinstance(kind.get("name"), str):
                names.append(kind["name"])
        return names
