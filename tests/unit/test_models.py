"""Unit tests for cursorview.models."""

from __future__ import annotations

import pydantic
import pytest

from cursorview.models.page import ItemDetail, ItemRef, Page
from cursorview.models.view import CurrentView, FetchState


class TestItemDetail:
    def test_display_fields(self) -> None:
        detail = ItemDetail(
            url="https://api.example.com/items/1/",
            data={
                "sprites": {"front_default": "img1"},
                "types": [{"type": {"name": "grass"}}, {"type": {"name": "poison"}}],
            },
        )
        assert detail.sprite_url == "img1"
        assert detail.type_names == ["grass", "poison"]

    def test_missing_display_fields(self) -> None:
        detail = ItemDetail(url="https://api.example.com/items/1/", data={})
        assert detail.sprite_url is None
        assert detail.type_names == []

    def test_malformed_display_fields_ignored(self) -> None:
        detail = ItemDetail(
            url="https://api.example.com/items/1/",
            data={
                "sprites": {"front_default": None},
                "types": [{"type": "grass"}, "poison", {"type": {"name": "fire"}}],
            },
        )
        assert detail.sprite_url is None
        assert detail.type_names == ["fire"]


class TestImmutability:
    def test_page_is_frozen(self) -> None:
        page = Page(url="https://api.example.com/items", items=(ItemRef(name="a", url="u"),))
        with pytest.raises(pydantic.ValidationError):
            page.next = "https://api.example.com/items?offset=50"  # type: ignore[misc]

    def test_item_refs_compare_by_value(self) -> None:
        assert ItemRef(name="a", url="u") == ItemRef(name="a", url="u")


class TestCurrentView:
    def test_defaults_to_idle(self) -> None:
        view = CurrentView()
        assert view.state == FetchState.IDLE
        assert view.items == []
        assert not view.is_loading

    @pytest.mark.parametrize(
        ("state", "loading"),
        [
            (FetchState.INITIAL_LOADING, True),
            (FetchState.REFRESHING, True),
            (FetchState.READY, False),
            (FetchState.ERRORED, False),
        ],
    )
    def test_is_loading(self, state: FetchState, loading: bool) -> None:
        assert CurrentView(state=state).is_loading is loading
