"""Shared test fixtures for the cursorview test suite."""

from __future__ import annotations

import pytest

from cursorview.cache import PageCache
from cursorview.coordinator import FetchCoordinator
from cursorview.models.view import CurrentView
from tests.fakes import SEED_URL, FakeFetcher


@pytest.fixture()
def fetcher() -> FakeFetcher:
    return FakeFetcher()


@pytest.fixture()
def page_cache() -> PageCache:
    return PageCache()


@pytest.fixture()
def coordinator(page_cache: PageCache, fetcher: FakeFetcher) -> FetchCoordinator:
    """Coordinator over the fake fetcher, seeded with SEED_URL."""
    return FetchCoordinator(SEED_URL, cache=page_cache, fetcher=fetcher)


@pytest.fixture()
def published(coordinator: FetchCoordinator) -> list[CurrentView]:
    """Every view the coordinator publishes, in order."""
    views: list[CurrentView] = []
    coordinator.subscribe(views.append)
    return views
