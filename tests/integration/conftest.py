"""Integration test fixtures.

Wires the real Fetcher over an httpx.AsyncClient so that respx can stand in
for the upstream API.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx
import pytest

from cursorview.cache import PageCache
from cursorview.coordinator import FetchCoordinator
from cursorview.fetcher import Fetcher
from cursorview.resolver import DetailResolver
from tests.fakes import L0

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator


@pytest.fixture()
async def live_coordinator() -> AsyncGenerator[FetchCoordinator, None]:
    """FetchCoordinator over the real Fetcher, seeded with L0."""
    async with httpx.AsyncClient() as client:
        cache = PageCache()
        fetcher = Fetcher(client)
        yield FetchCoordinator(
            L0,
            cache=cache,
            fetcher=fetcher,
            resolver=DetailResolver(cache, fetcher),
        )
