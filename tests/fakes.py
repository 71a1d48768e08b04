"""Test doubles and payload builders shared across the suite."""

from __future__ import annotations

import asyncio
import copy
from typing import Any

from cursorview.errors import ErrorCode, NetworkError

SEED_URL = "https://api.example.com/items?offset=0&limit=50"


def detail_url(n: int) -> str:
    return f"https://api.example.com/items/{n}/"


def listing(
    names: list[str],
    *,
    next: str | None = None,
    previous: str | None = None,
    start: int = 1,
) -> dict[str, Any]:
    """Listing payload whose items point at detail_url(start), detail_url(start + 1), ..."""
    return {
        "count": len(names),
        "next": next,
        "previous": previous,
        "results": [
            {"name": name, "url": detail_url(i)} for i, name in enumerate(names, start=start)
        ],
    }


def detail(name: str, *types: str) -> dict[str, Any]:
    return {
        "name": name,
        "sprites": {"front_default": f"https://img.example.com/{name}.png"},
        "types": [{"slot": i, "type": {"name": t}} for i, t in enumerate(types, start=1)],
    }


class FakeFetcher:
    """In-memory FetcherProtocol implementation.

    ``responses`` maps URL → JSON payload or an exception instance to raise.
    Unknown URLs fail with HTTP 404. ``gate(url)`` returns an Event that
    holds fetches of that URL in flight until it is set.
    """

    def __init__(self, responses: dict[str, Any] | None = None) -> None:
        self.responses: dict[str, Any] = dict(responses or {})
        self.calls: list[str] = []
        self._gates: dict[str, asyncio.Event] = {}

    def gate(self, url: str) -> asyncio.Event:
        event = asyncio.Event()
        self._gates[url] = event
        return event

    def call_count(self, url: str) -> int:
        return self.calls.count(url)

    async def fetch_json(self, url: str) -> Any:
        self.calls.append(url)
        gate = self._gates.get(url)
        if gate is not None:
            await gate.wait()
        if url not in self.responses:
            raise NetworkError(
                f"HTTP 404 fetching {url}",
                code=ErrorCode.HTTP_STATUS_ERROR,
                status_code=404,
                recoverable=False,
            )
        result = self.responses[url]
        if isinstance(result, BaseException):
            raise result
        return copy.deepcopy(result)


# Seed and next-page listing URLs for the end-to-end scenario
L0 = "https://pokeapi.example.com/api/v2/pokemon?limit=50"
L1 = "https://pokeapi.example.com/api/v2/pokemon?offset=50&limit=50"
