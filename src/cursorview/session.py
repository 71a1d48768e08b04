"""Session entrypoint.

Responsibilities (and nothing more):
- Configure structlog
- Create AppState for the lifetime of a mounted screen
- Tear the HTTP client down again
"""

from __future__ import annotations

import logging
import sys
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

import structlog

from cursorview import __version__
from cursorview.cache import PageCache
from cursorview.config import Settings
from cursorview.coordinator import FetchCoordinator
from cursorview.fetcher import Fetcher, build_http_client
from cursorview.resolver import DetailResolver
from cursorview.state import AppState

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

log = structlog.get_logger()


def setup_logging(settings: Settings) -> None:
    """Configure structlog. Called on every session mount.

    Loggers are not cached, so module-level loggers pick up the settings of
    the most recently opened session.
    """
    log_level = logging.getLevelNamesMapping()[settings.logging.level]

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if settings.logging.format == "json":
        processors = [*shared_processors, structlog.processors.JSONRenderer()]
    else:
        processors = [*shared_processors, structlog.dev.ConsoleRenderer()]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        # stdout belongs to the presentation layer
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


@asynccontextmanager
async def open_session(settings: Settings | None = None) -> AsyncGenerator[AppState, None]:
    """Create and tear down all shared resources for one screen's lifetime."""
    settings = settings or Settings()
    setup_logging(settings)

    http_client = build_http_client(settings.fetcher)
    cache = PageCache()
    fetcher = Fetcher(http_client)
    resolver = DetailResolver(cache, fetcher)
    coordinator = FetchCoordinator(
        settings.source.seed_url,
        cache=cache,
        fetcher=fetcher,
        resolver=resolver,
        search_settings=settings.search,
    )

    state = AppState(
        settings=settings,
        http_client=http_client,
        cache=cache,
        fetcher=fetcher,
        resolver=resolver,
        coordinator=coordinator,
    )
    log.info("session_started", version=__version__, seed_url=settings.source.seed_url)

    try:
        yield state
    finally:
        await http_client.aclose()
        log.info("session_closed", cached_entries=len(cache))
