"""Name search over the currently loaded page.

Pure and synchronous. Results are re-derived on every change to the items or
the query and never cached.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rapidfuzz import fuzz, process

if TYPE_CHECKING:
    from collections.abc import Sequence

    from cursorview.models.page import ItemRef


def normalise_query(raw: str) -> str:
    """Trim whitespace and lowercase a raw search box value."""
    return raw.strip().lower()


def filter_items(items: Sequence[ItemRef], query: str) -> list[ItemRef]:
    """Return the items whose name contains ``query``, case-insensitively.

    A blank query returns every item. Original order is preserved.
    """
    term = normalise_query(query)
    if not term:
        return list(items)
    return [item for item in items if term in item.name.lower()]


def suggest_names(
    items: Sequence[ItemRef],
    query: str,
    *,
    score_cutoff: int = 70,
    limit: int = 5,
) -> list[str]:
    """Fuzzy-match ``query`` against item names for "did you mean" hints.

    Deduplicates names. Returns matches sorted by score descending.
    """
    term = normalise_query(query)
    if not term or not items:
        return []

    names = list(dict.fromkeys(item.name for item in items if item.name))
    results = process.extract(
        term,
        [name.lower() for name in names],
        scorer=fuzz.ratio,
        limit=limit,
        score_cutoff=score_cutoff,
    )
    return [names[idx] for _choice, _score, idx in results]
