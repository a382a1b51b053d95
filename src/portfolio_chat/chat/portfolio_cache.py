"""Session-wide cache of portfolio items, filled once at startup."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping, Sequence
from typing import Any

from portfolio_chat.chat.clients import PortfolioApiClient, PortfolioApiError
from portfolio_chat.constants.identifiers import ABOUT_IDENTIFIER, about_item

logger = logging.getLogger(__name__)


class PortfolioCache:
    """Maps identifier -> ``{"type", "data"}``.

    The cache starts out loading. ``populate`` finishes a successful load and
    ``fail`` records a global error; both clear the loading flag. Entries are
    only ever replaced as a whole.
    """

    def __init__(self) -> None:
        self._entries: dict[str, dict[str, Any]] = {}
        self._loading = True
        self._error: str | None = None

    @property
    def is_loading(self) -> bool:
        return self._loading

    @property
    def error(self) -> str | None:
        return self._error

    def get(self, identifier: str) -> dict[str, Any] | None:
        return self._entries.get(identifier)

    def identifiers(self) -> list[str]:
        return list(self._entries)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def begin_loading(self) -> None:
        self._loading = True
        self._error = None

    def populate(self, entries: Mapping[str, dict[str, Any]]) -> None:
        self._entries = dict(entries)
        self._loading = False
        self._error = None

    def fail(self, message: str) -> None:
        self._entries = {}
        self._loading = False
        self._error = message


def flatten_identifiers(grouped: Mapping[str, Sequence[Any]]) -> list[str]:
    """Collect identifier names from a grouped listing, first occurrence wins."""
    seen: dict[str, None] = {}
    for entries in grouped.values():
        if not isinstance(entries, Sequence):
            continue
        for entry in entries:
            name = entry.get("identifier") if isinstance(entry, Mapping) else None
            if isinstance(name, str) and name:
                seen.setdefault(name, None)
    return list(seen)


async def _fetch_one(client: PortfolioApiClient, identifier: str) -> dict[str, Any] | None:
    try:
        return await client.fetch_item(identifier)
    except PortfolioApiError as exc:
        logger.warning("Failed to fetch portfolio item %s: %s", identifier, exc)
        return None


async def preload(cache: PortfolioCache, client: PortfolioApiClient) -> None:
    """Fill ``cache`` with every item the API lists.

    Item fetches run concurrently. An item that fails to load is left out and
    renders as not found. If the identifier list itself cannot be fetched the
    whole cache is marked failed.
    """
    cache.begin_loading()
    try:
        grouped = await client.fetch_identifiers()
    except PortfolioApiError as exc:
        logger.error("Failed to load portfolio identifiers: %s", exc)
        cache.fail(str(exc))
        return

    names = flatten_identifiers(grouped)
    results = await asyncio.gather(*(_fetch_one(client, name) for name in names))

    entries: dict[str, dict[str, Any]] = {ABOUT_IDENTIFIER: about_item()}
    for name, item in zip(names, results):
        if item is not None:
            entries[name] = item
    cache.populate(entries)
    logger.info("Preloaded %d of %d portfolio items", len(entries) - 1, len(names))
