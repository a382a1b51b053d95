"""Map an identifier to a card view model using the portfolio cache."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from portfolio_chat.chat.portfolio_cache import PortfolioCache, preload
from portfolio_chat.constants.identifiers import ABOUT_IDENTIFIER, ContentType, about_item

__all__ = ["CardKind", "CardState", "CardViewModel", "PortfolioCache", "preload", "resolve"]


class CardKind(StrEnum):
    WORK_EXPERIENCE = "work_experience"
    PROJECT = "project"
    TOOL = "tool"
    SKILL = "skill"
    GALLERY = "gallery"
    ABOUT = "about"
    UNKNOWN = "unknown"


class CardState(StrEnum):
    READY = "ready"
    LOADING = "loading"
    ERROR = "error"


_KIND_BY_TYPE: dict[str, CardKind] = {
    ContentType.WORK_EXPERIENCE.value: CardKind.WORK_EXPERIENCE,
    ContentType.PROJECT.value: CardKind.PROJECT,
    ContentType.TOOL.value: CardKind.TOOL,
    ContentType.SKILL.value: CardKind.SKILL,
    ContentType.GALLERY.value: CardKind.GALLERY,
    ContentType.ABOUT.value: CardKind.ABOUT,
}


@dataclass(frozen=True)
class CardViewModel:
    """What a card widget needs to draw itself.

    Attributes:
        identifier: The tag the card was produced from.
        state: Ready, loading placeholder or error.
        kind: Which card layout to use. UNKNOWN for unrecognized types.
        data: Item fields when ready; empty otherwise.
        content_type: Raw ``type`` value from the API, if any.
        message: Headline for loading and error cards.
        detail: Secondary error text.
    """

    identifier: str
    state: CardState
    kind: CardKind = CardKind.UNKNOWN
    data: dict[str, Any] = field(default_factory=dict)
    content_type: str | None = None
    message: str | None = None
    detail: str | None = None


def _error(identifier: str, detail: str) -> CardViewModel:
    return CardViewModel(
        identifier=identifier,
        state=CardState.ERROR,
        message=f"Could not load {identifier}",
        detail=detail,
    )


def resolve(identifier: str, cache: PortfolioCache) -> CardViewModel:
    """Resolve ``identifier`` against ``cache``.

    The About card never depends on the cache. Otherwise a loading cache gives
    a loading placeholder and a failed load or missing entry gives an error
    card naming the identifier.
    """
    if identifier == ABOUT_IDENTIFIER:
        entry = cache.get(identifier) or about_item()
        return CardViewModel(
            identifier=identifier,
            state=CardState.READY,
            kind=CardKind.ABOUT,
            data=dict(entry.get("data") or {}),
            content_type=ContentType.ABOUT.value,
        )

    if cache.is_loading:
        return CardViewModel(
            identifier=identifier, state=CardState.LOADING, message=f"Loading {identifier}..."
        )

    if cache.error:
        return _error(identifier, cache.error)

    entry = cache.get(identifier)
    if not entry or not entry.get("data"):
        return _error(identifier, f"No data found for identifier: {identifier}")

    content_type = entry.get("type")
    return CardViewModel(
        identifier=identifier,
        state=CardState.READY,
        kind=_KIND_BY_TYPE.get(content_type, CardKind.UNKNOWN),
        data=dict(entry["data"]),
        content_type=content_type,
    )
