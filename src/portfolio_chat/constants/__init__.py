from __future__ import annotations

from portfolio_chat.constants.identifiers import (
    ABOUT_IDENTIFIER,
    ABOUT_PAYLOAD,
    IDENTIFIER_CATEGORIES,
    IDENTIFIER_PREFIXES,
    ContentType,
    ProjectStatus,
    about_item,
    content_type_for,
)

__all__ = [
    "ABOUT_IDENTIFIER",
    "ABOUT_PAYLOAD",
    "IDENTIFIER_CATEGORIES",
    "IDENTIFIER_PREFIXES",
    "ContentType",
    "ProjectStatus",
    "about_item",
    "content_type_for",
]
