"""Read-only access to portfolio content keyed by identifier.

The chat surface only ever reads the content store: it asks for the list of
identifiers once per page load and then fetches every item by identifier.
Identifiers determine their table through a prefix convention (``work_``,
``project_``, ``tool_``, ``skill_``, ``gallery_``); ``aboutmecard`` is
synthetic and never touches the database.
"""

from __future__ import annotations

import logging
from typing import Any, TypedDict

from sqlalchemy import inspect
from sqlalchemy.orm import Session

from portfolio_chat.constants.identifiers import (
    ABOUT_IDENTIFIER,
    IDENTIFIER_CATEGORIES,
    ContentType,
    about_item,
    content_type_for,
)
from portfolio_chat.data.db import get_session
from portfolio_chat.data.models import GalleryItem, Project, Skill, Tool, WorkExperience
from portfolio_chat.data.models.content_row import ContentRowMixin

logger = logging.getLogger(__name__)

__all__ = [
    "IdentifierEntry",
    "PortfolioItemPayload",
    "fetch_all_identifiers",
    "fetch_portfolio_item",
    "serialize_row",
]


class IdentifierEntry(TypedDict):
    """One entry of the identifier vocabulary."""

    identifier: str
    ai_description: str


class PortfolioItemPayload(TypedDict):
    """Tagged portfolio item as returned by the API."""

    type: str
    data: dict[str, Any]


_MODELS: dict[ContentType, type[ContentRowMixin]] = {
    ContentType.WORK_EXPERIENCE: WorkExperience,
    ContentType.PROJECT: Project,
    ContentType.TOOL: Tool,
    ContentType.SKILL: Skill,
    ContentType.GALLERY: GalleryItem,
}


def _ordering(content_type: ContentType) -> tuple:
    """Return the display ordering used for a content table."""
    if content_type is ContentType.WORK_EXPERIENCE:
        return (WorkExperience.display_order.asc(), WorkExperience.start_date.desc())
    if content_type is ContentType.PROJECT:
        return (Project.display_order.asc(), Project.start_date.desc())
    if content_type is ContentType.TOOL:
        return (Tool.display_order.asc(), Tool.name.asc())
    if content_type is ContentType.SKILL:
        return (Skill.display_order.asc(), Skill.proficiency_percentage.desc())
    return (GalleryItem.display_order.asc(), GalleryItem.created_at.desc())


def serialize_row(row: ContentRowMixin) -> dict[str, Any]:
    """Convert an ORM row to a dict keyed by database column name.

    Dates and datetimes are left as Python objects; FastAPI's JSON encoder
    turns them into ISO-8601 strings.
    """
    mapper = inspect(type(row))
    return {attr.columns[0].name: getattr(row, attr.key) for attr in mapper.column_attrs}


def _find_active(session: Session, content_type: ContentType, identifier: str):
    model = _MODELS[content_type]
    return (
        session.query(model)
        .filter(model.identifier == identifier, model.is_active.is_(True))
        .first()
    )


def fetch_portfolio_item(identifier: str) -> PortfolioItemPayload | None:
    """Look up a single portfolio item by identifier.

    Args:
        identifier: Tag name such as ``project_chatbot`` or ``aboutmecard``.

    Returns:
        ``{"type": ..., "data": ...}`` for an active row (or the fixed About
        payload), None when the identifier has no active row or an
        unrecognized prefix.

    Raises:
        sqlalchemy.exc.SQLAlchemyError: If the database cannot be queried.
    """
    if identifier == ABOUT_IDENTIFIER:
        return about_item()

    content_type = content_type_for(identifier)
    if content_type is None:
        logger.debug("Unrecognized identifier prefix: %s", identifier)
        return None

    with get_session() as session:
        row = _find_active(session, content_type, identifier)
        if row is None:
            return None
        return {"type": content_type.value, "data": serialize_row(row)}


def fetch_all_identifiers() -> dict[str, list[IdentifierEntry]]:
    """Return every active identifier grouped by category.

    The result maps ``work_experience``, ``projects``, ``tools``, ``skills``
    and ``gallery`` to lists of ``{identifier, ai_description}`` in display
    order.

    Raises:
        sqlalchemy.exc.SQLAlchemyError: If the database cannot be queried.
    """
    result: dict[str, list[IdentifierEntry]] = {}
    with get_session() as session:
        for content_type, category in IDENTIFIER_CATEGORIES.items():
            model = _MODELS[content_type]
            rows = (
                session.query(model.identifier, model.ai_description)
                .filter(model.is_active.is_(True))
                .order_by(*_ordering(content_type))
                .all()
            )
            result[category] = [
                {"identifier": identifier, "ai_description": ai_description}
                for identifier, ai_description in rows
            ]
    return result
