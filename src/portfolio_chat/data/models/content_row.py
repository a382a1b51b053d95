"""Columns shared by every identifier-addressable content table.

Each content row is looked up by its unique, human-readable ``identifier``
(``project_chatbot``, ``skill_ai`` ...). ``ai_description`` is only used to
tell the external AI what the tag refers to.
"""

from __future__ import annotations

from datetime import UTC, datetime

from sqlalchemy import Boolean, DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column


class ContentRowMixin:
    """Identifier, prompt description, ordering and activity flags.

    Attributes:
        id: Auto-incrementing primary key.
        identifier: Unique tag name, prefixed by the content type.
        ai_description: Short description handed to the AI persona.
        display_order: Ordering key (lower first).
        is_active: Inactive rows are invisible to the chat surface.
        created_at: UTC timestamp of creation.
        updated_at: UTC timestamp of the last update.
    """

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    identifier: Mapped[str] = mapped_column(String(50), nullable=False, unique=True, index=True)
    ai_description: Mapped[str] = mapped_column(Text, nullable=False)
    display_order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True, index=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=lambda: datetime.now(UTC)
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(UTC),
        onupdate=lambda: datetime.now(UTC),
    )


def require_prefix(value: str, prefix: str) -> str:
    """Validate that an identifier matches the tag grammar for its table.

    Raises:
        ValueError: If the prefix is missing, nothing follows it, or the
            identifier contains a ``>`` (which would end the tag early).
    """
    if not value.startswith(prefix) or len(value) == len(prefix):
        raise ValueError(f"Identifier {value!r} must start with {prefix!r}")
    if ">" in value or any(ch.isspace() for ch in value):
        raise ValueError(f"Identifier {value!r} may not contain '>' or whitespace")
    return value
