"""ORM model for tools and technologies (React, PostgreSQL, Docker ...)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import Boolean, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship, validates

from portfolio_chat.data.db import Base
from portfolio_chat.data.models.content_row import ContentRowMixin, require_prefix

if TYPE_CHECKING:
    from portfolio_chat.data.models.project import ProjectTool


class Tool(ContentRowMixin, Base):
    """A tool the portfolio owner works with.

    Attributes:
        name: Display name of the tool.
        category: frontend, backend, database, devops, cloud, ...
        description: Free-form description.
        icon_url: Optional icon image.
        website_url: Optional link to the tool's homepage.
        proficiency_level: beginner, intermediate, advanced or expert.
        years_experience: Whole years of hands-on use.
        is_featured: Whether the tool is highlighted.
    """

    __tablename__ = "tools"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    category: Mapped[str] = mapped_column(String(20), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    icon_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    website_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    proficiency_level: Mapped[str] = mapped_column(
        String(20), nullable=False, default="intermediate"
    )
    years_experience: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    is_featured: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    project_tools: Mapped[list[ProjectTool]] = relationship(
        "ProjectTool", back_populates="tool", cascade="all, delete-orphan"
    )

    @validates("identifier")
    def validate_identifier(self, key: str, value: str) -> str:
        """Tool identifiers must carry the ``tool_`` prefix."""
        return require_prefix(value, "tool_")
