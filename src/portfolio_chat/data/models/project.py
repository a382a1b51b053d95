"""ORM models for projects and their tool/skill associations."""

from __future__ import annotations

from datetime import UTC, date, datetime
from typing import TYPE_CHECKING

from sqlalchemy import (
    JSON,
    Boolean,
    CheckConstraint,
    Date,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship, validates

from portfolio_chat.constants.identifiers import ProjectStatus
from portfolio_chat.data.db import Base
from portfolio_chat.data.models.content_row import ContentRowMixin, require_prefix

if TYPE_CHECKING:
    from portfolio_chat.data.models.gallery_item import GalleryItem
    from portfolio_chat.data.models.skill import Skill
    from portfolio_chat.data.models.tool import Tool

_STATUS_VALUES = ", ".join(f"'{status.value}'" for status in ProjectStatus)


class Project(ContentRowMixin, Base):
    """A portfolio project rendered as a project card.

    Attributes:
        title: Display title.
        slug: Unique URL-friendly name.
        short_description: One-line summary shown on the card.
        full_description: Long-form description.
        project_type: web-app, mobile-app, api, ai-project or tool.
        status: completed, in-progress, planning or archived.
        github_url: Optional source repository link.
        live_demo_url: Optional demo link.
        featured_image_url: Optional hero image.
        tech_stack: Ordered list of technology names.
        start_date: Optional start date.
        end_date: Optional end date.
        is_featured: Whether the project is highlighted.
    """

    __tablename__ = "projects"
    __table_args__ = (CheckConstraint(f"status IN ({_STATUS_VALUES})", name="ck_projects_status"),)

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    slug: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    short_description: Mapped[str | None] = mapped_column(Text, nullable=True)
    full_description: Mapped[str | None] = mapped_column(Text, nullable=True)
    project_type: Mapped[str] = mapped_column(String(20), nullable=False, default="web-app")
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default=ProjectStatus.COMPLETED.value
    )
    github_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    live_demo_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    featured_image_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    tech_stack: Mapped[list[str] | None] = mapped_column(JSON, nullable=True)
    start_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    end_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    is_featured: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    project_tools: Mapped[list[ProjectTool]] = relationship(
        "ProjectTool", back_populates="project", cascade="all, delete-orphan"
    )
    project_skills: Mapped[list[ProjectSkill]] = relationship(
        "ProjectSkill", back_populates="project", cascade="all, delete-orphan"
    )
    gallery_items: Mapped[list[GalleryItem]] = relationship(
        "GalleryItem", back_populates="project"
    )

    @validates("identifier")
    def validate_identifier(self, key: str, value: str) -> str:
        """Project identifiers must carry the ``project_`` prefix."""
        return require_prefix(value, "project_")


class ProjectTool(Base):
    """Many-to-many association between projects and tools."""

    __tablename__ = "project_tools"
    __table_args__ = (UniqueConstraint("project_id", "tool_id", name="uq_project_tool"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    project_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("projects.id", ondelete="CASCADE"), nullable=False
    )
    tool_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("tools.id", ondelete="CASCADE"), nullable=False
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=lambda: datetime.now(UTC)
    )

    project: Mapped[Project] = relationship("Project", back_populates="project_tools")
    tool: Mapped[Tool] = relationship("Tool", back_populates="project_tools")


class ProjectSkill(Base):
    """Many-to-many association between projects and skills."""

    __tablename__ = "project_skills"
    __table_args__ = (UniqueConstraint("project_id", "skill_id", name="uq_project_skill"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    project_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("projects.id", ondelete="CASCADE"), nullable=False
    )
    skill_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("skills.id", ondelete="CASCADE"), nullable=False
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=lambda: datetime.now(UTC)
    )

    project: Mapped[Project] = relationship("Project", back_populates="project_skills")
    skill: Mapped[Skill] = relationship("Skill", back_populates="project_skills")
