"""ORM model for skills shown as skill cards."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import Boolean, CheckConstraint, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship, validates

from portfolio_chat.data.db import Base
from portfolio_chat.data.models.content_row import ContentRowMixin, require_prefix

if TYPE_CHECKING:
    from portfolio_chat.data.models.project import ProjectSkill


class Skill(ContentRowMixin, Base):
    """A technical or soft skill.

    Attributes:
        name: Display name of the skill.
        category: technical or soft.
        description: Free-form description.
        proficiency_percentage: Self-assessed proficiency, 0-100.
        skill_type: programming, framework, soft-skill, ...
        is_featured: Whether the skill is highlighted.
    """

    __tablename__ = "skills"
    __table_args__ = (
        CheckConstraint(
            "proficiency_percentage >= 0 AND proficiency_percentage <= 100",
            name="ck_skills_proficiency_range",
        ),
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    category: Mapped[str] = mapped_column(String(20), nullable=False, default="technical")
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    proficiency_percentage: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    skill_type: Mapped[str] = mapped_column(String(20), nullable=False, default="programming")
    is_featured: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    project_skills: Mapped[list[ProjectSkill]] = relationship(
        "ProjectSkill", back_populates="skill", cascade="all, delete-orphan"
    )

    @validates("identifier")
    def validate_identifier(self, key: str, value: str) -> str:
        """Skill identifiers must carry the ``skill_`` prefix."""
        return require_prefix(value, "skill_")
