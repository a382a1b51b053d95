"""WorkExperience model for the portfolio owner's employment history."""

from __future__ import annotations

from datetime import date

from sqlalchemy import Boolean, Date, String, Text
from sqlalchemy.orm import Mapped, mapped_column, validates

from portfolio_chat.data.db import Base
from portfolio_chat.data.models.content_row import ContentRowMixin, require_prefix


class WorkExperience(ContentRowMixin, Base):
    """Work experience entry rendered as a work card.

    Attributes:
        company_name: Name of the company/organization.
        position_title: Job title/position.
        employment_type: full-time, part-time, contract, freelance or internship.
        location: Job location (city, state, or remote).
        start_date: Start date of employment.
        end_date: End date of employment (None if current).
        is_current: Whether this is the current job.
        description: Description of the role.
        achievements: Notable achievements in the role.
        company_logo_url: Optional logo image.
        company_website: Optional company URL.
    """

    __tablename__ = "work_experience"

    company_name: Mapped[str] = mapped_column(String(255), nullable=False)
    position_title: Mapped[str] = mapped_column(String(255), nullable=False)
    employment_type: Mapped[str] = mapped_column(String(20), nullable=False, default="full-time")
    location: Mapped[str | None] = mapped_column(String(255), nullable=True)
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    is_current: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    achievements: Mapped[str | None] = mapped_column(Text, nullable=True)
    company_logo_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    company_website: Mapped[str | None] = mapped_column(String(500), nullable=True)

    @validates("identifier")
    def validate_identifier(self, key: str, value: str) -> str:
        """Work identifiers must carry the ``work_`` prefix."""
        return require_prefix(value, "work_")
