"""ORM model for gallery images (screenshots, designs, photos)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqlalchemy import JSON, Boolean, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship, validates

from portfolio_chat.data.db import Base
from portfolio_chat.data.models.content_row import ContentRowMixin, require_prefix

if TYPE_CHECKING:
    from portfolio_chat.data.models.project import Project


class GalleryItem(ContentRowMixin, Base):
    """An image or video shown in a gallery card.

    Attributes:
        title: Caption title.
        description: Longer caption.
        image_url: Location of the media file.
        alt_text: Accessible description of the image.
        category: screenshot, design, photo, video, ...
        extra_metadata: Arbitrary JSON stored in the ``metadata`` column.
        project_id: Optional project the item illustrates (SET NULL on delete).
        is_featured: Whether the item is highlighted.
    """

    __tablename__ = "gallery"

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    image_url: Mapped[str] = mapped_column(String(500), nullable=False)
    alt_text: Mapped[str | None] = mapped_column(String(255), nullable=True)
    category: Mapped[str] = mapped_column(String(20), nullable=False, default="screenshot")
    # "metadata" is reserved on declarative classes, hence the attribute name.
    extra_metadata: Mapped[dict[str, Any] | None] = mapped_column("metadata", JSON, nullable=True)
    project_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("projects.id", ondelete="SET NULL"),
        nullable=True,
    )
    is_featured: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    project: Mapped[Project | None] = relationship("Project", back_populates="gallery_items")

    @validates("identifier")
    def validate_identifier(self, key: str, value: str) -> str:
        """Gallery identifiers must carry the ``gallery_`` prefix."""
        return require_prefix(value, "gallery_")
