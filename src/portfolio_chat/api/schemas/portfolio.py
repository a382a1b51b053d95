"""Pydantic schemas for the public portfolio endpoints."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class IdentifierEntryResponse(BaseModel):
    """An identifier the AI persona may emit, with its prompt description."""

    identifier: str
    ai_description: str


class PortfolioItemResponse(BaseModel):
    """Tagged portfolio item: ``type`` selects the card, ``data`` fills it."""

    type: str = Field(description="work_experience, project, tool, skill, gallery or about")
    data: dict[str, Any]


class TagVocabularyResponse(BaseModel):
    """Prompt fragment listing every tag the AI persona may use."""

    vocabulary: str
