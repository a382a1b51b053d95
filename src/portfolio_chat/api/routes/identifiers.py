"""Identifier vocabulary routes for the API."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError

from portfolio_chat.api.schemas.portfolio import IdentifierEntryResponse, TagVocabularyResponse
from portfolio_chat.services.content_store import IdentifierEntry, fetch_all_identifiers
from portfolio_chat.services.tag_vocabulary import build_tag_vocabulary

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/identifiers", tags=["identifiers"])


def _load_identifiers() -> dict[str, list[IdentifierEntry]]:
    try:
        return fetch_all_identifiers()
    except SQLAlchemyError as exc:
        logger.exception("Failed to fetch identifiers")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Portfolio content is temporarily unavailable.",
        ) from exc


@router.get(
    "",
    response_model=dict[str, list[IdentifierEntryResponse]],
    summary="List identifiers",
    description=(
        "Return every active identifier grouped by category, each with the "
        "description handed to the AI persona."
    ),
)
def list_identifiers() -> dict[str, list[IdentifierEntry]]:
    """List all active identifiers by category."""
    return _load_identifiers()


@router.get(
    "/vocabulary",
    response_model=TagVocabularyResponse,
    summary="Tag vocabulary prompt",
    description="Return the identifier list formatted as instructions for the AI persona.",
)
def get_tag_vocabulary() -> TagVocabularyResponse:
    """Return the prompt fragment describing the allowed card tags."""
    return TagVocabularyResponse(vocabulary=build_tag_vocabulary(_load_identifiers()))
