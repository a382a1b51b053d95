"""Portfolio item routes for the API."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError

from portfolio_chat.api.schemas.portfolio import PortfolioItemResponse
from portfolio_chat.services.content_store import fetch_portfolio_item

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/portfolio", tags=["portfolio"])


@router.get(
    "/{identifier}",
    response_model=PortfolioItemResponse,
    summary="Get a portfolio item",
    description=(
        "Resolve an identifier such as project_chatbot to its content. "
        "aboutmecard always returns the fixed profile payload."
    ),
)
def get_portfolio_item(identifier: str) -> PortfolioItemResponse:
    """Return the tagged portfolio item for an identifier."""
    try:
        item = fetch_portfolio_item(identifier)
    except SQLAlchemyError as exc:
        logger.exception("Failed to fetch portfolio item %s", identifier)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Portfolio content is temporarily unavailable.",
        ) from exc

    if item is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Portfolio item not found",
        )
    return PortfolioItemResponse(type=item["type"], data=item["data"])
