"""Health check routes."""

from __future__ import annotations

from datetime import UTC, datetime

from fastapi import APIRouter

from portfolio_chat.api.schemas.common import HealthResponse
from portfolio_chat.data.db import check_connection
from portfolio_chat.settings import get_environment

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Return the current status of the API and its database."""
    return HealthResponse(
        status="OK",
        message="API server is running",
        environment=get_environment(),
        timestamp=datetime.now(UTC),
        database="connected" if check_connection() else "unavailable",
    )
