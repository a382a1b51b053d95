"""Shared Pydantic schemas."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Liveness payload of GET /api/health."""

    status: str
    message: str
    environment: str
    timestamp: datetime
    database: str
