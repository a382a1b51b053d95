"""FastAPI application entry point for the portfolio chat API."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from portfolio_chat.api.routes import health, identifiers, portfolio

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Initialize resources on startup and clean up on shutdown."""
    from portfolio_chat.data.db import dispose_engine, init_db

    init_db()
    logger.info("Portfolio content store ready")
    yield
    dispose_engine()


app = FastAPI(
    title="Portfolio Chat API",
    description="Portfolio content for the AI persona chat: identifiers and card data",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router, prefix="/api")
app.include_router(identifiers.router, prefix="/api")
app.include_router(portfolio.router, prefix="/api")


def main() -> None:
    """Start the development server."""
    import uvicorn

    from portfolio_chat.settings import get_server_address

    host, port = get_server_address()
    uvicorn.run(
        "portfolio_chat.api.main:app",
        host=host,
        port=port,
        reload=True,
    )


if __name__ == "__main__":
    main()
