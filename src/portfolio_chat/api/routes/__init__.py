"""Route handlers for the API."""

from portfolio_chat.api.routes import health, identifiers, portfolio

__all__ = [
    "health",
    "identifiers",
    "portfolio",
]
