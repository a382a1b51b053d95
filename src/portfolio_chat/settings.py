"""Runtime configuration read from the environment.

Environment variables are loaded from a ``.env`` file (if present) when this
module is imported.
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

load_dotenv()

DEFAULT_API_BASE_URL = "http://localhost:8000/api"
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8000


def get_api_base_url() -> str:
    """Return the base URL of the portfolio API used by the chat client."""
    return os.getenv("PORTFOLIO_API_URL", DEFAULT_API_BASE_URL).rstrip("/")


def get_webhook_url() -> str | None:
    """Return the chat webhook URL, or None when it is not configured."""
    return os.getenv("CHAT_WEBHOOK_URL") or None


def get_environment() -> str:
    """Return the deployment environment name reported by the health check."""
    return os.getenv("APP_ENV", "development")


def get_server_address() -> tuple[str, int]:
    """Return the (host, port) pair the API server binds to."""
    host = os.getenv("HOST", DEFAULT_HOST)
    port = int(os.getenv("PORT", str(DEFAULT_PORT)))
    return host, port
