"""HTTP clients used by the chat front end.

``PortfolioApiClient`` talks to this project's portfolio API and
``ChatWebhookClient`` posts user messages to the external AI webhook. Both
wrap a single ``httpx.AsyncClient``; pass ``transport=`` to route requests
through a mock or an in-process ASGI app.
"""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

import httpx

from portfolio_chat.settings import get_api_base_url, get_webhook_url

logger = logging.getLogger(__name__)


class ChatClientError(RuntimeError):
    """Base error for failures talking to a remote service."""


class PortfolioApiError(ChatClientError):
    """The portfolio API could not be reached or returned an error."""


class WebhookError(ChatClientError):
    """The chat webhook could not be reached or returned an error."""


class PortfolioApiClient:
    """Async client for ``/identifiers`` and ``/portfolio/{identifier}``."""

    def __init__(
        self,
        base_url: str | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = (base_url or get_api_base_url()).rstrip("/")
        self._http = httpx.AsyncClient(base_url=self.base_url, transport=transport)

    async def __aenter__(self) -> PortfolioApiClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def _get(self, path: str) -> httpx.Response:
        try:
            return await self._http.get(path)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise PortfolioApiError(f"Request to {path} failed: {exc}") from exc

    @staticmethod
    def _json(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as exc:
            raise PortfolioApiError(
                f"Invalid JSON from {response.request.url.path}"
            ) from exc

    async def fetch_identifiers(self) -> dict[str, list[dict[str, Any]]]:
        """Fetch the identifier list grouped by category.

        Raises:
            PortfolioApiError: On transport failure, non-2xx status or a
                malformed body.
        """
        response = await self._get("/identifiers")
        if not response.is_success:
            raise PortfolioApiError(
                f"Failed to fetch identifiers: {response.status_code} {response.reason_phrase}"
            )
        payload = self._json(response)
        if not isinstance(payload, dict):
            raise PortfolioApiError("Identifier list must be a JSON object")
        return payload

    async def fetch_item(self, identifier: str) -> dict[str, Any] | None:
        """Fetch one portfolio item.

        Returns:
            The ``{"type": ..., "data": ...}`` payload, or None on 404.

        Raises:
            PortfolioApiError: On transport failure or any other error status.
        """
        response = await self._get(f"/portfolio/{quote(identifier, safe='')}")
        if response.status_code == httpx.codes.NOT_FOUND:
            return None
        if not response.is_success:
            raise PortfolioApiError(
                f"Failed to fetch {identifier}: {response.status_code} {response.reason_phrase}"
            )
        payload = self._json(response)
        if not isinstance(payload, dict) or "type" not in payload:
            raise PortfolioApiError(f"Malformed portfolio item for {identifier}")
        return payload


class ChatWebhookClient:
    """Posts ``{"message", "sessionID"}`` to the AI webhook and reads ``output``."""

    def __init__(
        self,
        url: str | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.url = url or get_webhook_url()
        self._http = httpx.AsyncClient(transport=transport)

    async def aclose(self) -> None:
        await self._http.aclose()

    async def send(self, message: str, session_id: str) -> str | None:
        """Send one user message.

        Returns:
            The reply text, or None when the response has no string ``output``.

        Raises:
            WebhookError: If no URL is configured, the request fails, the
                status is not 2xx or the body is not JSON.
        """
        if not self.url:
            raise WebhookError("CHAT_WEBHOOK_URL is not configured")

        try:
            response = await self._http.post(
                self.url, json={"message": message, "sessionID": session_id}
            )
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise WebhookError(f"Webhook request failed: {exc}") from exc

        if not response.is_success:
            raise WebhookError(
                f"Webhook responded with {response.status_code} {response.reason_phrase}"
            )

        try:
            payload = response.json()
        except ValueError as exc:
            raise WebhookError("Webhook returned invalid JSON") from exc

        output = payload.get("output") if isinstance(payload, dict) else None
        if not isinstance(output, str):
            logger.warning("Webhook response had no usable output field")
            return None
        return output
