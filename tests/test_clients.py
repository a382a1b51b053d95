from __future__ import annotations

import asyncio

import httpx
import pytest

from portfolio_chat.api.main import app
from portfolio_chat.chat.card_resolver import CardKind, CardState, resolve
from portfolio_chat.chat.clients import (
    ChatClientError,
    ChatWebhookClient,
    PortfolioApiClient,
    PortfolioApiError,
    WebhookError,
)
from portfolio_chat.chat.portfolio_cache import PortfolioCache, preload


def _asgi_client() -> PortfolioApiClient:
    return PortfolioApiClient("http://testserver/api", transport=httpx.ASGITransport(app=app))


def test_error_hierarchy() -> None:
    assert issubclass(PortfolioApiError, ChatClientError)
    assert issubclass(WebhookError, ChatClientError)
    assert issubclass(ChatClientError, RuntimeError)


def test_fetch_item_and_missing_item_against_app(seeded_db: None) -> None:
    async def run():
        async with _asgi_client() as client:
            return (
                await client.fetch_item("skill_ai"),
                await client.fetch_item("skill_nonexistent"),
            )

    found, missing = asyncio.run(run())
    assert found is not None
    assert found["type"] == "skill"
    assert found["data"]["proficiency_percentage"] == 85
    assert missing is None


def test_preload_from_app_fills_every_listed_identifier(seeded_db: None) -> None:
    cache = PortfolioCache()

    async def run() -> None:
        async with _asgi_client() as client:
            await preload(cache, client)

    asyncio.run(run())

    # 2 work + 2 projects + 5 tools + 4 skills + 2 gallery + about
    assert len(cache) == 16
    card = resolve("project_portfolio", cache)
    assert card.state is CardState.READY
    assert card.kind is CardKind.PROJECT
    assert card.data["status"] == "in-progress"

    missing = resolve("skill_nonexistent", cache)
    assert missing.state is CardState.ERROR
    assert missing.message == "Could not load skill_nonexistent"


def test_fetch_identifiers_http_error() -> None:
    transport = httpx.MockTransport(lambda request: httpx.Response(503))

    async def run():
        async with PortfolioApiClient("http://api.test/api", transport=transport) as client:
            await client.fetch_identifiers()

    with pytest.raises(PortfolioApiError, match="503"):
        asyncio.run(run())


def test_fetch_identifiers_rejects_non_object_body() -> None:
    transport = httpx.MockTransport(lambda request: httpx.Response(200, json=["a", "b"]))

    async def run():
        async with PortfolioApiClient("http://api.test/api", transport=transport) as client:
            await client.fetch_identifiers()

    with pytest.raises(PortfolioApiError):
        asyncio.run(run())


def test_fetch_item_quotes_identifier() -> None:
    seen: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request.url.raw_path.decode())
        return httpx.Response(200, json={"type": "tool", "data": {"name": "C#"}})

    async def run():
        async with PortfolioApiClient(
            "http://api.test/api", transport=httpx.MockTransport(handler)
        ) as client:
            return await client.fetch_item("tool_c#/net")

    item = asyncio.run(run())
    assert item == {"type": "tool", "data": {"name": "C#"}}
    assert seen == ["/api/portfolio/tool_c%23%2Fnet"]


def test_webhook_posts_message_and_session_id() -> None:
    captured: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        captured.append(request)
        return httpx.Response(200, json={"output": "Hello <aboutmecard>"})

    webhook = ChatWebhookClient("http://hooks.test/chat", transport=httpx.MockTransport(handler))
    output = asyncio.run(webhook.send("Who are you?", "session_1_abcdefghi"))

    assert output == "Hello <aboutmecard>"
    assert captured[0].method == "POST"
    assert captured[0].url == "http://hooks.test/chat"


def test_webhook_non_string_output_is_none() -> None:
    transport = httpx.MockTransport(lambda request: httpx.Response(200, json={"output": 42}))
    webhook = ChatWebhookClient("http://hooks.test/chat", transport=transport)
    assert asyncio.run(webhook.send("hi", "session_1_abcdefghi")) is None


def test_webhook_error_status_raises() -> None:
    transport = httpx.MockTransport(lambda request: httpx.Response(502))
    webhook = ChatWebhookClient("http://hooks.test/chat", transport=transport)
    with pytest.raises(WebhookError, match="502"):
        asyncio.run(webhook.send("hi", "session_1_abcdefghi"))
