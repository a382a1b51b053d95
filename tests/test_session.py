from __future__ import annotations

import asyncio
import json
import re
from collections.abc import Callable

import httpx

from portfolio_chat.chat.clients import ChatWebhookClient
from portfolio_chat.chat.session import (
    EMPTY_REPLY,
    FALLBACK_REPLY,
    ConversationSession,
    SessionState,
    new_session_id,
)

WEBHOOK_URL = "http://hooks.test/chat"


def _session(handler) -> tuple[ConversationSession, list[dict]]:
    """Session whose webhook is served by ``handler``; returns the request log too."""
    requests: list[dict] = []

    def recording(request: httpx.Request) -> httpx.Response:
        requests.append(json.loads(request.content))
        return handler(request)

    webhook = ChatWebhookClient(WEBHOOK_URL, transport=httpx.MockTransport(recording))
    return ConversationSession(webhook), requests


def _reply(output: object) -> Callable[[httpx.Request], httpx.Response]:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"output": output})

    return handler


def test_session_id_format() -> None:
    assert re.fullmatch(r"session_\d+_[a-z0-9]{9}", new_session_id())
    assert new_session_id() != new_session_id()


def test_send_appends_user_and_assistant_messages() -> None:
    session, requests = _session(_reply("Hi! <aboutmecard>"))

    reply = asyncio.run(session.send("  Who are you?  "))

    assert reply is not None
    assert reply.content == "Hi! <aboutmecard>"
    assert [(m.content, m.is_user) for m in session.messages] == [
        ("Who are you?", True),
        ("Hi! <aboutmecard>", False),
    ]
    assert requests == [{"message": "Who are you?", "sessionID": session.session_id}]
    assert session.state is SessionState.IDLE


def test_message_ids_are_unique() -> None:
    session, _ = _session(_reply("ok"))
    asyncio.run(session.send("one"))
    asyncio.run(session.send("two"))
    ids = [m.id for m in session.messages]
    assert len(ids) == len(set(ids)) == 4


def test_session_id_is_stable_across_sends() -> None:
    session, requests = _session(_reply("ok"))
    asyncio.run(session.send("one"))
    asyncio.run(session.send("two"))
    assert {r["sessionID"] for r in requests} == {session.session_id}


def test_blank_message_is_ignored() -> None:
    session, requests = _session(_reply("unused"))
    assert asyncio.run(session.send("   \n ")) is None
    assert session.messages == ()
    assert requests == []


def test_send_while_awaiting_reply_is_ignored() -> None:
    session, requests = _session(_reply("unused"))
    session.state = SessionState.AWAITING_REPLY
    assert asyncio.run(session.send("hello")) is None
    assert session.messages == ()
    assert requests == []


def test_missing_output_gives_empty_reply_message() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"something": "else"})

    session, _ = _session(handler)
    reply = asyncio.run(session.send("hello"))
    assert reply is not None
    assert reply.content == EMPTY_REPLY


def test_empty_output_gives_empty_reply_message() -> None:
    session, _ = _session(_reply(""))
    reply = asyncio.run(session.send("hello"))
    assert reply is not None
    assert reply.content == EMPTY_REPLY


def test_http_error_gives_fallback_and_returns_to_idle() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, text="Internal Server Error")

    session, _ = _session(handler)
    reply = asyncio.run(session.send("hello"))

    assert reply is not None
    assert reply.content == FALLBACK_REPLY
    assert not reply.is_user
    assert session.state is SessionState.IDLE
    assert session.can_send


def test_invalid_json_gives_fallback() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="<html>not json</html>")

    session, _ = _session(handler)
    reply = asyncio.run(session.send("hello"))
    assert reply is not None
    assert reply.content == FALLBACK_REPLY


def test_transport_error_gives_fallback() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    session, _ = _session(handler)
    reply = asyncio.run(session.send("hello"))
    assert reply is not None
    assert reply.content == FALLBACK_REPLY


def test_missing_webhook_url_gives_fallback(monkeypatch) -> None:
    monkeypatch.delenv("CHAT_WEBHOOK_URL", raising=False)
    session = ConversationSession(ChatWebhookClient())
    reply = asyncio.run(session.send("hello"))
    assert reply is not None
    assert reply.content == FALLBACK_REPLY


def test_clear_resets_transcript_and_token() -> None:
    session, _ = _session(_reply("ok"))
    asyncio.run(session.send("hello"))
    old_id = session.session_id

    assert session.clear() is True
    assert session.messages == ()
    assert session.session_id != old_id


def test_clear_is_refused_while_awaiting_reply() -> None:
    session, _ = _session(_reply("ok"))
    asyncio.run(session.send("hello"))
    old_id = session.session_id
    session.state = SessionState.AWAITING_REPLY

    assert session.clear() is False
    assert len(session.messages) == 2
    assert session.session_id == old_id


def test_malformed_webhook_url_gives_fallback_and_stays_usable() -> None:
    session = ConversationSession(ChatWebhookClient("http://[::1"))

    reply = asyncio.run(session.send("hello"))

    assert reply is not None
    assert reply.content == FALLBACK_REPLY
    assert [m.content for m in session.messages] == ["hello", FALLBACK_REPLY]
    assert session.state is SessionState.IDLE
    assert session.can_send
    assert session.clear() is True


def test_concurrent_send_only_one_request_in_flight() -> None:
    requests: list[dict] = []

    async def slow_reply(request: httpx.Request) -> httpx.Response:
        requests.append(json.loads(request.content))
        await asyncio.sleep(0.01)
        return httpx.Response(200, json={"output": "first reply"})

    webhook = ChatWebhookClient(WEBHOOK_URL, transport=httpx.MockTransport(slow_reply))
    session = ConversationSession(webhook)

    async def run():
        return await asyncio.gather(session.send("first"), session.send("second"))

    first, second = asyncio.run(run())

    assert first is not None
    assert first.content == "first reply"
    assert second is None
    assert [r["message"] for r in requests] == ["first"]
    assert [m.content for m in session.messages] == ["first", "first reply"]
    assert session.state is SessionState.IDLE
