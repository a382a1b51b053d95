"""Conversation state for one chat window."""

from __future__ import annotations

import logging
import secrets
import string
import time
import uuid
from dataclasses import dataclass, field
from enum import StrEnum

from portfolio_chat.chat.clients import ChatClientError, ChatWebhookClient

logger = logging.getLogger(__name__)

FALLBACK_REPLY = "Sorry, something went wrong. Please try again later."
EMPTY_REPLY = "Sorry, I didn't get a valid response."

_TOKEN_ALPHABET = string.ascii_lowercase + string.digits


class SessionState(StrEnum):
    IDLE = "idle"
    AWAITING_REPLY = "awaiting_reply"
    ERROR = "error"


def _now_ms() -> int:
    return int(time.time() * 1000)


def new_session_id() -> str:
    """Return a fresh token of the form ``session_<epoch-ms>_<9 chars>``."""
    suffix = "".join(secrets.choice(_TOKEN_ALPHABET) for _ in range(9))
    return f"session_{_now_ms()}_{suffix}"


@dataclass(frozen=True)
class Message:
    content: str
    is_user: bool
    id: str = field(default_factory=lambda: uuid.uuid4().hex)
    timestamp: int = field(default_factory=_now_ms)


class ConversationSession:
    """Ordered transcript plus the token the webhook uses to keep context.

    Only one reply can be in flight: ``send`` is ignored unless the session is
    idle. Failures never escape ``send``; they become a fallback assistant
    message.
    """

    def __init__(self, webhook: ChatWebhookClient | None = None) -> None:
        self._webhook = webhook or ChatWebhookClient()
        self._messages: list[Message] = []
        self.session_id = new_session_id()
        self.state = SessionState.IDLE

    @property
    def messages(self) -> tuple[Message, ...]:
        return tuple(self._messages)

    @property
    def can_send(self) -> bool:
        return self.state is SessionState.IDLE

    async def send(self, text: str) -> Message | None:
        """Send ``text`` and append the reply.

        Returns:
            The assistant message that was appended, or None if nothing was
            sent (blank text or a reply already pending).
        """
        content = text.strip()
        if not content or not self.can_send:
            return None

        self._messages.append(Message(content=content, is_user=True))
        self.state = SessionState.AWAITING_REPLY

        try:
            output = await self._webhook.send(content, self.session_id)
        except ChatClientError as exc:
            self.state = SessionState.ERROR
            logger.error("Chat webhook call failed: %s", exc)
            reply = Message(content=FALLBACK_REPLY, is_user=False)
        else:
            reply = Message(content=output or EMPTY_REPLY, is_user=False)
        finally:
            self.state = SessionState.IDLE

        self._messages.append(reply)
        return reply

    def clear(self) -> bool:
        """Empty the transcript and start a new session token.

        Returns:
            False (and changes nothing) while a reply is pending.
        """
        if not self.can_send:
            return False
        self._messages.clear()
        self.session_id = new_session_id()
        logger.info("Started new chat session %s", self.session_id)
        return True
