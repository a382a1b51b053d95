"""Client-side chat: session, message rendering and card resolution."""

from portfolio_chat.chat.card_resolver import (
    CardKind,
    CardState,
    CardViewModel,
    PortfolioCache,
    preload,
    resolve,
)
from portfolio_chat.chat.clients import (
    ChatClientError,
    ChatWebhookClient,
    PortfolioApiClient,
    PortfolioApiError,
    WebhookError,
)
from portfolio_chat.chat.message_renderer import build_render_plan, format_user_text, render
from portfolio_chat.chat.session import ConversationSession, Message, SessionState

__all__ = [
    "CardKind",
    "CardState",
    "CardViewModel",
    "ChatClientError",
    "ChatWebhookClient",
    "ConversationSession",
    "Message",
    "PortfolioApiClient",
    "PortfolioApiError",
    "PortfolioCache",
    "SessionState",
    "WebhookError",
    "build_render_plan",
    "format_user_text",
    "preload",
    "render",
    "resolve",
]
