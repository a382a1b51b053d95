from __future__ import annotations

from functools import partial

from textual import on
from textual.app import App, ComposeResult
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.widget import Widget
from textual.widgets import Button, Footer, Header, Input, Markdown, Static

from portfolio_chat.chat.card_resolver import PortfolioCache, preload, resolve
from portfolio_chat.chat.clients import ChatWebhookClient, PortfolioApiClient
from portfolio_chat.chat.message_renderer import (
    CardBlock,
    CardGroupBlock,
    FormattedText,
    StagedText,
    build_render_plan,
)
from portfolio_chat.chat.session import ConversationSession
from portfolio_chat.tui_rendering import render_card_markdown, render_user_markdown

SUGGESTIONS = ("Who are you?", "What do you do?", "Show me your work")
HERO_TEXT = "Hi, I'm Mark. Ask me anything about my work, projects or skills."


class CardView(Markdown):
    """Markdown card bound to a portfolio identifier."""

    def __init__(self, identifier: str, markdown: str) -> None:
        super().__init__(markdown, classes="card")
        self.identifier = identifier


class PortfolioChatApp(App[None]):
    """Terminal chat with the portfolio assistant."""

    TITLE = "Portfolio Chat"

    BINDINGS = [
        ("ctrl+l", "clear_chat", "Clear chat"),
        ("ctrl+q", "quit", "Quit"),
    ]

    CSS = """
Screen {
    layout: vertical;
    background: $background;
}

#transcript {
    height: 1fr;
    padding: 1 2;
}

#hero {
    content-align: center middle;
    text-style: bold;
    padding: 2 0 1 0;
    width: 100%;
}

#suggestions {
    height: auto;
    align-horizontal: center;
}

#suggestions Button {
    margin: 0 1;
}

.message {
    height: auto;
    margin-bottom: 1;
}

.message.user {
    background: $boost;
    border-left: thick $accent;
    padding: 0 1;
}

.card {
    border: round $primary;
    padding: 0 1;
    margin: 1 0 0 0;
    background: $panel;
}

.card-group {
    height: auto;
}

.card-group .card {
    width: 1fr;
    margin-right: 1;
}

#typing {
    height: 1;
    padding: 0 2;
    color: $text-muted;
}

#chat-input {
    dock: bottom;
}
"""

    def __init__(
        self,
        api_client: PortfolioApiClient | None = None,
        webhook: ChatWebhookClient | None = None,
    ) -> None:
        super().__init__()
        self._api = api_client or PortfolioApiClient()
        self._webhook = webhook or ChatWebhookClient()
        self._session = ConversationSession(self._webhook)
        self._cache = PortfolioCache()

    def compose(self) -> ComposeResult:
        yield Header()
        yield VerticalScroll(
            Static(HERO_TEXT, id="hero"),
            Horizontal(
                *(Button(text, classes="suggestion") for text in SUGGESTIONS),
                id="suggestions",
            ),
            id="transcript",
        )
        yield Static("", id="typing")
        yield Input(placeholder="Type your message...", id="chat-input")
        yield Footer()

    def on_mount(self) -> None:
        self.query_one("#typing", Static).display = False
        self.query_one("#chat-input", Input).focus()
        self.run_worker(self._load_portfolio(), name="preload", group="preload")

    async def on_unmount(self) -> None:
        await self._api.aclose()
        await self._webhook.aclose()

    async def _load_portfolio(self) -> None:
        await preload(self._cache, self._api)
        for card in self.query(CardView):
            card.update(render_card_markdown(resolve(card.identifier, self._cache)))

    # ---------------------------------------------------------------------
    # EVENTS
    # ---------------------------------------------------------------------

    @on(Input.Submitted, "#chat-input")
    def handle_submit(self, event: Input.Submitted) -> None:
        text = event.value
        event.input.value = ""
        self._submit(text)

    @on(Button.Pressed, ".suggestion")
    def handle_suggestion(self, event: Button.Pressed) -> None:
        self._submit(str(event.button.label))

    def action_clear_chat(self) -> None:
        if not self._session.clear():
            self.notify("Wait for the reply before clearing the chat.", severity="warning")
            return
        self.query(".message").remove()
        self.query_one("#hero", Static).display = True
        self.query_one("#suggestions", Horizontal).display = True

    # ---------------------------------------------------------------------
    # CHAT FLOW
    # ---------------------------------------------------------------------

    def _submit(self, text: str) -> None:
        if not text.strip() or not self._session.can_send:
            return
        self.run_worker(self._exchange(text), name="exchange", group="chat")

    async def _exchange(self, text: str) -> None:
        chat_input = self.query_one("#chat-input", Input)
        typing = self.query_one("#typing", Static)

        self.query_one("#hero", Static).display = False
        self.query_one("#suggestions", Horizontal).display = False
        self._mount_message(text.strip(), is_user=True)

        chat_input.disabled = True
        typing.update("Mark is typing...")
        typing.display = True
        try:
            reply = await self._session.send(text)
        finally:
            typing.display = False
            chat_input.disabled = False
            chat_input.focus()

        if reply is not None:
            self._mount_message(reply.content, is_user=False)

    def _card(self, identifier: str) -> CardView:
        return CardView(identifier, render_card_markdown(resolve(identifier, self._cache)))

    def _schedule(self, widget: Widget, delay: float) -> None:
        if delay <= 0:
            return
        widget.display = False
        self.set_timer(delay, partial(self._reveal, widget))

    def _reveal(self, widget: Widget) -> None:
        widget.display = True
        self.query_one("#transcript", VerticalScroll).scroll_end(animate=False)

    def _mount_message(self, content: str, is_user: bool) -> None:
        children: list[Widget] = []
        for block in build_render_plan(content, is_user):
            if isinstance(block, FormattedText):
                children.append(Markdown(render_user_markdown(block.tokens)))
            elif isinstance(block, StagedText):
                for paragraph in block.paragraphs:
                    widget = Markdown(paragraph.text)
                    self._schedule(widget, paragraph.delay)
                    children.append(widget)
            elif isinstance(block, CardBlock):
                widget = self._card(block.identifier)
                self._schedule(widget, block.delay)
                children.append(widget)
            elif isinstance(block, CardGroupBlock):
                group = Horizontal(
                    *(self._card(identifier) for identifier in block.identifiers),
                    classes="card-group",
                )
                self._schedule(group, block.delay)
                children.append(group)

        if not children:
            return
        role = "user" if is_user else "assistant"
        transcript = self.query_one("#transcript", VerticalScroll)
        transcript.mount(Vertical(*children, classes=f"message {role}"))
        transcript.scroll_end(animate=False)


def main() -> None:
    PortfolioChatApp().run()
