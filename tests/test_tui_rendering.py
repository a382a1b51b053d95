from __future__ import annotations

from portfolio_chat.chat.card_resolver import CardKind, CardState, CardViewModel
from portfolio_chat.chat.message_renderer import format_user_text
from portfolio_chat.tui_rendering import (
    format_month,
    proficiency_bar,
    render_card_markdown,
    render_user_markdown,
)


def _ready(kind: CardKind, data: dict) -> CardViewModel:
    return CardViewModel(identifier="x_id", state=CardState.READY, kind=kind, data=data)


def test_format_month() -> None:
    assert format_month("2023-01-15") == "Jan 2023"
    assert format_month("2024-06-01T10:00:00") == "Jun 2024"
    assert format_month("sometime") == "sometime"


def test_proficiency_bar_clamps() -> None:
    assert proficiency_bar(85).endswith("85%")
    assert proficiency_bar(150).endswith("100%")
    assert proficiency_bar(None) == ""


def test_render_work_card() -> None:
    text = render_card_markdown(
        _ready(
            CardKind.WORK_EXPERIENCE,
            {
                "position_title": "Senior Full-Stack Developer",
                "company_name": "Tech Innovations Inc.",
                "start_date": "2023-01-15",
                "is_current": True,
                "location": "Remote",
                "achievements": "Built a chatbot platform",
            },
        )
    )
    assert "### Senior Full-Stack Developer" in text
    assert "**Tech Innovations Inc.**" in text
    assert "Jan 2023 - Present" in text
    assert "Built a chatbot platform" in text


def test_render_project_card_links_and_stack() -> None:
    text = render_card_markdown(
        _ready(
            CardKind.PROJECT,
            {
                "title": "AI Chatbot SaaS Platform",
                "status": "completed",
                "tech_stack": ["React", "Docker"],
                "github_url": "https://github.com/me/chatbot",
                "live_demo_url": None,
            },
        )
    )
    assert "### AI Chatbot SaaS Platform" in text
    assert "`React`, `Docker`" in text
    assert "[GitHub](https://github.com/me/chatbot)" in text
    assert "Live demo" not in text


def test_render_skill_card_has_bar() -> None:
    text = render_card_markdown(
        _ready(CardKind.SKILL, {"name": "AI Development", "proficiency_percentage": 85})
    )
    assert "### AI Development" in text
    assert "85%" in text


def test_render_about_card() -> None:
    text = render_card_markdown(
        _ready(CardKind.ABOUT, {"name": "Mark", "role": "Developer", "bio": "Hello."})
    )
    assert text.startswith("## Mark")
    assert "**Developer**" in text
    assert "Hello." in text


def test_render_unknown_card_is_generic() -> None:
    text = render_card_markdown(_ready(CardKind.UNKNOWN, {"title": "Odd", "description": "?"}))
    assert text == "### Odd\n?"


def test_render_loading_and_error_cards() -> None:
    loading = CardViewModel(
        identifier="tool_react", state=CardState.LOADING, message="Loading tool_react..."
    )
    assert render_card_markdown(loading) == "_Loading tool_react..._"

    error = CardViewModel(
        identifier="skill_ai",
        state=CardState.ERROR,
        message="Could not load skill_ai",
        detail="No data found for identifier: skill_ai",
    )
    text = render_card_markdown(error)
    assert "**Could not load skill_ai**" in text
    assert "No data found" in text


def test_render_user_markdown() -> None:
    tokens = format_user_text("Hi **there**\n[repo](https://example.com/r)")
    assert render_user_markdown(tokens) == "Hi **there**  \n[repo](https://example.com/r)"
