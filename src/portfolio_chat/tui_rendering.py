from __future__ import annotations

from collections.abc import Iterable
from datetime import date
from typing import Any

from portfolio_chat.chat.card_resolver import CardKind, CardState, CardViewModel
from portfolio_chat.chat.message_renderer import Bold, LineBreak, Link, TextRun

_PROFICIENCY_BAR_WIDTH = 20


def format_month(value: object) -> str:
    """Format an ISO date (or date) as ``Jan 2023``; pass anything else through."""
    if isinstance(value, date):
        parsed = value
    else:
        try:
            parsed = date.fromisoformat(str(value)[:10])
        except ValueError:
            return str(value)
    return parsed.strftime("%b %Y")


def proficiency_bar(percentage: object) -> str:
    try:
        pct = max(0, min(100, int(percentage)))  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return ""
    filled = round(pct / 100 * _PROFICIENCY_BAR_WIDTH)
    return f"`{'█' * filled}{'░' * (_PROFICIENCY_BAR_WIDTH - filled)}` {pct}%"


def _links(pairs: Iterable[tuple[str, object]]) -> str:
    return " · ".join(f"[{label}]({url})" for label, url in pairs if url)


def _work(data: dict[str, Any]) -> list[str]:
    parts = [f"### {data.get('position_title', 'Role')}"]
    company = data.get("company_name")
    if company:
        parts.append(f"**{company}**")

    start = data.get("start_date")
    end = "Present" if data.get("is_current") else data.get("end_date")
    if start:
        period = f"{format_month(start)} - {format_month(end) if end else 'Present'}"
        meta = [period, data.get("employment_type"), data.get("location")]
        parts.append(" | ".join(str(m) for m in meta if m))

    if data.get("description"):
        parts.append("")
        parts.append(str(data["description"]))
    if data.get("achievements"):
        parts.append("")
        parts.append(f"**Achievements:** {data['achievements']}")
    website = _links([("Website", data.get("company_website"))])
    if website:
        parts.append("")
        parts.append(website)
    return parts


def _project(data: dict[str, Any]) -> list[str]:
    parts = [f"### {data.get('title', 'Project')}"]
    meta = [data.get("project_type"), data.get("status")]
    meta_line = " | ".join(str(m) for m in meta if m)
    if meta_line:
        parts.append(f"_{meta_line}_")
    description = data.get("short_description") or data.get("description")
    if description:
        parts.append("")
        parts.append(str(description))
    stack = data.get("tech_stack") or []
    if stack:
        parts.append("")
        parts.append("**Stack:** " + ", ".join(f"`{t}`" for t in stack))
    links = _links(
        [
            ("GitHub", data.get("github_url")),
            ("Live demo", data.get("live_demo_url")),
            ("Case study", data.get("case_study_url")),
        ]
    )
    if links:
        parts.append("")
        parts.append(links)
    return parts


def _tool(data: dict[str, Any]) -> list[str]:
    parts = [f"### {data.get('name', 'Tool')}"]
    meta = [data.get("category"), data.get("proficiency_level")]
    years = data.get("years_experience")
    if years:
        meta.append(f"{years} yr{'s' if years != 1 else ''}")
    meta_line = " | ".join(str(m) for m in meta if m)
    if meta_line:
        parts.append(f"_{meta_line}_")
    if data.get("description"):
        parts.append("")
        parts.append(str(data["description"]))
    website = _links([("Website", data.get("website_url"))])
    if website:
        parts.append("")
        parts.append(website)
    return parts


def _skill(data: dict[str, Any]) -> list[str]:
    parts = [f"### {data.get('name', 'Skill')}"]
    if data.get("category"):
        parts.append(f"_{data['category']}_")
    bar = proficiency_bar(data.get("proficiency_percentage"))
    if bar:
        parts.append("")
        parts.append(bar)
    if data.get("description"):
        parts.append("")
        parts.append(str(data["description"]))
    return parts


def _gallery(data: dict[str, Any]) -> list[str]:
    parts = [f"### {data.get('title', 'Gallery')}"]
    if data.get("description"):
        parts.append(str(data["description"]))
    if data.get("image_url"):
        parts.append("")
        parts.append(f"[View image]({data['image_url']})")
    return parts


def _about(data: dict[str, Any]) -> list[str]:
    parts = [f"## {data.get('name', '')}".rstrip()]
    if data.get("role"):
        parts.append(f"**{data['role']}**")
    if data.get("bio"):
        parts.append("")
        parts.append(str(data["bio"]))
    return parts


def _generic(data: dict[str, Any]) -> list[str]:
    title = data.get("title") or data.get("name") or "Portfolio item"
    parts = [f"### {title}"]
    if data.get("description"):
        parts.append(str(data["description"]))
    return parts


_RENDERERS = {
    CardKind.WORK_EXPERIENCE: _work,
    CardKind.PROJECT: _project,
    CardKind.TOOL: _tool,
    CardKind.SKILL: _skill,
    CardKind.GALLERY: _gallery,
    CardKind.ABOUT: _about,
}


def render_card_markdown(card: CardViewModel) -> str:
    """Render a card view model as Markdown for a Textual ``Markdown`` widget."""
    if card.state is CardState.LOADING:
        return f"_{card.message or 'Loading...'}_"
    if card.state is CardState.ERROR:
        parts = [f"**{card.message or f'Could not load {card.identifier}'}**"]
        if card.detail:
            parts.append("")
            parts.append(f"_{card.detail}_")
        return "\n".join(parts)

    renderer = _RENDERERS.get(card.kind, _generic)
    return "\n".join(renderer(card.data))


def render_user_markdown(tokens: Iterable[object]) -> str:
    """Render formatted user-text tokens as Markdown."""
    out: list[str] = []
    for token in tokens:
        if isinstance(token, LineBreak):
            out.append("  \n")
        elif isinstance(token, Bold):
            out.append(f"**{token.text}**")
        elif isinstance(token, Link):
            out.append(f"[{token.text}]({token.url})")
        elif isinstance(token, TextRun):
            out.append(token.text)
    return "".join(out)
