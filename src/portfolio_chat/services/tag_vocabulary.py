"""Prompt fragment describing which card tags the AI persona may emit."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from portfolio_chat.constants.identifiers import ABOUT_IDENTIFIER
from portfolio_chat.services.content_store import IdentifierEntry

_CATEGORY_TITLES = {
    "work_experience": "Work experience",
    "projects": "Projects",
    "tools": "Tools",
    "skills": "Skills",
    "gallery": "Gallery",
}


def build_tag_vocabulary(identifiers: Mapping[str, Sequence[IdentifierEntry]]) -> str:
    """Render the identifier list as instructions for the external AI.

    Args:
        identifiers: Output of ``fetch_all_identifiers``.

    Returns:
        A plain-text block listing every tag with its description, followed by
        the single and grouped tag syntax.
    """
    lines = [
        "You can show rich cards by writing tags in your reply.",
        "Use only the tags listed below; anything else is shown as plain text.",
        "",
        f"- <{ABOUT_IDENTIFIER}>: A short personal profile card",
    ]

    for category, entries in identifiers.items():
        if not entries:
            continue
        title = _CATEGORY_TITLES.get(category, category.replace("_", " ").title())
        lines.append("")
        lines.append(f"{title}:")
        lines.extend(f"- <{e['identifier']}>: {e['ai_description']}" for e in entries)

    lines.extend(
        [
            "",
            "Syntax:",
            "- Single card: <project_example>",
            "- Several cards side by side: [<skill_one>,<skill_two>]",
            "- Separate paragraphs with a blank line.",
        ]
    )
    return "\n".join(lines)
