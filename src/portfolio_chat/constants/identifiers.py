"""
Constants describing portfolio identifiers, content types and the About card.
"""

from enum import StrEnum


class ContentType(StrEnum):
    """Wire-level ``type`` tag of a portfolio item."""

    WORK_EXPERIENCE = "work_experience"
    PROJECT = "project"
    TOOL = "tool"
    SKILL = "skill"
    GALLERY = "gallery"
    ABOUT = "about"


class ProjectStatus(StrEnum):
    """Lifecycle status of a project."""

    COMPLETED = "completed"
    IN_PROGRESS = "in-progress"
    PLANNING = "planning"
    ARCHIVED = "archived"


# Synthetic identifier that is not backed by a table row.
ABOUT_IDENTIFIER = "aboutmecard"

# Identifier prefix -> content type. Order matters only for documentation.
IDENTIFIER_PREFIXES: dict[str, ContentType] = {
    "work_": ContentType.WORK_EXPERIENCE,
    "project_": ContentType.PROJECT,
    "tool_": ContentType.TOOL,
    "skill_": ContentType.SKILL,
    "gallery_": ContentType.GALLERY,
}

# Category keys of GET /api/identifiers, in response order.
IDENTIFIER_CATEGORIES: dict[ContentType, str] = {
    ContentType.WORK_EXPERIENCE: "work_experience",
    ContentType.PROJECT: "projects",
    ContentType.TOOL: "tools",
    ContentType.SKILL: "skills",
    ContentType.GALLERY: "gallery",
}

ABOUT_PAYLOAD: dict[str, str] = {
    "name": "Mark Renzo Mariveles",
    "role": "Full-Stack Developer & AI Specialist",
    "bio": (
        "Passionate about creating innovative digital solutions and helping "
        "businesses leverage AI technology."
    ),
}


def content_type_for(identifier: str) -> ContentType | None:
    """Return the content type implied by an identifier, or None if unrecognized."""
    if identifier == ABOUT_IDENTIFIER:
        return ContentType.ABOUT
    for prefix, content_type in IDENTIFIER_PREFIXES.items():
        if identifier.startswith(prefix) and len(identifier) > len(prefix):
            return content_type
    return None


def about_item() -> dict:
    """Return a fresh copy of the fixed About portfolio item."""
    return {"type": ContentType.ABOUT.value, "data": dict(ABOUT_PAYLOAD)}
