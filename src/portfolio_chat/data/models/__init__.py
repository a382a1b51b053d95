"""ORM models package for the portfolio content store.

This package provides SQLAlchemy ORM models representing database tables:
- WorkExperience: Employment history (``work_*`` identifiers)
- Project: Portfolio projects (``project_*`` identifiers)
- Tool: Tools and technologies (``tool_*`` identifiers)
- Skill: Technical and soft skills (``skill_*`` identifiers)
- GalleryItem: Images and videos (``gallery_*`` identifiers)
- ProjectTool / ProjectSkill: Project associations

All models inherit from the shared Base declarative class defined in data.db.
"""

from portfolio_chat.data.db import Base
from portfolio_chat.data.models.gallery_item import GalleryItem
from portfolio_chat.data.models.project import Project, ProjectSkill, ProjectTool
from portfolio_chat.data.models.skill import Skill
from portfolio_chat.data.models.tool import Tool
from portfolio_chat.data.models.work_experience import WorkExperience

__all__ = [
    "Base",
    "GalleryItem",
    "Project",
    "ProjectSkill",
    "ProjectTool",
    "Skill",
    "Tool",
    "WorkExperience",
]
