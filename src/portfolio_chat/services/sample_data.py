"""Sample portfolio content for local development and demos.

``seed_sample_data`` upserts every sample row by identifier, so running it
twice refreshes the content instead of duplicating it.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Any

from sqlalchemy.orm import Session

from portfolio_chat.data.db import get_session
from portfolio_chat.data.models import (
    GalleryItem,
    Project,
    ProjectSkill,
    ProjectTool,
    Skill,
    Tool,
    WorkExperience,
)
from portfolio_chat.data.models.content_row import ContentRowMixin

logger = logging.getLogger(__name__)

WORK_EXPERIENCE: list[dict[str, Any]] = [
    {
        "identifier": "work_current",
        "ai_description": "My current job or most recent work experience",
        "company_name": "Tech Innovations Inc.",
        "position_title": "Senior Full-Stack Developer",
        "employment_type": "full-time",
        "location": "San Francisco, CA (Remote)",
        "start_date": date(2023, 1, 15),
        "is_current": True,
        "description": (
            "Leading development of AI-powered applications and managing a team of 5 "
            "developers. Responsible for architecture decisions and implementation of "
            "scalable solutions."
        ),
        "achievements": "Built an AI chatbot platform that serves over 10,000 users daily",
        "company_website": "https://techinnovations.com",
    },
    {
        "identifier": "work_freelance",
        "ai_description": "My freelance work and consulting experience",
        "company_name": "Freelance Consulting",
        "position_title": "AI & Web Development Consultant",
        "employment_type": "freelance",
        "location": "Remote",
        "start_date": date(2022, 1, 1),
        "end_date": date(2022, 12, 31),
        "is_current": False,
        "description": (
            "Helping businesses integrate AI solutions and build modern web applications. "
            "Specializing in React, Node.js, and OpenAI implementations."
        ),
        "achievements": "Successfully delivered 15+ AI projects for various clients",
    },
]

PROJECTS: list[dict[str, Any]] = [
    {
        "identifier": "project_chatbot",
        "ai_description": "My AI chatbot SaaS platform project",
        "title": "AI Chatbot SaaS Platform",
        "slug": "ai-chatbot-saas",
        "short_description": (
            "Multi-tenant AI chatbot platform for businesses to integrate intelligent "
            "conversation capabilities"
        ),
        "project_type": "ai-project",
        "status": "completed",
        "github_url": "https://github.com/markrenzo/ai-chatbot-saas",
        "live_demo_url": "https://demo.chatbot-platform.com",
        "tech_stack": ["React", "TypeScript", "Node.js", "OpenAI", "PostgreSQL", "Docker"],
        "is_featured": True,
    },
    {
        "identifier": "project_portfolio",
        "ai_description": "This portfolio website project",
        "title": "Interactive Portfolio Website",
        "slug": "portfolio-website",
        "short_description": (
            "Modern portfolio website with AI integration and dynamic content management"
        ),
        "project_type": "web-app",
        "status": "in-progress",
        "github_url": "https://github.com/markrenzo/portfolio",
        "live_demo_url": "https://markrenzo.com",
        "tech_stack": ["React", "TypeScript", "Tailwind CSS", "Vite", "Framer Motion"],
        "is_featured": True,
    },
]

TOOLS: list[dict[str, Any]] = [
    {
        "identifier": "tool_react",
        "ai_description": "React.js framework for frontend development",
        "name": "React.js",
        "category": "frontend",
        "description": (
            "Advanced React development including hooks, context, state management, "
            "and performance optimization."
        ),
        "website_url": "https://reactjs.org",
        "proficiency_level": "expert",
        "years_experience": 4,
        "is_featured": True,
    },
    {
        "identifier": "tool_nodejs",
        "ai_description": "Node.js runtime for backend development",
        "name": "Node.js",
        "category": "backend",
        "description": "Server-side JavaScript development, API creation, and backend services.",
        "website_url": "https://nodejs.org",
        "proficiency_level": "advanced",
        "years_experience": 3,
        "is_featured": True,
    },
    {
        "identifier": "tool_postgres",
        "ai_description": "PostgreSQL database for data storage",
        "name": "PostgreSQL",
        "category": "database",
        "description": "Relational database design, query optimization, and administration.",
        "website_url": "https://postgresql.org",
        "proficiency_level": "advanced",
        "years_experience": 2,
        "is_featured": True,
    },
    {
        "identifier": "tool_typescript",
        "ai_description": "TypeScript for type-safe JavaScript development",
        "name": "TypeScript",
        "category": "frontend",
        "website_url": "https://typescriptlang.org",
        "proficiency_level": "expert",
        "years_experience": 3,
        "is_featured": True,
    },
    {
        "identifier": "tool_docker",
        "ai_description": "Docker for containerization and deployment",
        "name": "Docker",
        "category": "devops",
        "proficiency_level": "intermediate",
        "years_experience": 2,
    },
]

SKILLS: list[dict[str, Any]] = [
    {
        "identifier": "skill_fullstack",
        "ai_description": "Full-stack web development capabilities",
        "name": "Full-Stack Development",
        "category": "technical",
        "description": (
            "Complete web application development from frontend to backend, including "
            "database design, API development, and deployment."
        ),
        "proficiency_percentage": 90,
        "skill_type": "programming",
        "is_featured": True,
    },
    {
        "identifier": "skill_ai",
        "ai_description": "AI and machine learning development",
        "name": "AI Development",
        "category": "technical",
        "description": (
            "Chatbots, natural language processing, and AI integration into products."
        ),
        "proficiency_percentage": 85,
        "skill_type": "programming",
        "is_featured": True,
    },
    {
        "identifier": "skill_javascript",
        "ai_description": "JavaScript programming language expertise",
        "name": "JavaScript",
        "category": "technical",
        "proficiency_percentage": 95,
        "skill_type": "programming",
        "is_featured": True,
    },
    {
        "identifier": "skill_leadership",
        "ai_description": "Team leadership and project management",
        "name": "Leadership",
        "category": "soft",
        "description": "Team leadership, project management, and mentoring developers.",
        "proficiency_percentage": 80,
        "skill_type": "soft-skill",
    },
]

GALLERY: list[dict[str, Any]] = [
    {
        "identifier": "gallery_chatbot_demo",
        "ai_description": "Screenshot of my AI chatbot platform in action",
        "title": "AI Chatbot Platform Demo",
        "description": (
            "Interactive AI chatbot interface with real-time responses and conversation "
            "management"
        ),
        "image_url": "/images/chatbot-demo.png",
        "category": "screenshot",
        "is_featured": True,
    },
    {
        "identifier": "gallery_portfolio_mobile",
        "ai_description": "Mobile view of my portfolio website",
        "title": "Portfolio Mobile Design",
        "description": "Responsive portfolio design optimized for mobile devices",
        "image_url": "/images/portfolio-mobile.png",
        "category": "design",
    },
]

PROJECT_TOOLS: dict[str, list[str]] = {
    "project_chatbot": ["tool_react", "tool_nodejs", "tool_postgres", "tool_typescript"],
    "project_portfolio": ["tool_react", "tool_typescript"],
}

PROJECT_SKILLS: dict[str, list[str]] = {
    "project_chatbot": ["skill_fullstack", "skill_ai", "skill_javascript"],
}


def _upsert(session: Session, model: type[ContentRowMixin], values: dict[str, Any]):
    """Insert a row or update the existing one with the same identifier."""
    row = session.query(model).filter(model.identifier == values["identifier"]).first()
    if row is None:
        row = model(**values)
        session.add(row)
    else:
        for field, value in values.items():
            setattr(row, field, value)
    session.flush()
    return row


def _link(session: Session, assoc: type, project_id: int, column: str, target_id: int) -> None:
    exists = (
        session.query(assoc)
        .filter(assoc.project_id == project_id, getattr(assoc, column) == target_id)
        .first()
    )
    if exists is None:
        session.add(assoc(project_id=project_id, **{column: target_id}))


def seed_sample_data() -> dict[str, int]:
    """Upsert the sample portfolio and link projects to their tools and skills.

    Returns:
        Number of upserted rows per table name.
    """
    counts: dict[str, int] = {}
    with get_session() as session:
        tables = (
            (WorkExperience, WORK_EXPERIENCE),
            (Project, PROJECTS),
            (Tool, TOOLS),
            (Skill, SKILLS),
            (GalleryItem, GALLERY),
        )
        rows: dict[str, ContentRowMixin] = {}
        for model, entries in tables:
            for values in entries:
                rows[values["identifier"]] = _upsert(session, model, values)
            counts[model.__tablename__] = len(entries)

        for project_identifier, tool_identifiers in PROJECT_TOOLS.items():
            project = rows[project_identifier]
            for tool_identifier in tool_identifiers:
                _link(session, ProjectTool, project.id, "tool_id", rows[tool_identifier].id)

        for project_identifier, skill_identifiers in PROJECT_SKILLS.items():
            project = rows[project_identifier]
            for skill_identifier in skill_identifiers:
                _link(session, ProjectSkill, project.id, "skill_id", rows[skill_identifier].id)

    logger.info("Seeded sample portfolio data: %s", counts)
    return counts
