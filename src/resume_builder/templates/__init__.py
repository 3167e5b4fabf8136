"""Template registry for resume rendering."""

from __future__ import annotations

from resume_builder.constants.catalog import resolve_template_id
from resume_builder.templates.base import ResumeTemplate
from resume_builder.templates.classic import ClassicResumeTemplate
from resume_builder.templates.modern import ModernResumeTemplate

__all__ = [
    "ResumeTemplate",
    "get_template",
    "list_templates",
]

_REGISTRY: dict[str, ResumeTemplate] = {
    "classic": ClassicResumeTemplate(),
    "modern": ModernResumeTemplate(),
}


def get_template(name: str) -> ResumeTemplate:
    """Return the template registered under *name*.

    Legacy aliases resolve to their target layout and unknown names fall
    back to the classic template; this never raises.
    """
    return _REGISTRY[resolve_template_id(name)]


def list_templates() -> list[str]:
    """Return sorted names of all registered templates."""
    return sorted(_REGISTRY)
