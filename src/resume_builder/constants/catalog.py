"""Selectable templates and color palettes.

Lookups are permissive: an unknown identifier resolves to the first entry
of the catalog instead of raising, so a saved resume that references a
retired template or palette still renders.
"""

from __future__ import annotations

import logging

from resume_builder.models.resume import ColorPalette, TemplateInfo

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATE_ID = "classic"
DEFAULT_PALETTE_ID = "blue"

RESUME_TEMPLATES: tuple[TemplateInfo, ...] = (
    TemplateInfo(
        id="classic",
        name="Classic (Single Column)",
        description="Centered header with education and skills beside work experience",
    ),
    TemplateInfo(
        id="modern",
        name="Modern (Two Column)",
        description="Colored header band with a tinted sidebar",
    ),
)

# Legacy template ids kept working by mapping them onto a real layout.
TEMPLATE_ALIASES: dict[str, str] = {
    "minimal": "classic",
    "professional": "classic",
    "executive": "classic",
    "creative": "classic",
    "elegant": "modern",
    "corporate": "modern",
    "bold": "modern",
    "simple": "modern",
}

COLOR_PALETTES: tuple[ColorPalette, ...] = (
    ColorPalette(
        id="blue",
        name="Professional Blue",
        primary="#1E40AF",
        secondary="#3B82F6",
        accent="#93C5FD",
        background="#F8FAFC",
        text="#1E293B",
    ),
    ColorPalette(
        id="green",
        name="Forest Green",
        primary="#166534",
        secondary="#22C55E",
        accent="#86EFAC",
        background="#F0FDF4",
        text="#14532D",
    ),
    ColorPalette(
        id="purple",
        name="Royal Purple",
        primary="#6B21A8",
        secondary="#A855F7",
        accent="#D8B4FE",
        background="#FAF5FF",
        text="#581C87",
    ),
    ColorPalette(
        id="red",
        name="Ruby Red",
        primary="#9F1239",
        secondary="#F43F5E",
        accent="#FDA4AF",
        background="#FFF1F2",
        text="#881337",
    ),
    ColorPalette(
        id="gray",
        name="Professional Gray",
        primary="#334155",
        secondary="#64748B",
        accent="#CBD5E1",
        background="#F8FAFC",
        text="#0F172A",
    ),
    ColorPalette(
        id="teal",
        name="Teal",
        primary="#115E59",
        secondary="#14B8A6",
        accent="#5EEAD4",
        background="#F0FDFA",
        text="#134E4A",
    ),
)

_PALETTES_BY_ID = {p.id: p for p in COLOR_PALETTES}
_TEMPLATES_BY_ID = {t.id: t for t in RESUME_TEMPLATES}


def resolve_template_id(template_id: str) -> str:
    """Map *template_id* to the id of a real template.

    Aliases resolve to their target; unknown ids resolve to the default.
    """
    if template_id in _TEMPLATES_BY_ID:
        return template_id
    target = TEMPLATE_ALIASES.get(template_id)
    if target is not None:
        return target
    logger.debug("Unknown template %r, falling back to %r", template_id, DEFAULT_TEMPLATE_ID)
    return DEFAULT_TEMPLATE_ID


def get_template_info(template_id: str) -> TemplateInfo:
    """Return the catalog entry for *template_id* (default on unknown ids)."""
    return _TEMPLATES_BY_ID[resolve_template_id(template_id)]


def get_palette(palette_id: str) -> ColorPalette:
    """Return the palette registered under *palette_id*.

    Unknown ids fall back to the first palette without raising.
    """
    palette = _PALETTES_BY_ID.get(palette_id)
    if palette is None:
        logger.debug("Unknown palette %r, falling back to %r", palette_id, DEFAULT_PALETTE_ID)
        return _PALETTES_BY_ID[DEFAULT_PALETTE_ID]
    return palette


def list_palettes() -> list[ColorPalette]:
    """Return all palettes in display order."""
    return list(COLOR_PALETTES)


def list_template_infos() -> list[TemplateInfo]:
    """Return all selectable templates in display order."""
    return list(RESUME_TEMPLATES)
