from __future__ import annotations

from resume_builder.constants.catalog import (
    COLOR_PALETTES,
    DEFAULT_PALETTE_ID,
    DEFAULT_TEMPLATE_ID,
    RESUME_TEMPLATES,
    TEMPLATE_ALIASES,
    get_palette,
    get_template_info,
    list_palettes,
    list_template_infos,
    resolve_template_id,
)

__all__ = [
    "COLOR_PALETTES",
    "DEFAULT_PALETTE_ID",
    "DEFAULT_TEMPLATE_ID",
    "RESUME_TEMPLATES",
    "TEMPLATE_ALIASES",
    "get_palette",
    "get_template_info",
    "list_palettes",
    "list_template_infos",
    "resolve_template_id",
]
