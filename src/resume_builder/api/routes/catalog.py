"""Template and color palette catalog routes."""

from __future__ import annotations

from fastapi import APIRouter

from resume_builder.api.schemas.catalog import PaletteResponse, TemplateResponse
from resume_builder.constants.catalog import list_palettes, list_template_infos

router = APIRouter(tags=["catalog"])


@router.get("/templates", response_model=list[TemplateResponse])
def get_templates() -> list[TemplateResponse]:
    """List the resume templates a draft can select."""
    return [TemplateResponse.model_validate(t) for t in list_template_infos()]


@router.get("/palettes", response_model=list[PaletteResponse])
def get_palettes() -> list[PaletteResponse]:
    """List the color palettes a draft can select."""
    return [PaletteResponse.model_validate(p) for p in list_palettes()]
