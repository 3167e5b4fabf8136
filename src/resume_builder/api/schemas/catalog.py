"""Pydantic schemas for the template and palette catalogs."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class TemplateResponse(BaseModel):
    """A selectable resume template."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    description: str = ""


class PaletteResponse(BaseModel):
    """A selectable color palette (hex colors)."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    primary: str
    secondary: str
    accent: str
    background: str
    text: str
