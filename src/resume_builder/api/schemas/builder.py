"""Pydantic schemas for wizard validation endpoints."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ValidationResponse(BaseModel):
    """Outcome of validating a draft against one wizard step."""

    step: str = Field(description="Step that was validated")
    ok: bool = Field(description="Whether the step may be left forwards")
    title: str = ""
    message: str = ""
    field_errors: dict[str, bool] = Field(default_factory=dict)
    next_route: str | None = Field(None, description="Route to navigate to when ok")
