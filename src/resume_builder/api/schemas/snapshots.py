"""Pydantic schemas for saved resume snapshot endpoints."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from resume_builder.api.schemas.resume import ResumePayload


class SnapshotCreateRequest(BaseModel):
    """Request schema for saving the current draft."""

    name: str = Field("", description="Display name; defaults to 'My Resume'")
    resume: ResumePayload


class SnapshotSummaryResponse(BaseModel):
    """Snapshot listing entry (without the resume body)."""

    id: int
    name: str
    created_at: datetime


class SnapshotResponse(SnapshotSummaryResponse):
    """Snapshot with its restored resume draft."""

    resume: ResumePayload
