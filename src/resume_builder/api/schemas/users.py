"""Pydantic schemas for account API endpoints."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class UserInfoResponse(BaseModel):
    """Response schema for basic user information."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    created_at: datetime


class CredentialsRequest(BaseModel):
    """Request schema for signing up or logging in."""

    username: str = Field(..., description="Account username")
    password: str = Field(..., description="Account password")
