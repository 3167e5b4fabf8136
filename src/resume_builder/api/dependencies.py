"""Shared dependencies for API routes."""

from __future__ import annotations

from typing import Annotated

from fastapi import Header, HTTPException, status

from resume_builder.api.schemas.resume import ResumePayload
from resume_builder.models.resume import InvalidSnapshotError, ResumeData


def get_current_username(
    x_username: Annotated[
        str | None,
        Header(
            description=(
                "Current username. In production, this should be extracted "
                "from authenticated session/JWT token."
            )
        ),
    ] = None,
) -> str:
    """Get the current username from request context.

    Args:
        x_username: Username from X-Username header.

    Returns:
        str: Authenticated username.

    Raises:
        HTTPException: If authentication is missing (401).
    """
    if not x_username:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing authentication. Please provide X-Username header.",
        )
    return x_username


def resume_from_payload(resume: ResumePayload) -> ResumeData:
    """Convert a request body into the domain aggregate.

    Raises:
        HTTPException: If the draft is inconsistent, e.g. repeated entry ids (422).
    """
    try:
        return resume.to_resume()
    except InvalidSnapshotError as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(exc),
        ) from None
