"""Saved resume snapshot routes."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi import Path as PathParam

from resume_builder.api.dependencies import get_current_username, resume_from_payload
from resume_builder.api.schemas.resume import ResumePayload
from resume_builder.api.schemas.snapshots import (
    SnapshotCreateRequest,
    SnapshotResponse,
    SnapshotSummaryResponse,
)
from resume_builder.data.db import get_session
from resume_builder.data.models import User
from resume_builder.services.snapshots import (
    delete_snapshot,
    get_snapshot,
    list_snapshots,
    load_snapshot,
    save_snapshot,
)

router = APIRouter(prefix="/users", tags=["snapshots"])


def _verify_permission_and_user(current_username: str, username: str) -> None:
    """Verify the current user has permission and the target user exists.

    Raises:
        HTTPException: 403 if no permission, 404 if user not found.
    """
    if current_username != username:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="You can only access your own resumes",
        )
    with get_session() as session:
        user = session.query(User).filter(User.username == username).first()
        if not user:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"User '{username}' not found",
            )


@router.get(
    "/{username}/snapshots",
    response_model=list[SnapshotSummaryResponse],
)
def list_user_snapshots(
    username: Annotated[str, PathParam(description="Username")],
    current_username: Annotated[str, Depends(get_current_username)],
) -> list[SnapshotSummaryResponse]:
    """List a user's saved resumes, newest first."""
    _verify_permission_and_user(current_username, username)

    results = list_snapshots(username) or []
    return [
        SnapshotSummaryResponse(id=r["id"], name=r["name"], created_at=r["created_at"])
        for r in results
    ]


@router.get(
    "/{username}/snapshots/{snapshot_id}",
    response_model=SnapshotResponse,
)
def get_user_snapshot(
    username: Annotated[str, PathParam(description="Username")],
    snapshot_id: Annotated[int, PathParam(description="Snapshot ID")],
    current_username: Annotated[str, Depends(get_current_username)],
) -> SnapshotResponse:
    """Get a saved resume with its restored draft."""
    _verify_permission_and_user(current_username, username)

    record = get_snapshot(username, snapshot_id)
    if not record:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Snapshot {snapshot_id} not found",
        )

    data = load_snapshot(username, snapshot_id)
    if data is None:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"Snapshot {snapshot_id} contains malformed resume data",
        )

    return SnapshotResponse(
        id=record["id"],
        name=record["name"],
        created_at=record["created_at"],
        resume=ResumePayload.from_resume(data),
    )


@router.post(
    "/{username}/snapshots",
    response_model=SnapshotSummaryResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_user_snapshot(
    username: Annotated[str, PathParam(description="Username")],
    request: SnapshotCreateRequest,
    current_username: Annotated[str, Depends(get_current_username)],
) -> SnapshotSummaryResponse:
    """Save the given draft as a new snapshot."""
    _verify_permission_and_user(current_username, username)

    result = save_snapshot(username, request.name, resume_from_payload(request.resume))
    if not result:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Failed to save snapshot",
        )

    return SnapshotSummaryResponse(
        id=result["id"], name=result["name"], created_at=result["created_at"]
    )


@router.delete(
    "/{username}/snapshots/{snapshot_id}",
    status_code=status.HTTP_204_NO_CONTENT,
)
def delete_user_snapshot(
    username: Annotated[str, PathParam(description="Username")],
    snapshot_id: Annotated[int, PathParam(description="Snapshot ID")],
    current_username: Annotated[str, Depends(get_current_username)],
) -> None:
    """Delete a saved resume."""
    _verify_permission_and_user(current_username, username)

    if not delete_snapshot(username, snapshot_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Snapshot {snapshot_id} not found",
        )
