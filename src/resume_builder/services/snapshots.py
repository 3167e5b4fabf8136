"""Snapshot service for saving and restoring resume drafts per user.

This service provides create/list/get/delete operations for
:class:`ResumeSnapshot` rows. Like the other services it reports failure
by returning ``None``/``False`` and logging, never by raising.
"""

from __future__ import annotations

import json
import logging

from sqlalchemy.orm import Session

from resume_builder.data.db import get_session
from resume_builder.data.models import ResumeSnapshot, User
from resume_builder.models.resume import InvalidSnapshotError, ResumeData
from resume_builder.state.serialization import resume_from_json, resume_to_json

logger = logging.getLogger(__name__)

__all__ = [
    "DEFAULT_SNAPSHOT_NAME",
    "delete_snapshot",
    "get_snapshot",
    "list_snapshots",
    "load_snapshot",
    "save_snapshot",
]

DEFAULT_SNAPSHOT_NAME = "My Resume"


def _decode_data(raw: str) -> dict | None:
    """Parse stored snapshot JSON; malformed data yields ``None``."""
    try:
        parsed = json.loads(raw)
    except (json.JSONDecodeError, TypeError):
        return None
    return parsed if isinstance(parsed, dict) else None


def _snapshot_to_dict(snapshot: ResumeSnapshot) -> dict:
    """Convert a ResumeSnapshot model to a dictionary.

    Args:
        snapshot: ResumeSnapshot model instance

    Returns:
        Dictionary with snapshot data; ``data`` is None when the stored
        JSON is malformed.
    """
    return {
        "id": snapshot.id,
        "user_id": snapshot.user_id,
        "name": snapshot.name,
        "data": _decode_data(snapshot.data),
        "created_at": snapshot.created_at,
    }


def _get_user_by_username(session: Session, username: str) -> User | None:
    """Get a user by username."""
    return session.query(User).filter(User.username == username).first()


def _get_snapshot_by_id(session: Session, user_id: int, snapshot_id: int) -> ResumeSnapshot | None:
    """Get a snapshot by ID, ensuring it belongs to the user."""
    return (
        session.query(ResumeSnapshot)
        .filter(ResumeSnapshot.id == snapshot_id, ResumeSnapshot.user_id == user_id)
        .first()
    )


def save_snapshot(username: str, name: str, data: ResumeData) -> dict | None:
    """Persist a copy of *data* under *name* for *username*.

    Args:
        username: Username of the owner
        name: Display name; blank names become ``My Resume``
        data: Resume aggregate to store

    Returns:
        Dictionary with the saved snapshot, or None if saving failed
    """
    display_name = name.strip() or DEFAULT_SNAPSHOT_NAME
    try:
        with get_session() as session:
            user = _get_user_by_username(session, username)
            if not user:
                return None

            snapshot = ResumeSnapshot(
                user_id=user.id,
                name=display_name,
                data=resume_to_json(data),
            )
            session.add(snapshot)
            session.commit()

            return _snapshot_to_dict(snapshot)

    except Exception:
        logger.exception("Failed to save snapshot for %s", username)
        return None


def list_snapshots(username: str) -> list[dict] | None:
    """Get all snapshots for a user, newest first.

    Args:
        username: Username of the owner

    Returns:
        List of snapshot dictionaries, or None if user not found
    """
    try:
        with get_session() as session:
            user = _get_user_by_username(session, username)
            if not user:
                return None

            snapshots = (
                session.query(ResumeSnapshot)
                .filter(ResumeSnapshot.user_id == user.id)
                .order_by(ResumeSnapshot.created_at.desc(), ResumeSnapshot.id.desc())
                .all()
            )
            return [_snapshot_to_dict(s) for s in snapshots]

    except Exception:
        logger.exception("Failed to list snapshots for %s", username)
        return None


def get_snapshot(username: str, snapshot_id: int) -> dict | None:
    """Get a specific snapshot by ID.

    Returns:
        Dictionary with snapshot data, or None if not found
    """
    try:
        with get_session() as session:
            user = _get_user_by_username(session, username)
            if not user:
                return None

            snapshot = _get_snapshot_by_id(session, user.id, snapshot_id)
            if not snapshot:
                return None

            return _snapshot_to_dict(snapshot)

    except Exception:
        logger.exception("Failed to get snapshot %d for %s", snapshot_id, username)
        return None


def load_snapshot(username: str, snapshot_id: int) -> ResumeData | None:
    """Restore the resume stored in a snapshot.

    Malformed stored data is logged and treated as unavailable; there is
    no partial recovery.

    Returns:
        The restored aggregate, or None if missing or malformed
    """
    try:
        with get_session() as session:
            user = _get_user_by_username(session, username)
            if not user:
                return None

            snapshot = _get_snapshot_by_id(session, user.id, snapshot_id)
            if not snapshot:
                return None
            raw = snapshot.data

    except Exception:
        logger.exception("Failed to load snapshot %d for %s", snapshot_id, username)
        return None

    try:
        return resume_from_json(raw)
    except InvalidSnapshotError:
        logger.exception("Snapshot %d for %s has malformed data", snapshot_id, username)
        return None


def delete_snapshot(username: str, snapshot_id: int) -> bool:
    """Delete a snapshot.

    Returns:
        True if deleted successfully, False otherwise
    """
    try:
        with get_session() as session:
            user = _get_user_by_username(session, username)
            if not user:
                return False

            snapshot = _get_snapshot_by_id(session, user.id, snapshot_id)
            if not snapshot:
                return False

            session.delete(snapshot)
            session.commit()
            return True

    except Exception:
        logger.exception("Failed to delete snapshot %d for %s", snapshot_id, username)
        return False
