"""Conversion between the resume aggregate and JSON-compatible data."""

from __future__ import annotations

from typing import Any

from pydantic import TypeAdapter, ValidationError

from resume_builder.models.resume import InvalidSnapshotError, ResumeData

__all__ = [
    "resume_from_dict",
    "resume_from_json",
    "resume_to_dict",
    "resume_to_json",
]

_ADAPTER: TypeAdapter[ResumeData] = TypeAdapter(ResumeData)

# Collections whose entries are addressed by id.
_ENTRY_COLLECTIONS = ("education", "work_experience", "skills")


def _check_unique_ids(state: ResumeData) -> ResumeData:
    for collection in _ENTRY_COLLECTIONS:
        seen: set[str] = set()
        for entry in getattr(state, collection):
            if entry.id in seen:
                msg = f"Duplicate id {entry.id!r} in {collection}"
                raise InvalidSnapshotError(msg)
            seen.add(entry.id)
    return state


def resume_to_dict(state: ResumeData) -> dict[str, Any]:
    """Return *state* as plain JSON-compatible data (tuples become lists)."""
    return _ADAPTER.dump_python(state, mode="json")


def resume_to_json(state: ResumeData) -> str:
    return _ADAPTER.dump_json(state).decode("utf-8")


def resume_from_dict(data: Any) -> ResumeData:
    """Restore an aggregate from data produced by :func:`resume_to_dict`.

    Raises:
        InvalidSnapshotError: If *data* does not describe a resume
            or an entry id repeats within its collection.
    """
    if not isinstance(data, dict):
        msg = f"Resume data must be an object, got {type(data).__name__}"
        raise InvalidSnapshotError(msg)
    try:
        state = _ADAPTER.validate_python(data)
    except ValidationError as exc:
        raise InvalidSnapshotError(str(exc)) from exc
    return _check_unique_ids(state)


def resume_from_json(text: str | bytes) -> ResumeData:
    """Restore an aggregate from a JSON document.

    Raises:
        InvalidSnapshotError: If *text* is not valid JSON or not a resume.
    """
    try:
        state = _ADAPTER.validate_json(text)
    except ValidationError as exc:
        raise InvalidSnapshotError(str(exc)) from exc
    return _check_unique_ids(state)
