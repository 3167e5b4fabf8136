"""Pure state transitions over the resume aggregate.

Each reducer takes a :class:`ResumeData` snapshot and returns a new one.
Inputs are never mutated, which keeps every transition easy to test and
lets the store hand the previous snapshot back on failure.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import replace
from typing import Any, TypeVar

from resume_builder.models.resume import (
    Education,
    EntryNotFoundError,
    PersonalDetails,
    ResumeData,
    ResumeStateError,
    Skill,
    WorkExperience,
    new_entry_id,
)

__all__ = [
    "add_education",
    "add_skill",
    "add_work_experience",
    "default_resume",
    "remove_education",
    "remove_skill",
    "remove_work_experience",
    "replace_state",
    "select_color_palette",
    "select_template",
    "update_education",
    "update_personal_details",
    "update_work_experience",
]

# Fields that can be updated on each record type
_PERSONAL_FIELDS = (
    "full_name",
    "email",
    "phone",
    "address",
    "linkedin",
    "profile_picture",
    "summary",
)
_EDUCATION_FIELDS = (
    "degree",
    "field_of_study",
    "institution",
    "start_date",
    "end_date",
)
_WORK_FIELDS = (
    "job_title",
    "company",
    "start_date",
    "end_date",
    "description",
)

_Entry = TypeVar("_Entry", Education, WorkExperience, Skill)


def _check_fields(kind: str, updates: Mapping[str, Any], allowed: tuple[str, ...]) -> None:
    unknown = sorted(set(updates) - set(allowed))
    if unknown:
        msg = f"Unknown {kind} field(s): {', '.join(unknown)}"
        raise ResumeStateError(msg)


def _update_entry(
    entries: tuple[_Entry, ...],
    collection: str,
    entry_id: str,
    updates: Mapping[str, Any],
) -> tuple[_Entry, ...]:
    """Return *entries* with the entry matching *entry_id* merged with *updates*."""
    if not any(e.id == entry_id for e in entries):
        raise EntryNotFoundError(collection, entry_id)
    return tuple(replace(e, **updates) if e.id == entry_id else e for e in entries)


def _remove_entry(
    entries: tuple[_Entry, ...],
    collection: str,
    entry_id: str,
) -> tuple[_Entry, ...]:
    remaining = tuple(e for e in entries if e.id != entry_id)
    if len(remaining) == len(entries):
        raise EntryNotFoundError(collection, entry_id)
    return remaining


def _fresh_id(entries: tuple[_Entry, ...]) -> str:
    taken = {e.id for e in entries}
    entry_id = new_entry_id()
    while entry_id in taken:
        entry_id = new_entry_id()
    return entry_id


def default_resume() -> ResumeData:
    """Return the empty aggregate a new session starts from."""
    return ResumeData()


# -----------------------------------------------------------------------
# Personal details


def update_personal_details(state: ResumeData, **fields: str) -> ResumeData:
    """Merge *fields* into the personal-details record.

    Raises:
        ResumeStateError: If a field name is not part of the record.
    """
    _check_fields("personal details", fields, _PERSONAL_FIELDS)
    details: PersonalDetails = replace(state.personal_details, **fields)
    return replace(state, personal_details=details)


# -----------------------------------------------------------------------
# Education


def add_education(state: ResumeData, **fields: str) -> ResumeData:
    """Append a new education entry (blank unless *fields* pre-fill it)."""
    _check_fields("education", fields, _EDUCATION_FIELDS)
    entry = Education(id=_fresh_id(state.education), **fields)
    return replace(state, education=(*state.education, entry))


def update_education(state: ResumeData, entry_id: str, **fields: str) -> ResumeData:
    _check_fields("education", fields, _EDUCATION_FIELDS)
    return replace(
        state,
        education=_update_entry(state.education, "education", entry_id, fields),
    )


def remove_education(state: ResumeData, entry_id: str) -> ResumeData:
    return replace(state, education=_remove_entry(state.education, "education", entry_id))


# -----------------------------------------------------------------------
# Work experience


def add_work_experience(state: ResumeData, **fields: str) -> ResumeData:
    """Append a new work-experience entry (blank unless *fields* pre-fill it)."""
    _check_fields("work experience", fields, _WORK_FIELDS)
    entry = WorkExperience(id=_fresh_id(state.work_experience), **fields)
    return replace(state, work_experience=(*state.work_experience, entry))


def update_work_experience(state: ResumeData, entry_id: str, **fields: str) -> ResumeData:
    _check_fields("work experience", fields, _WORK_FIELDS)
    return replace(
        state,
        work_experience=_update_entry(
            state.work_experience, "work experience", entry_id, fields
        ),
    )


def remove_work_experience(state: ResumeData, entry_id: str) -> ResumeData:
    return replace(
        state,
        work_experience=_remove_entry(state.work_experience, "work experience", entry_id),
    )


# -----------------------------------------------------------------------
# Skills


def add_skill(state: ResumeData, name: str) -> ResumeData:
    """Append a skill named *name* (surrounding whitespace stripped).

    Raises:
        ResumeStateError: If *name* is blank.
    """
    cleaned = name.strip()
    if not cleaned:
        raise ResumeStateError("Skill name cannot be empty")
    skill = Skill(id=_fresh_id(state.skills), name=cleaned)
    return replace(state, skills=(*state.skills, skill))


def remove_skill(state: ResumeData, entry_id: str) -> ResumeData:
    return replace(state, skills=_remove_entry(state.skills, "skill", entry_id))


# -----------------------------------------------------------------------
# Template / palette selection


def select_template(state: ResumeData, template_id: str) -> ResumeData:
    """Store *template_id* as given; unknown ids are resolved at render time."""
    return replace(state, selected_template=template_id)


def select_color_palette(state: ResumeData, palette_id: str) -> ResumeData:
    """Store *palette_id* as given; unknown ids are resolved at render time."""
    return replace(state, selected_color_palette=palette_id)


def replace_state(state: ResumeData, new_state: ResumeData) -> ResumeData:  # noqa: ARG001
    """Swap the whole aggregate, e.g. when a saved snapshot is loaded."""
    return new_state
