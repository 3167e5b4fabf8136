"""Data models and type definitions"""

from resume_builder.models.resume import (
    ColorPalette,
    Education,
    EntryNotFoundError,
    InvalidSnapshotError,
    PersonalDetails,
    ResumeData,
    ResumeStateError,
    Skill,
    TemplateInfo,
    WorkExperience,
)

__all__ = [
    "ColorPalette",
    "Education",
    "EntryNotFoundError",
    "InvalidSnapshotError",
    "PersonalDetails",
    "ResumeData",
    "ResumeStateError",
    "Skill",
    "TemplateInfo",
    "WorkExperience",
]
