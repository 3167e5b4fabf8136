"""Resume draft state: reducers, serialization and the owning store."""

from resume_builder.state.serialization import (
    resume_from_dict,
    resume_from_json,
    resume_to_dict,
    resume_to_json,
)
from resume_builder.state.store import ResumeStore

__all__ = [
    "ResumeStore",
    "resume_from_dict",
    "resume_from_json",
    "resume_to_dict",
    "resume_to_json",
]
