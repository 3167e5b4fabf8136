"""Domain types for the resume aggregate.

Every type here is an immutable dataclass. State changes never mutate an
instance in place; reducers in :mod:`resume_builder.state.reducers` build a
new aggregate with :func:`dataclasses.replace` instead.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from uuid import uuid4

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
    "new_entry_id",
]


class ResumeStateError(Exception):
    """Raised when a state operation is called with invalid arguments."""


class EntryNotFoundError(ResumeStateError):
    """Raised when an update or removal targets an unknown entry id."""

    def __init__(self, collection: str, entry_id: str) -> None:
        super().__init__(f"No {collection} entry with id {entry_id!r}")
        self.collection = collection
        self.entry_id = entry_id


class InvalidSnapshotError(ResumeStateError):
    """Raised when serialized resume data cannot be restored."""


def new_entry_id() -> str:
    """Return a fresh identifier for a collection entry."""
    return str(uuid4())


@dataclass(frozen=True, slots=True)
class PersonalDetails:
    """Contact block shown at the top of every resume.

    Attributes:
        full_name: Name displayed as the resume heading.
        email: Contact email address.
        phone: Contact phone number.
        address: Postal address or city.
        linkedin: Optional LinkedIn profile URL.
        profile_picture: Optional data URL or file path of a photo.
        summary: Optional professional summary.
    """

    full_name: str = ""
    email: str = ""
    phone: str = ""
    address: str = ""
    linkedin: str = ""
    profile_picture: str = ""
    summary: str = ""


@dataclass(frozen=True, slots=True)
class Education:
    """A single education entry. Dates are ``YYYY-MM`` strings."""

    id: str = field(default_factory=new_entry_id)
    degree: str = ""
    field_of_study: str = ""
    institution: str = ""
    start_date: str = ""
    end_date: str = ""


@dataclass(frozen=True, slots=True)
class WorkExperience:
    """A single work-experience entry."""

    id: str = field(default_factory=new_entry_id)
    job_title: str = ""
    company: str = ""
    start_date: str = ""
    end_date: str = ""
    description: str = ""


@dataclass(frozen=True, slots=True)
class Skill:
    id: str = field(default_factory=new_entry_id)
    name: str = ""


@dataclass(frozen=True, slots=True)
class ResumeData:
    """The resume aggregate: everything needed to render one resume.

    Attributes:
        selected_template: Template identifier (see ``constants.catalog``).
        selected_color_palette: Palette identifier.
        personal_details: Contact block.
        education: Education entries in display order.
        work_experience: Work-experience entries in display order.
        skills: Skills in display order.
    """

    selected_template: str = "classic"
    selected_color_palette: str = "blue"
    personal_details: PersonalDetails = field(default_factory=PersonalDetails)
    education: tuple[Education, ...] = ()
    work_experience: tuple[WorkExperience, ...] = ()
    skills: tuple[Skill, ...] = ()


@dataclass(frozen=True, slots=True)
class ColorPalette:
    """A named set of hex colors a template can draw with."""

    id: str
    name: str
    primary: str
    secondary: str
    accent: str
    background: str
    text: str


@dataclass(frozen=True, slots=True)
class TemplateInfo:
    """Catalog entry describing a selectable template."""

    id: str
    name: str
    description: str = ""
