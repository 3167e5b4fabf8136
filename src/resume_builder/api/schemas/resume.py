"""Pydantic schemas describing a resume draft on the wire."""

from __future__ import annotations

from pydantic import BaseModel, Field

from resume_builder.models.resume import ResumeData
from resume_builder.state.serialization import resume_from_dict, resume_to_dict


class PersonalDetailsPayload(BaseModel):
    """Contact block of a resume draft."""

    full_name: str = Field("", description="Name shown as the resume heading")
    email: str = Field("", description="Contact email address")
    phone: str = Field("", description="Contact phone number")
    address: str = Field("", description="Postal address or city")
    linkedin: str = Field("", description="LinkedIn profile URL")
    profile_picture: str = Field("", description="Image data URL or file path")
    summary: str = Field("", description="Professional summary")


class EducationPayload(BaseModel):
    """A single education entry."""

    id: str | None = Field(None, description="Entry id; generated when omitted")
    degree: str = ""
    field_of_study: str = ""
    institution: str = ""
    start_date: str = Field("", description="Start month (YYYY-MM)")
    end_date: str = Field("", description="End month (YYYY-MM), blank if ongoing")


class WorkExperiencePayload(BaseModel):
    """A single work-experience entry."""

    id: str | None = Field(None, description="Entry id; generated when omitted")
    job_title: str = ""
    company: str = ""
    start_date: str = Field("", description="Start month (YYYY-MM)")
    end_date: str = Field("", description="End month (YYYY-MM), blank if ongoing")
    description: str = ""


class SkillPayload(BaseModel):
    id: str | None = Field(None, description="Entry id; generated when omitted")
    name: str


class ResumePayload(BaseModel):
    """Complete resume draft as sent by a client."""

    selected_template: str = Field("classic", description="Template identifier")
    selected_color_palette: str = Field("blue", description="Color palette identifier")
    personal_details: PersonalDetailsPayload = Field(default_factory=PersonalDetailsPayload)
    education: list[EducationPayload] = Field(default_factory=list)
    work_experience: list[WorkExperiencePayload] = Field(default_factory=list)
    skills: list[SkillPayload] = Field(default_factory=list)

    def to_resume(self) -> ResumeData:
        """Convert to the domain aggregate, generating any missing entry ids."""
        return resume_from_dict(self.model_dump(exclude_none=True))

    @classmethod
    def from_resume(cls, data: ResumeData) -> ResumePayload:
        return cls.model_validate(resume_to_dict(data))
