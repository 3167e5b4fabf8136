"""Tests for the per-step validation gates."""

from __future__ import annotations

from resume_builder.models.resume import (
    Education,
    PersonalDetails,
    ResumeData,
    WorkExperience,
)
from resume_builder.wizard.steps import WizardStep
from resume_builder.wizard.validation import (
    validate_education,
    validate_personal_details,
    validate_step,
    validate_work_experience,
)


def _complete_details() -> PersonalDetails:
    return PersonalDetails(
        full_name="Jane Doe",
        email="jane@example.com",
        phone="555-0100",
        address="Kelowna, BC",
    )


class TestPersonalDetails:
    def test_complete_passes(self) -> None:
        result = validate_personal_details(_complete_details())
        assert result.ok
        assert not any(result.field_errors.values())

    def test_missing_fields_flagged(self) -> None:
        result = validate_personal_details(PersonalDetails(full_name="Jane Doe"))

        assert not result.ok
        assert result.title == "Required Fields Missing"
        assert result.message == "Please fill in all required fields."
        assert result.field_errors == {
            "full_name": False,
            "email": True,
            "phone": True,
            "address": True,
        }

    def test_whitespace_is_not_blank(self) -> None:
        details = PersonalDetails(full_name=" ", email="a@b.c", phone="1", address="x")
        assert validate_personal_details(details).ok

    def test_empty_string_is_blank(self) -> None:
        details = PersonalDetails(full_name="", email="a@b.c", phone="1", address="x")
        result = validate_personal_details(details)
        assert not result.ok
        assert result.field_errors["full_name"] is True

    def test_optional_fields_ignored(self) -> None:
        assert validate_personal_details(_complete_details()).ok


class TestEducation:
    def test_empty_list_fails(self) -> None:
        result = validate_education([])
        assert not result.ok
        assert result.title == "Education Required"
        assert result.message == "Please add at least one education entry."

    def test_incomplete_entry_fails(self) -> None:
        entry = Education(id="e1", degree="BSc", institution="")
        result = validate_education([entry])

        assert not result.ok
        assert result.title == "Incomplete Education"
        assert result.message == "Please complete all education entries."
        assert result.field_errors == {"e1.institution": True, "e1.field_of_study": True}

    def test_complete_entry_passes(self) -> None:
        entry = Education(degree="BSc", field_of_study="CS", institution="UBC")
        assert validate_education([entry]).ok


class TestWorkExperience:
    def test_empty_list_passes(self) -> None:
        assert validate_work_experience([]).ok

    def test_incomplete_entry_fails(self) -> None:
        result = validate_work_experience([WorkExperience(id="w1", job_title="Engineer")])
        assert not result.ok
        assert result.title == "Incomplete Work Experience"
        assert result.field_errors == {"w1.company": True}


def test_steps_without_forms_always_pass() -> None:
    empty = ResumeData()
    for step in (WizardStep.WELCOME, WizardStep.TEMPLATE, WizardStep.PREVIEW):
        assert validate_step(step, empty).ok


def test_validate_step_dispatches() -> None:
    empty = ResumeData()
    assert not validate_step(WizardStep.PERSONAL, empty).ok
    assert not validate_step(WizardStep.EDUCATION, empty).ok
    assert validate_step(WizardStep.EXPERIENCE, empty).ok
