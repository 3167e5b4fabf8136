"""Required-field checks that gate forward navigation.

Validation never raises. Each check returns a :class:`ValidationResult`
carrying a short title and message suitable for a transient notification,
plus per-field flags for inline error markers.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from resume_builder.models.resume import (
    Education,
    PersonalDetails,
    ResumeData,
    WorkExperience,
)
from resume_builder.wizard.steps import WizardStep

logger = logging.getLogger(__name__)

__all__ = [
    "REQUIRED_PERSONAL_FIELDS",
    "ValidationResult",
    "validate_education",
    "validate_personal_details",
    "validate_step",
    "validate_work_experience",
]

REQUIRED_PERSONAL_FIELDS = ("full_name", "email", "phone", "address")
_REQUIRED_EDUCATION_FIELDS = ("degree", "institution", "field_of_study")
_REQUIRED_WORK_FIELDS = ("job_title", "company")


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Outcome of validating one wizard step.

    Attributes:
        ok: True when the step may be left forwards.
        title: Short heading for the notification (empty when ok).
        message: User-visible explanation (empty when ok).
        field_errors: Field name -> True when that field is missing.
    """

    ok: bool
    title: str = ""
    message: str = ""
    field_errors: dict[str, bool] = field(default_factory=dict)

    @classmethod
    def success(cls) -> ValidationResult:
        return cls(ok=True)

    @classmethod
    def failure(
        cls,
        title: str,
        message: str,
        field_errors: dict[str, bool] | None = None,
    ) -> ValidationResult:
        return cls(ok=False, title=title, message=message, field_errors=field_errors or {})


def _is_blank(value: str | None) -> bool:
    return not value


def validate_personal_details(details: PersonalDetails) -> ValidationResult:
    """Require full name, email, phone and address; optional fields are ignored."""
    errors = {name: _is_blank(getattr(details, name)) for name in REQUIRED_PERSONAL_FIELDS}
    if any(errors.values()):
        missing = [name for name, bad in errors.items() if bad]
        logger.warning("Personal details missing required fields: %s", ", ".join(missing))
        return ValidationResult.failure(
            "Required Fields Missing",
            "Please fill in all required fields.",
            errors,
        )
    return ValidationResult(ok=True, field_errors=errors)


def validate_education(entries: Sequence[Education]) -> ValidationResult:
    """Require at least one entry, each with degree, institution and field of study."""
    if not entries:
        return ValidationResult.failure(
            "Education Required",
            "Please add at least one education entry.",
        )

    errors: dict[str, bool] = {}
    for entry in entries:
        for name in _REQUIRED_EDUCATION_FIELDS:
            if _is_blank(getattr(entry, name)):
                errors[f"{entry.id}.{name}"] = True

    if errors:
        logger.warning("Incomplete education entries: %d missing field(s)", len(errors))
        return ValidationResult.failure(
            "Incomplete Education",
            "Please complete all education entries.",
            errors,
        )
    return ValidationResult.success()


def validate_work_experience(entries: Sequence[WorkExperience]) -> ValidationResult:
    """Allow an empty list; otherwise every entry needs a job title and company."""
    errors: dict[str, bool] = {}
    for entry in entries:
        for name in _REQUIRED_WORK_FIELDS:
            if _is_blank(getattr(entry, name)):
                errors[f"{entry.id}.{name}"] = True

    if errors:
        logger.warning("Incomplete work experience entries: %d missing field(s)", len(errors))
        return ValidationResult.failure(
            "Incomplete Work Experience",
            "Please complete all work experience entries.",
            errors,
        )
    return ValidationResult.success()


def validate_step(step: WizardStep, state: ResumeData) -> ValidationResult:
    """Validate the form owned by *step*; steps without a form always pass."""
    if step is WizardStep.PERSONAL:
        return validate_personal_details(state.personal_details)
    if step is WizardStep.EDUCATION:
        return validate_education(state.education)
    if step is WizardStep.EXPERIENCE:
        return validate_work_experience(state.work_experience)
    return ValidationResult.success()
