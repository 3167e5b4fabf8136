"""Wizard step order, per-step validation and cursor navigation."""

from resume_builder.wizard.navigation import advance, go_to, retreat
from resume_builder.wizard.steps import ROUTES, WizardStep, next_step, previous_step
from resume_builder.wizard.validation import ValidationResult, validate_step

__all__ = [
    "ROUTES",
    "ValidationResult",
    "WizardStep",
    "advance",
    "go_to",
    "next_step",
    "previous_step",
    "retreat",
    "validate_step",
]
