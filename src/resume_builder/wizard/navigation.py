"""Forward/back movement of the wizard step cursor.

The cursor moves by exactly one step per transition. Moving forwards runs
the validation of the step being left; a failed check leaves the cursor
where it was and hands the failure back to the caller for display.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from resume_builder.wizard.steps import WizardStep, next_step, previous_step
from resume_builder.wizard.validation import ValidationResult, validate_step

if TYPE_CHECKING:
    from resume_builder.state.store import ResumeStore

logger = logging.getLogger(__name__)

__all__ = ["advance", "go_to", "retreat"]


def advance(store: ResumeStore) -> ValidationResult:
    """Validate the current step and move one step forward on success."""
    current = store.current_step
    target = next_step(current)
    if target is None:
        return ValidationResult.failure("Cannot Continue", "Already at the last step.")

    result = validate_step(current, store.state)
    if not result.ok:
        logger.info("Blocked advance from %s: %s", current.label, result.title)
        return result

    store.set_step(target)
    return result


def retreat(store: ResumeStore) -> ValidationResult:
    """Move one step back; nothing is validated when going backwards."""
    target = previous_step(store.current_step)
    if target is None:
        return ValidationResult.failure("Cannot Go Back", "Already at the first step.")
    store.set_step(target)
    return ValidationResult.success()


def go_to(store: ResumeStore, step: WizardStep) -> ValidationResult:
    """Jump to *step*.

    Jumping backwards is always allowed. Jumping forwards validates every
    step from the current one up to (not including) *step* and stops at the
    first failure without moving the cursor.
    """
    step = WizardStep(step)
    current = store.current_step
    if step <= current:
        store.set_step(step)
        return ValidationResult.success()

    for passing in range(current, step):
        result = validate_step(WizardStep(passing), store.state)
        if not result.ok:
            return result

    store.set_step(step)
    return ValidationResult.success()
