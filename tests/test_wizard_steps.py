"""Tests for the ordered wizard steps and routes."""

from __future__ import annotations

from resume_builder.wizard.steps import (
    ROUTES,
    WizardStep,
    first_step,
    last_step,
    next_step,
    previous_step,
    step_for_route,
)


def test_six_steps_in_order() -> None:
    assert [s.label for s in WizardStep] == [
        "Welcome",
        "Template",
        "Personal",
        "Education",
        "Experience",
        "Preview",
    ]
    assert first_step() is WizardStep.WELCOME
    assert last_step() is WizardStep.PREVIEW


def test_neighbours() -> None:
    assert next_step(WizardStep.WELCOME) is WizardStep.TEMPLATE
    assert next_step(WizardStep.PREVIEW) is None
    assert previous_step(WizardStep.TEMPLATE) is WizardStep.WELCOME
    assert previous_step(WizardStep.WELCOME) is None


def test_routes() -> None:
    assert ROUTES == (
        "/",
        "/template",
        "/personal-details",
        "/education",
        "/work-experience",
        "/preview",
        "/resume-preview",
        "/account",
    )
    assert step_for_route("/education") is WizardStep.EDUCATION
    assert step_for_route("/account") is None
