"""Tests for moving the wizard cursor."""

from __future__ import annotations

from resume_builder.state.store import ResumeStore
from resume_builder.wizard.navigation import advance, go_to, retreat
from resume_builder.wizard.steps import WizardStep


def _fill_personal(store: ResumeStore) -> None:
    store.update_personal_details(
        full_name="Jane Doe",
        email="jane@example.com",
        phone="555-0100",
        address="Kelowna, BC",
    )


def test_advance_through_steps_without_forms() -> None:
    store = ResumeStore()
    assert advance(store).ok
    assert store.current_step is WizardStep.TEMPLATE
    assert advance(store).ok
    assert store.current_step is WizardStep.PERSONAL


def test_failed_validation_leaves_cursor() -> None:
    store = ResumeStore(step=WizardStep.PERSONAL)
    result = advance(store)

    assert not result.ok
    assert result.title == "Required Fields Missing"
    assert store.current_step is WizardStep.PERSONAL


def test_education_gate_end_to_end() -> None:
    store = ResumeStore(step=WizardStep.PERSONAL)
    _fill_personal(store)
    assert advance(store).ok
    assert store.current_step is WizardStep.EDUCATION

    result = advance(store)
    assert not result.ok
    assert result.title == "Education Required"
    assert store.current_step is WizardStep.EDUCATION

    entry_id = store.add_education(degree="BSc")
    result = advance(store)
    assert result.title == "Incomplete Education"
    assert result.field_errors[f"{entry_id}.institution"] is True

    store.update_education(entry_id, institution="UBC", field_of_study="Computer Science")
    assert advance(store).ok
    assert store.current_step is WizardStep.EXPERIENCE

    assert advance(store).ok
    assert store.current_step is WizardStep.PREVIEW


def test_advance_from_last_step_fails() -> None:
    store = ResumeStore(step=WizardStep.PREVIEW)
    result = advance(store)
    assert not result.ok
    assert result.title == "Cannot Continue"
    assert store.current_step is WizardStep.PREVIEW


def test_retreat_never_validates() -> None:
    store = ResumeStore(step=WizardStep.EDUCATION)
    assert retreat(store).ok
    assert store.current_step is WizardStep.PERSONAL


def test_retreat_from_first_step_fails() -> None:
    store = ResumeStore()
    result = retreat(store)
    assert not result.ok
    assert store.current_step is WizardStep.WELCOME


def test_go_to_backwards_is_free() -> None:
    store = ResumeStore(step=WizardStep.EXPERIENCE)
    assert go_to(store, WizardStep.TEMPLATE).ok
    assert store.current_step is WizardStep.TEMPLATE


def test_go_to_forwards_stops_at_first_failure() -> None:
    store = ResumeStore()
    result = go_to(store, WizardStep.PREVIEW)

    assert not result.ok
    assert result.title == "Required Fields Missing"
    assert store.current_step is WizardStep.WELCOME


def test_go_to_forwards_when_valid() -> None:
    store = ResumeStore()
    _fill_personal(store)
    store.add_education(degree="BSc", institution="UBC", field_of_study="CS")
    assert go_to(store, WizardStep.PREVIEW).ok
    assert store.current_step is WizardStep.PREVIEW
