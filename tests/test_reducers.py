"""Tests for the pure resume reducers."""

from __future__ import annotations

import pytest

from resume_builder.models.resume import EntryNotFoundError, ResumeData, ResumeStateError
from resume_builder.state import reducers


@pytest.fixture
def empty() -> ResumeData:
    return reducers.default_resume()


def test_default_resume_is_empty(empty: ResumeData) -> None:
    assert empty.selected_template == "classic"
    assert empty.selected_color_palette == "blue"
    assert empty.personal_details.full_name == ""
    assert empty.education == ()
    assert empty.work_experience == ()
    assert empty.skills == ()


class TestPersonalDetails:
    def test_update_merges_fields(self, empty: ResumeData) -> None:
        state = reducers.update_personal_details(empty, full_name="Jane Doe")
        state = reducers.update_personal_details(state, email="jane@example.com")

        assert state.personal_details.full_name == "Jane Doe"
        assert state.personal_details.email == "jane@example.com"

    def test_input_is_not_mutated(self, empty: ResumeData) -> None:
        reducers.update_personal_details(empty, full_name="Jane Doe")
        assert empty.personal_details.full_name == ""

    def test_unknown_field_rejected(self, empty: ResumeData) -> None:
        with pytest.raises(ResumeStateError, match="nickname"):
            reducers.update_personal_details(empty, nickname="JD")


class TestEducation:
    def test_add_assigns_unique_ids_in_order(self, empty: ResumeData) -> None:
        state = reducers.add_education(empty, degree="BSc")
        state = reducers.add_education(state, degree="MSc")

        assert [e.degree for e in state.education] == ["BSc", "MSc"]
        assert state.education[0].id != state.education[1].id

    def test_update_only_touches_target(self, empty: ResumeData) -> None:
        state = reducers.add_education(empty, degree="BSc")
        state = reducers.add_education(state, degree="MSc")
        first, second = state.education

        state = reducers.update_education(state, second.id, institution="MIT")

        assert state.education[0] == first
        assert state.education[1].institution == "MIT"
        assert state.education[1].id == second.id

    def test_update_unknown_id(self, empty: ResumeData) -> None:
        with pytest.raises(EntryNotFoundError):
            reducers.update_education(empty, "missing", degree="BSc")

    def test_remove(self, empty: ResumeData) -> None:
        state = reducers.add_education(empty, degree="BSc")
        state = reducers.add_education(state, degree="MSc")
        state = reducers.remove_education(state, state.education[0].id)

        assert [e.degree for e in state.education] == ["MSc"]

    def test_remove_unknown_id(self, empty: ResumeData) -> None:
        with pytest.raises(EntryNotFoundError):
            reducers.remove_education(empty, "missing")


class TestWorkExperience:
    def test_add_update_remove(self, empty: ResumeData) -> None:
        state = reducers.add_work_experience(empty, job_title="Engineer", company="Acme")
        entry_id = state.work_experience[0].id

        state = reducers.update_work_experience(state, entry_id, description="Built things")
        assert state.work_experience[0].description == "Built things"
        assert state.work_experience[0].company == "Acme"

        state = reducers.remove_work_experience(state, entry_id)
        assert state.work_experience == ()

    def test_unknown_field_rejected(self, empty: ResumeData) -> None:
        with pytest.raises(ResumeStateError):
            reducers.add_work_experience(empty, salary="lots")


class TestSkills:
    def test_add_strips_whitespace(self, empty: ResumeData) -> None:
        state = reducers.add_skill(empty, "  Python  ")
        assert [s.name for s in state.skills] == ["Python"]

    def test_blank_skill_rejected(self, empty: ResumeData) -> None:
        with pytest.raises(ResumeStateError, match="empty"):
            reducers.add_skill(empty, "   ")

    def test_remove(self, empty: ResumeData) -> None:
        state = reducers.add_skill(empty, "Python")
        state = reducers.add_skill(state, "SQL")
        state = reducers.remove_skill(state, state.skills[0].id)
        assert [s.name for s in state.skills] == ["SQL"]

    def test_remove_unknown_id(self, empty: ResumeData) -> None:
        with pytest.raises(EntryNotFoundError):
            reducers.remove_skill(empty, "missing")


class TestSelection:
    def test_select_template_keeps_given_id(self, empty: ResumeData) -> None:
        assert reducers.select_template(empty, "modern").selected_template == "modern"
        assert reducers.select_template(empty, "elegant").selected_template == "elegant"

    def test_select_palette(self, empty: ResumeData) -> None:
        assert reducers.select_color_palette(empty, "teal").selected_color_palette == "teal"

    def test_selection_leaves_content(self, empty: ResumeData) -> None:
        state = reducers.add_skill(empty, "Python")
        state = reducers.select_template(state, "modern")
        assert [s.name for s in state.skills] == ["Python"]


def test_replace_state_returns_new_state(empty: ResumeData) -> None:
    other = reducers.add_skill(empty, "Go")
    assert reducers.replace_state(empty, other) is other
