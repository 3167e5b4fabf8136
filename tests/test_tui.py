"""Tests for the resume builder TUI wiring that does not need a terminal."""

from __future__ import annotations

import subprocess
from unittest.mock import MagicMock, patch

import pytest
from pylatex.errors import CompilerError
from textual.worker import WorkerState

from resume_builder.services.auth import AuthSession
from resume_builder.state import reducers
from resume_builder.state.store import ResumeStore
from resume_builder.tui import _PAGE_IDS, _PERSONAL_INPUTS, ResumeBuilderTUI
from resume_builder.wizard.steps import ROUTES, WizardStep
from resume_builder.wizard.validation import ValidationResult


@pytest.fixture
def signed_in() -> AuthSession:
    """A session already signed in as ``jane``."""
    session = AuthSession()
    with patch("resume_builder.services.auth.authenticate_user", return_value=(True, None)):
        session.sign_in("jane", "secret")
    return session


def _export_event(state: WorkerState, error: BaseException | None = None) -> MagicMock:
    event = MagicMock()
    event.worker.name = "export"
    event.worker.error = error
    event.worker.result = "/tmp/Jane_Doe_Resume.pdf"
    event.state = state
    return event


def test_every_route_has_a_page() -> None:
    assert set(_PAGE_IDS) == set(ROUTES)


def test_uses_given_store_and_session() -> None:
    store = ResumeStore(step=WizardStep.EDUCATION)
    session = AuthSession()
    app = ResumeBuilderTUI(store=store, session=session)

    assert app._store is store
    assert app._session is session
    assert app._route == "/education"


def test_defaults_start_at_welcome() -> None:
    app = ResumeBuilderTUI()
    assert app._route == "/"
    assert not app._session.is_authenticated


class TestSignInGate:
    """Saving and downloading are refused until someone signs in."""

    def test_require_user_notifies_and_shows_account(self) -> None:
        app = ResumeBuilderTUI()
        with (
            patch.object(app, "notify") as notify,
            patch.object(app, "_show_route") as show_route,
        ):
            assert app._require_user() is None

        notify.assert_called_once_with(
            "Please sign in first.", title="Sign In Required", severity="error"
        )
        show_route.assert_called_once_with("/account")

    def test_require_user_returns_username(self, signed_in: AuthSession) -> None:
        app = ResumeBuilderTUI(session=signed_in)
        with patch.object(app, "notify") as notify:
            assert app._require_user() == "jane"
        notify.assert_not_called()

    def test_save_refused_when_signed_out(self) -> None:
        app = ResumeBuilderTUI()
        with (
            patch.object(app, "notify"),
            patch.object(app, "_show_route"),
            patch("resume_builder.tui.save_snapshot") as save,
        ):
            app.handle_save()
        save.assert_not_called()

    def test_download_refused_when_signed_out(self) -> None:
        app = ResumeBuilderTUI()
        with (
            patch.object(app, "notify") as notify,
            patch.object(app, "_show_route"),
            patch.object(app, "run_worker") as run_worker,
        ):
            app.action_download()
        run_worker.assert_not_called()
        assert notify.call_args.kwargs["title"] == "Sign In Required"

    def test_download_starts_export_worker(self, signed_in: AuthSession) -> None:
        app = ResumeBuilderTUI(session=signed_in)
        with (
            patch.object(app, "notify"),
            patch.object(app, "run_worker") as run_worker,
        ):
            app.action_download()
        run_worker.assert_called_once()
        assert run_worker.call_args.kwargs["name"] == "export"
        assert run_worker.call_args.kwargs["thread"] is True


class TestSnapshotLoad:
    def test_unloadable_snapshot_leaves_draft_alone(self, signed_in: AuthSession) -> None:
        draft = reducers.update_personal_details(ResumeStore().state, full_name="Jane Doe")
        store = ResumeStore(draft, step=WizardStep.PERSONAL)
        app = ResumeBuilderTUI(store=store, session=signed_in)

        with (
            patch.object(app, "notify") as notify,
            patch.object(app, "_selected_name", return_value="7"),
            patch.object(app, "_populate_inputs") as populate,
            patch.object(app, "_show_route"),
            patch("resume_builder.tui.load_snapshot", return_value=None) as load,
        ):
            app.handle_snapshot_load()

        load.assert_called_once_with("jane", 7)
        notify.assert_called_once_with(
            "This saved resume could not be loaded.", severity="error"
        )
        populate.assert_not_called()
        assert store.state is draft
        assert store.current_step == WizardStep.PERSONAL

    def test_loaded_snapshot_replaces_draft(self, signed_in: AuthSession) -> None:
        store = ResumeStore()
        app = ResumeBuilderTUI(store=store, session=signed_in)
        saved = reducers.update_personal_details(store.state, full_name="Saved Name")

        with (
            patch.object(app, "notify"),
            patch.object(app, "_selected_name", return_value="3"),
            patch.object(app, "_populate_inputs"),
            patch.object(app, "_show_route") as show_route,
            patch("resume_builder.tui.load_snapshot", return_value=saved),
        ):
            app.handle_snapshot_load()

        assert store.state.personal_details.full_name == "Saved Name"
        assert store.current_step == WizardStep.PREVIEW
        show_route.assert_called_with("/preview")


class TestExportWorkerState:
    @pytest.mark.parametrize(
        ("error", "message"),
        [
            (CompilerError("No LaTex compiler was found"), "LaTeX compiler not found."),
            (FileNotFoundError("pdflatex"), "LaTeX compiler not found."),
            (subprocess.CalledProcessError(1, "pdflatex"), "LaTeX compilation failed."),
            (RuntimeError("disk full"), "PDF export failed: disk full"),
        ],
    )
    def test_errors_are_reported(self, error: BaseException, message: str) -> None:
        app = ResumeBuilderTUI()
        with patch.object(app, "notify") as notify:
            app.worker_state(_export_event(WorkerState.ERROR, error))

        text = notify.call_args.args[0]
        assert text.startswith(message)
        assert notify.call_args.kwargs == {"title": "Download Failed", "severity": "error"}

    def test_success_reports_path(self) -> None:
        app = ResumeBuilderTUI()
        with patch.object(app, "notify") as notify:
            app.worker_state(_export_event(WorkerState.SUCCESS))
        notify.assert_called_once_with("Downloaded /tmp/Jane_Doe_Resume.pdf")

    def test_other_workers_ignored(self) -> None:
        app = ResumeBuilderTUI()
        event = _export_event(WorkerState.ERROR, RuntimeError("x"))
        event.worker.name = "something-else"
        with patch.object(app, "notify") as notify:
            app.worker_state(event)
        notify.assert_not_called()


class TestMarkInvalid:
    def test_flags_only_failed_personal_fields(self) -> None:
        app = ResumeBuilderTUI()
        inputs = {f"#personal-{field}": MagicMock() for field, _ in _PERSONAL_INPUTS}
        result = ValidationResult.failure(
            "Required Fields Missing",
            "Please fill in all required fields.",
            {"full_name": False, "email": True, "phone": True, "address": False},
        )

        with (
            patch.object(app, "query_one", side_effect=lambda selector, _: inputs[selector]),
            patch.object(app, "_refresh_entry_lists") as refresh,
        ):
            app._mark_invalid(result)

        inputs["#personal-email"].set_class.assert_called_once_with(True, "invalid")
        inputs["#personal-phone"].set_class.assert_called_once_with(True, "invalid")
        inputs["#personal-full_name"].set_class.assert_called_once_with(False, "invalid")
        inputs["#personal-linkedin"].set_class.assert_called_once_with(False, "invalid")
        refresh.assert_called_once_with(result.field_errors)

    def test_success_clears_every_marker(self) -> None:
        app = ResumeBuilderTUI()
        inputs = {f"#personal-{field}": MagicMock() for field, _ in _PERSONAL_INPUTS}

        with (
            patch.object(app, "query_one", side_effect=lambda selector, _: inputs[selector]),
            patch.object(app, "_refresh_entry_lists"),
        ):
            app._mark_invalid(ValidationResult.success())

        for mock in inputs.values():
            mock.set_class.assert_called_once_with(False, "invalid")
