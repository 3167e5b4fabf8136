from __future__ import annotations

import subprocess
from pathlib import Path

from pylatex.errors import CompilerError
from textual import on
from textual.app import App, ComposeResult
from textual.containers import Container, Horizontal, VerticalScroll
from textual.widgets import (
    Button,
    Footer,
    Header,
    Input,
    Label,
    ListItem,
    ListView,
    Markdown,
    Static,
    TextArea,
)
from textual.worker import Worker, WorkerState

from resume_builder.config import get_export_dir
from resume_builder.constants.catalog import list_palettes, list_template_infos
from resume_builder.models.resume import ResumeData, ResumeStateError
from resume_builder.services.auth import AuthSession, NotAuthenticatedError
from resume_builder.services.resume_export import generate_resume_pdf, generate_resume_tex
from resume_builder.services.snapshots import (
    delete_snapshot,
    list_snapshots,
    load_snapshot,
    save_snapshot,
)
from resume_builder.state.store import ResumeStore
from resume_builder.tui_rendering import (
    render_resume_markdown,
    render_selection_summary,
    render_snapshot_list,
)
from resume_builder.wizard.navigation import advance, go_to, retreat
from resume_builder.wizard.steps import WizardStep, step_for_route
from resume_builder.wizard.validation import ValidationResult

_PAGE_IDS: dict[str, str] = {
    "/": "page-welcome",
    "/template": "page-template",
    "/personal-details": "page-personal",
    "/education": "page-education",
    "/work-experience": "page-experience",
    "/preview": "page-preview",
    "/resume-preview": "page-resume-preview",
    "/account": "page-account",
}

_PERSONAL_INPUTS: tuple[tuple[str, str], ...] = (
    ("full_name", "Full name *"),
    ("email", "Email *"),
    ("phone", "Phone *"),
    ("address", "Address *"),
    ("linkedin", "LinkedIn URL"),
    ("profile_picture", "Profile picture (file path)"),
)

_EDUCATION_INPUTS: tuple[tuple[str, str], ...] = (
    ("degree", "Degree *"),
    ("field_of_study", "Field of study *"),
    ("institution", "Institution *"),
    ("start_date", "Start (YYYY-MM)"),
    ("end_date", "End (YYYY-MM, blank if ongoing)"),
)

_WORK_INPUTS: tuple[tuple[str, str], ...] = (
    ("job_title", "Job title *"),
    ("company", "Company *"),
    ("start_date", "Start (YYYY-MM)"),
    ("end_date", "End (YYYY-MM, blank if current)"),
)


class ResumeBuilderTUI(App[None]):
    """Step-by-step resume builder."""

    BINDINGS = [
        ("q", "quit", "Quit"),
        ("ctrl+n", "next_step", "Next"),
        ("ctrl+b", "previous_step", "Back"),
        ("ctrl+d", "download", "Download PDF"),
    ]

    CSS = """
Screen {
    layout: vertical;
    background: $background;
}

#progress-line {
    height: auto;
    padding: 0 2;
    color: $text-muted;
}

.page {
    height: 1fr;
    border: heavy $primary;
    background: $surface;
    padding: 1 2;
}

.page Input,
.page TextArea {
    margin-bottom: 1;
}

.page-title {
    text-style: bold;
    margin-bottom: 1;
}

.invalid {
    border: tall $error;
}

.row {
    height: auto;
}

.row Button {
    margin-right: 1;
}

ListView {
    height: auto;
    max-height: 12;
    border: round $primary;
    margin-bottom: 1;
}

#summary-input,
#work-description {
    height: 6;
}

#tex-source {
    height: 1fr;
}

#auth-card {
    padding: 2;
    border: heavy $primary;
    background: $panel;
    width: 44;
}

#nav-bar {
    height: auto;
    padding: 0 2;
    background: $panel;
}

#nav-bar Button {
    margin-right: 1;
}
"""

    def __init__(self, store: ResumeStore | None = None, session: AuthSession | None = None):
        super().__init__()
        self._store = store or ResumeStore()
        self._session = session or AuthSession()
        self._route: str = self._store.current_step.route
        self._snapshots: list[dict] = []
        self._worker: Worker[Path] | None = None

    def compose(self) -> ComposeResult:
        yield Header()
        yield Label("", id="progress-line")

        yield VerticalScroll(
            Static("Resume Builder", classes="page-title"),
            Markdown(
                "Build a polished resume in six short steps: pick a template, "
                "fill in your details, education and experience, then preview "
                "and download it as a PDF.\n\n"
                "Sign in from **Account** to save drafts and download."
            ),
            Button("Get Started", id="btn-start", variant="primary"),
            id="page-welcome",
            classes="page",
        )

        yield VerticalScroll(
            Static("Choose a template", classes="page-title"),
            ListView(
                *(
                    ListItem(Label(f"{t.name}: {t.description}"), name=t.id)
                    for t in list_template_infos()
                ),
                id="template-list",
            ),
            Static("Choose a color palette", classes="page-title"),
            ListView(
                *(ListItem(Label(f"{p.name} ({p.primary})"), name=p.id) for p in list_palettes()),
                id="palette-list",
            ),
            Markdown("", id="selection-summary"),
            id="page-template",
            classes="page",
        )

        yield VerticalScroll(
            Static("Personal details", classes="page-title"),
            *(
                Input(placeholder=label, id=f"personal-{field}", classes="personal-field")
                for field, label in _PERSONAL_INPUTS
            ),
            Label("Professional summary"),
            TextArea("", id="summary-input"),
            id="page-personal",
            classes="page",
        )

        yield VerticalScroll(
            Static("Education", classes="page-title"),
            *(
                Input(placeholder=label, id=f"education-{field}")
                for field, label in _EDUCATION_INPUTS
            ),
            Horizontal(
                Button("Add", id="btn-education-add", variant="primary"),
                Button("Update Selected", id="btn-education-update"),
                Button("Remove Selected", id="btn-education-remove", variant="error"),
                classes="row",
            ),
            ListView(id="education-list"),
            Static("Skills", classes="page-title"),
            Input(placeholder="Skill (press Enter to add)", id="skill-input"),
            Horizontal(
                Button("Add Skill", id="btn-skill-add", variant="primary"),
                Button("Remove Selected", id="btn-skill-remove", variant="error"),
                classes="row",
            ),
            ListView(id="skill-list"),
            id="page-education",
            classes="page",
        )

        yield VerticalScroll(
            Static("Work experience (optional)", classes="page-title"),
            *(Input(placeholder=label, id=f"work-{field}") for field, label in _WORK_INPUTS),
            Label("Description"),
            TextArea("", id="work-description"),
            Horizontal(
                Button("Add", id="btn-work-add", variant="primary"),
                Button("Update Selected", id="btn-work-update"),
                Button("Remove Selected", id="btn-work-remove", variant="error"),
                classes="row",
            ),
            ListView(id="work-list"),
            id="page-experience",
            classes="page",
        )

        yield VerticalScroll(
            Markdown("", id="preview-output"),
            Input(placeholder="Name for saved resume (default: My Resume)", id="snapshot-name"),
            Horizontal(
                Button("Save Resume", id="btn-save", variant="primary"),
                Button("Download PDF", id="btn-download", variant="success"),
                Button("Full Preview", id="btn-full-preview"),
                classes="row",
            ),
            id="page-preview",
            classes="page",
        )

        yield Container(
            Static("LaTeX source", classes="page-title"),
            TextArea("", id="tex-source", read_only=True, language=None),
            Horizontal(
                Button("Back to Preview", id="btn-back-preview"),
                Button("Download PDF", id="btn-download-full", variant="success"),
                classes="row",
            ),
            id="page-resume-preview",
            classes="page",
        )

        yield VerticalScroll(
            Container(
                Static("Sign in", classes="page-title"),
                Input(placeholder="Username", id="auth-username"),
                Input(placeholder="Password", password=True, id="auth-password"),
                Horizontal(
                    Button("Login", id="auth-btn-login", variant="primary"),
                    Button("Sign Up", id="auth-btn-signup"),
                    classes="row",
                ),
                id="auth-card",
            ),
            Container(
                Label("Hi, -", id="user-label"),
                ListView(id="snapshot-list"),
                Markdown("", id="snapshot-output"),
                Horizontal(
                    Button("Load Selected", id="btn-snapshot-load", variant="primary"),
                    Button("Delete Selected", id="btn-snapshot-delete", variant="error"),
                    Button("Log Out", id="btn-logout"),
                    classes="row",
                ),
                id="account-panel",
            ),
            Button("Back to Builder", id="btn-back-builder"),
            id="page-account",
            classes="page",
        )

        yield Horizontal(
            Button("Back", id="btn-back"),
            Button("Next", id="btn-next", variant="primary"),
            Button("Account", id="btn-account"),
            id="nav-bar",
        )
        yield Footer()

    def on_mount(self) -> None:
        self._store.subscribe(self._on_state_changed)
        self._refresh_auth_view()
        self._on_state_changed(self._store.state)
        self._show_route(self._route)

    # ---------------------------------------------------------------------
    # ROUTING
    # ---------------------------------------------------------------------

    def _show_route(self, route: str) -> None:
        """Show the page for *route* and hide every other page."""
        self._route = route
        for page_route, page_id in _PAGE_IDS.items():
            self.query_one(f"#{page_id}").display = page_route == route

        step = step_for_route(route)
        progress = self.query_one("#progress-line", Label)
        back_btn = self.query_one("#btn-back", Button)
        next_btn = self.query_one("#btn-next", Button)
        if step is None:
            progress.update("")
            back_btn.display = False
            next_btn.display = False
        else:
            progress.update(f"Step {int(step)} of {len(WizardStep)} · {step.label}")
            back_btn.display = step is not WizardStep.WELCOME
            next_btn.display = step is not WizardStep.PREVIEW

        if route == "/resume-preview":
            self._render_tex_source()

    def _show_current_step(self) -> None:
        self._show_route(self._store.current_step.route)

    def _report(self, result: ValidationResult) -> None:
        """Show a failed transition and mark the offending fields."""
        self._mark_invalid(result)
        if not result.ok:
            self.notify(result.message, title=result.title, severity="error")

    def _mark_invalid(self, result: ValidationResult) -> None:
        errors = result.field_errors
        for field, _ in _PERSONAL_INPUTS:
            self.query_one(f"#personal-{field}", Input).set_class(
                bool(errors.get(field)), "invalid"
            )
        self._refresh_entry_lists(errors)

    def action_next_step(self) -> None:
        if step_for_route(self._route) is None:
            return
        result = advance(self._store)
        self._report(result)
        self._show_current_step()

    def action_previous_step(self) -> None:
        if step_for_route(self._route) is None:
            return
        retreat(self._store)
        self._show_current_step()

    @on(Button.Pressed, "#btn-next")
    def handle_next(self) -> None:
        self.action_next_step()

    @on(Button.Pressed, "#btn-back")
    def handle_back(self) -> None:
        self.action_previous_step()

    @on(Button.Pressed, "#btn-start")
    def handle_start(self) -> None:
        self._report(go_to(self._store, WizardStep.TEMPLATE))
        self._show_current_step()

    @on(Button.Pressed, "#btn-account")
    def handle_account(self) -> None:
        self._show_route("/account")

    @on(Button.Pressed, "#btn-back-builder")
    def handle_back_to_builder(self) -> None:
        self._show_current_step()

    @on(Button.Pressed, "#btn-full-preview")
    def handle_full_preview(self) -> None:
        self._show_route("/resume-preview")

    @on(Button.Pressed, "#btn-back-preview")
    def handle_back_to_preview(self) -> None:
        self._show_route(WizardStep.PREVIEW.route)

    # ---------------------------------------------------------------------
    # STATE -> VIEW
    # ---------------------------------------------------------------------

    def _on_state_changed(self, state: ResumeData) -> None:
        self.query_one("#selection-summary", Markdown).update(render_selection_summary(state))
        self.query_one("#preview-output", Markdown).update(render_resume_markdown(state))
        self._refresh_entry_lists({})
        if self._route == "/resume-preview":
            self._render_tex_source()

    def _refresh_entry_lists(self, errors: dict[str, bool]) -> None:
        state = self._store.state

        def incomplete(entry_id: str) -> bool:
            return any(v for k, v in errors.items() if k.startswith(f"{entry_id}."))

        education_list = self.query_one("#education-list", ListView)
        education_list.clear()
        for edu in state.education:
            marker = " (incomplete)" if incomplete(edu.id) else ""
            text = f"{edu.degree or '?'} - {edu.institution or '?'}{marker}"
            item = ListItem(Label(text), name=edu.id)
            item.set_class(bool(marker), "invalid")
            education_list.append(item)

        work_list = self.query_one("#work-list", ListView)
        work_list.clear()
        for job in state.work_experience:
            marker = " (incomplete)" if incomplete(job.id) else ""
            text = f"{job.job_title or '?'} at {job.company or '?'}{marker}"
            item = ListItem(Label(text), name=job.id)
            item.set_class(bool(marker), "invalid")
            work_list.append(item)

        skill_list = self.query_one("#skill-list", ListView)
        skill_list.clear()
        for skill in state.skills:
            skill_list.append(ListItem(Label(skill.name), name=skill.id))

    def _populate_inputs(self) -> None:
        """Copy the draft's personal details into the form after a load."""
        details = self._store.state.personal_details
        for field, _ in _PERSONAL_INPUTS:
            self.query_one(f"#personal-{field}", Input).value = getattr(details, field)
        self.query_one("#summary-input", TextArea).load_text(details.summary)

    def _render_tex_source(self) -> None:
        self.query_one("#tex-source", TextArea).load_text(
            generate_resume_tex(self._store.state)
        )

    # ---------------------------------------------------------------------
    # TEMPLATE & PALETTE
    # ---------------------------------------------------------------------

    @on(ListView.Selected, "#template-list")
    def handle_template_selected(self, event: ListView.Selected) -> None:
        if event.item.name:
            self._store.select_template(event.item.name)

    @on(ListView.Selected, "#palette-list")
    def handle_palette_selected(self, event: ListView.Selected) -> None:
        if event.item.name:
            self._store.select_color_palette(event.item.name)

    # ---------------------------------------------------------------------
    # PERSONAL DETAILS
    # ---------------------------------------------------------------------

    @on(Input.Changed, ".personal-field")
    def handle_personal_changed(self, event: Input.Changed) -> None:
        field = (event.input.id or "").removeprefix("personal-")
        if getattr(self._store.state.personal_details, field) == event.value:
            return
        self._store.update_personal_details(**{field: event.value})
        event.input.set_class(False, "invalid")

    @on(TextArea.Changed, "#summary-input")
    def handle_summary_changed(self, event: TextArea.Changed) -> None:
        text = event.text_area.text
        if self._store.state.personal_details.summary != text:
            self._store.update_personal_details(summary=text)

    # ---------------------------------------------------------------------
    # EDUCATION, SKILLS & EXPERIENCE
    # ---------------------------------------------------------------------

    def _read_form(self, prefix: str, inputs: tuple[tuple[str, str], ...]) -> dict[str, str]:
        return {field: self.query_one(f"#{prefix}-{field}", Input).value for field, _ in inputs}

    def _clear_form(self, prefix: str, inputs: tuple[tuple[str, str], ...]) -> None:
        for field, _ in inputs:
            self.query_one(f"#{prefix}-{field}", Input).value = ""

    def _selected_name(self, list_id: str) -> str | None:
        child = self.query_one(list_id, ListView).highlighted_child
        return child.name if child is not None else None

    @on(Button.Pressed, "#btn-education-add")
    def handle_education_add(self) -> None:
        self._store.add_education(**self._read_form("education", _EDUCATION_INPUTS))
        self._clear_form("education", _EDUCATION_INPUTS)

    @on(ListView.Selected, "#education-list")
    def handle_education_selected(self, event: ListView.Selected) -> None:
        entry = next((e for e in self._store.state.education if e.id == event.item.name), None)
        if entry is None:
            return
        for field, _ in _EDUCATION_INPUTS:
            self.query_one(f"#education-{field}", Input).value = getattr(entry, field)

    @on(Button.Pressed, "#btn-education-update")
    def handle_education_update(self) -> None:
        entry_id = self._selected_name("#education-list")
        if entry_id is None:
            self.notify("Select an education entry first.", severity="warning")
            return
        try:
            fields = self._read_form("education", _EDUCATION_INPUTS)
            self._store.update_education(entry_id, **fields)
        except ResumeStateError as exc:
            self.notify(str(exc), severity="error")
            return
        self._clear_form("education", _EDUCATION_INPUTS)

    @on(Button.Pressed, "#btn-education-remove")
    def handle_education_remove(self) -> None:
        entry_id = self._selected_name("#education-list")
        if entry_id is None:
            return
        try:
            self._store.remove_education(entry_id)
        except ResumeStateError as exc:
            self.notify(str(exc), severity="error")

    @on(Input.Submitted, "#skill-input")
    @on(Button.Pressed, "#btn-skill-add")
    def handle_skill_add(self) -> None:
        skill_input = self.query_one("#skill-input", Input)
        try:
            self._store.add_skill(skill_input.value)
        except ResumeStateError as exc:
            self.notify(str(exc), severity="error")
            return
        skill_input.value = ""

    @on(Button.Pressed, "#btn-skill-remove")
    def handle_skill_remove(self) -> None:
        entry_id = self._selected_name("#skill-list")
        if entry_id is None:
            return
        try:
            self._store.remove_skill(entry_id)
        except ResumeStateError as exc:
            self.notify(str(exc), severity="error")

    def _read_work_form(self) -> dict[str, str]:
        fields = self._read_form("work", _WORK_INPUTS)
        fields["description"] = self.query_one("#work-description", TextArea).text
        return fields

    def _clear_work_form(self) -> None:
        self._clear_form("work", _WORK_INPUTS)
        self.query_one("#work-description", TextArea).load_text("")

    @on(Button.Pressed, "#btn-work-add")
    def handle_work_add(self) -> None:
        self._store.add_work_experience(**self._read_work_form())
        self._clear_work_form()

    @on(ListView.Selected, "#work-list")
    def handle_work_selected(self, event: ListView.Selected) -> None:
        entry = next(
            (e for e in self._store.state.work_experience if e.id == event.item.name), None
        )
        if entry is None:
            return
        for field, _ in _WORK_INPUTS:
            self.query_one(f"#work-{field}", Input).value = getattr(entry, field)
        self.query_one("#work-description", TextArea).load_text(entry.description)

    @on(Button.Pressed, "#btn-work-update")
    def handle_work_update(self) -> None:
        entry_id = self._selected_name("#work-list")
        if entry_id is None:
            self.notify("Select a work experience entry first.", severity="warning")
            return
        try:
            self._store.update_work_experience(entry_id, **self._read_work_form())
        except ResumeStateError as exc:
            self.notify(str(exc), severity="error")
            return
        self._clear_work_form()

    @on(Button.Pressed, "#btn-work-remove")
    def handle_work_remove(self) -> None:
        entry_id = self._selected_name("#work-list")
        if entry_id is None:
            return
        try:
            self._store.remove_work_experience(entry_id)
        except ResumeStateError as exc:
            self.notify(str(exc), severity="error")

    # ---------------------------------------------------------------------
    # SAVE & DOWNLOAD
    # ---------------------------------------------------------------------

    def _require_user(self) -> str | None:
        try:
            return self._session.require_user()
        except NotAuthenticatedError as exc:
            self.notify(str(exc), title="Sign In Required", severity="error")
            self._show_route("/account")
            return None

    @on(Button.Pressed, "#btn-save")
    def handle_save(self) -> None:
        username = self._require_user()
        if username is None:
            return
        name_input = self.query_one("#snapshot-name", Input)
        saved = save_snapshot(username, name_input.value, self._store.state)
        if saved is None:
            self.notify("Could not save your resume.", severity="error")
            return
        name_input.value = ""
        self.notify(f"Saved '{saved['name']}'.")
        self._refresh_snapshots()

    @on(Button.Pressed, "#btn-download")
    @on(Button.Pressed, "#btn-download-full")
    def handle_download(self) -> None:
        self.action_download()

    def action_download(self) -> None:
        if self._require_user() is None:
            return
        if self._worker is not None and self._worker.state == WorkerState.RUNNING:
            self.notify("An export is already running.", severity="warning")
            return

        data = self._store.state
        export_dir = get_export_dir()

        def work() -> Path:
            return generate_resume_pdf(data, export_dir)

        self._worker = self.run_worker(work, name="export", thread=True, exit_on_error=False)
        self.notify("Generating PDF...")

    @on(Worker.StateChanged)
    def worker_state(self, event: Worker.StateChanged) -> None:
        if event.worker.name != "export":
            return
        if event.state == WorkerState.SUCCESS:
            self.notify(f"Downloaded {event.worker.result}")
        elif event.state == WorkerState.ERROR:
            error = event.worker.error
            if isinstance(error, (CompilerError, FileNotFoundError)):
                message = "LaTeX compiler not found. Please install pdflatex."
            elif isinstance(error, subprocess.CalledProcessError):
                message = "LaTeX compilation failed."
            else:
                message = f"PDF export failed: {error}"
            self.notify(message, title="Download Failed", severity="error")

    # ---------------------------------------------------------------------
    # ACCOUNT
    # ---------------------------------------------------------------------

    def _refresh_auth_view(self) -> None:
        signed_in = self._session.is_authenticated
        self.query_one("#auth-card", Container).display = not signed_in
        self.query_one("#account-panel", Container).display = signed_in
        self.query_one("#user-label", Label).update(
            f"Hi, {self._session.username}" if signed_in else "Hi, -"
        )
        if signed_in:
            self._refresh_snapshots()

    def _refresh_snapshots(self) -> None:
        username = self._session.username
        if username is None:
            return
        self._snapshots = list_snapshots(username) or []
        snapshot_list = self.query_one("#snapshot-list", ListView)
        snapshot_list.clear()
        for snap in self._snapshots:
            snapshot_list.append(ListItem(Label(snap["name"]), name=str(snap["id"])))
        self.query_one("#snapshot-output", Markdown).update(render_snapshot_list(self._snapshots))

    def _submit_credentials(self, signup: bool) -> None:
        username_input = self.query_one("#auth-username", Input)
        password_input = self.query_one("#auth-password", Input)
        username = username_input.value.strip()
        password = password_input.value
        if not username or not password:
            self.notify("Username and password are required.", severity="error")
            return

        if signup:
            ok, error = self._session.sign_up(username, password)
        else:
            ok, error = self._session.sign_in(username, password)
        if not ok:
            self.notify(error or "Login failed.", severity="error")
            return

        password_input.value = ""
        self.notify(f"Logged in as {username}.")
        self._refresh_auth_view()

    @on(Button.Pressed, "#auth-btn-login")
    def handle_login(self) -> None:
        self._submit_credentials(signup=False)

    @on(Button.Pressed, "#auth-btn-signup")
    def handle_signup(self) -> None:
        self._submit_credentials(signup=True)

    @on(Button.Pressed, "#btn-logout")
    def handle_logout(self) -> None:
        self._session.sign_out()
        self._snapshots = []
        self.query_one("#snapshot-list", ListView).clear()
        self._refresh_auth_view()
        self.notify("Logged out.")

    @on(Button.Pressed, "#btn-snapshot-load")
    def handle_snapshot_load(self) -> None:
        username = self._require_user()
        selected = self._selected_name("#snapshot-list")
        if username is None or selected is None:
            return
        data = load_snapshot(username, int(selected))
        if data is None:
            self.notify("This saved resume could not be loaded.", severity="error")
            return
        self._store.load(data)
        self._populate_inputs()
        self._store.set_step(WizardStep.PREVIEW)
        self._show_current_step()
        self.notify("Resume loaded.")

    @on(Button.Pressed, "#btn-snapshot-delete")
    def handle_snapshot_delete(self) -> None:
        username = self._require_user()
        selected = self._selected_name("#snapshot-list")
        if username is None or selected is None:
            return
        if not delete_snapshot(username, int(selected)):
            self.notify("Could not delete this saved resume.", severity="error")
            return
        self._refresh_snapshots()


def main() -> None:
    ResumeBuilderTUI().run()
