"""Classic resume template.

Centered header with the name in the palette's primary color, a rule
beneath the contact line, then two columns: education and skills on the
left, work experience on the right.  The page is tinted with the palette
background.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pylatex import Document, NoEscape, Package

from resume_builder.templates.base import CONTACT_SEPARATOR, ResumeTemplate

if TYPE_CHECKING:
    from resume_builder.models.resume import (
        ColorPalette,
        Education,
        PersonalDetails,
        ResumeData,
        Skill,
        WorkExperience,
    )

__all__ = ["ClassicResumeTemplate"]

# ---------------------------------------------------------------------------
# LaTeX preamble fragments
# ---------------------------------------------------------------------------

_PACKAGES: list[Package] = [
    Package("fontenc", options=NoEscape("T1")),
    Package("helvet"),
    Package("titlesec"),
]

_PREAMBLE_SETUP = r"""
\renewcommand{\familydefault}{\sfdefault}
\pagestyle{empty}
\raggedbottom
\setlength{\parindent}{0pt}
\titleformat{\section}{\color{primary}\large\bfseries}{}{0em}{}[{\color{primary!30}\titlerule}]
\titlespacing{\section}{0pt}{10pt}{6pt}
\newcommand{\classicEntry}[3]{
  \textbf{#1}\hfill{\small #2}\\
  #3\par\vspace{6pt}
}
\newcommand{\classicSkill}[1]{
  \colorbox{secondary}{\textcolor{background}{\small #1}}\hspace{2pt}
}
"""


class ClassicResumeTemplate(ResumeTemplate):
    """Single header column with a two-column body."""

    @property
    def name(self) -> str:  # pragma: no cover
        return "Classic (Single Column)"

    # ------------------------------------------------------------------
    # public API
    # ------------------------------------------------------------------

    def build(self, data: ResumeData, palette: ColorPalette) -> Document:
        doc = self.create_document(_PACKAGES, _PREAMBLE_SETUP)
        self.define_palette_colors(doc, palette)
        doc.preamble.append(NoEscape(r"\pagecolor{background}\color{text}"))

        self._add_heading(doc, data.personal_details)

        left: list[str] = []
        if data.education:
            left.extend(self._education_lines(data.education))
        if data.skills:
            left.extend(self._skill_lines(data.skills))

        right: list[str] = []
        if data.work_experience:
            right.extend(self._experience_lines(data.work_experience))

        if left or right:
            self._add_columns(doc, left, right)
        return doc

    # ------------------------------------------------------------------
    # internal helpers
    # ------------------------------------------------------------------

    def _add_heading(self, doc: Document, details: PersonalDetails) -> None:
        esc = self.escape_latex
        lines = [r"\begin{center}"]

        picture = self.picture_path(details)
        if picture:
            lines.append(rf"\includegraphics[width=1.1in]{{{picture}}}\\[6pt]")

        lines.append(rf"{{\Huge\bfseries\color{{primary}} {esc(details.full_name)}}}\\[4pt]")
        parts = self.contact_parts(details)
        if parts:
            lines.append(rf"\small {CONTACT_SEPARATOR.join(parts)}")

        summary = details.summary.strip()
        if summary:
            lines.append(r"\\[6pt]")
            body = self.escape_multiline(summary)
            lines.append(rf"\parbox{{0.8\textwidth}}{{\centering\small {body}}}")

        lines.append(r"\end{center}")
        lines.append(r"{\color{primary}\rule{\textwidth}{0.8pt}}")
        doc.append(NoEscape("\n".join(lines)))

    def _add_columns(self, doc: Document, left: list[str], right: list[str]) -> None:
        lines = [r"\noindent", r"\begin{minipage}[t]{0.47\textwidth}"]
        lines.extend(left)
        lines.append(r"\end{minipage}\hfill")
        lines.append(r"\begin{minipage}[t]{0.47\textwidth}")
        lines.extend(right)
        lines.append(r"\end{minipage}")
        doc.append(NoEscape("\n".join(lines)))

    def _education_lines(self, entries: tuple[Education, ...]) -> list[str]:
        esc = self.escape_latex
        lines = [r"\section*{Education}"]
        for entry in entries:
            date_range = self.format_date_range(entry.start_date, entry.end_date)
            body = esc(entry.institution)
            if entry.field_of_study:
                body += rf"\\{{\small {esc(entry.field_of_study)}}}"
            lines.append(rf"\classicEntry{{{esc(entry.degree)}}}{{{date_range}}}{{{body}}}")
        return lines

    def _skill_lines(self, skills: tuple[Skill, ...]) -> list[str]:
        esc = self.escape_latex
        chips = " ".join(rf"\classicSkill{{{esc(skill.name)}}}" for skill in skills)
        return [r"\section*{Skills}", chips]

    def _experience_lines(self, entries: tuple[WorkExperience, ...]) -> list[str]:
        esc = self.escape_latex
        lines = [r"\section*{Work Experience}"]
        for entry in entries:
            date_range = self.format_date_range(entry.start_date, entry.end_date)
            body = rf"\textbf{{{esc(entry.company)}}}"
            description = entry.description.strip()
            if description:
                body += rf"\\{{\small {self.escape_multiline(description)}}}"
            lines.append(rf"\classicEntry{{{esc(entry.job_title)}}}{{{date_range}}}{{{body}}}")
        return lines
