"""Modern resume template.

A full-width header band in the palette's primary color with white text,
followed by a tinted sidebar (skills, education) and a main column for
work experience.
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

__all__ = ["ModernResumeTemplate"]

# ---------------------------------------------------------------------------
# LaTeX preamble fragments
# ---------------------------------------------------------------------------

_PACKAGES: list[Package] = [
    Package("fontenc", options=NoEscape("T1")),
    Package("helvet"),
]

_PREAMBLE_SETUP = r"""
\renewcommand{\familydefault}{\sfdefault}
\pagestyle{empty}
\raggedbottom
\setlength{\parindent}{0pt}
\setlength{\fboxsep}{10pt}
\newcommand{\modernSection}[1]{
  {\color{primary}\large\bfseries #1}\\[-4pt]
  {\color{primary}\rule{\linewidth}{0.6pt}}\par\vspace{4pt}
}
\newcommand{\modernSkill}[1]{
  \colorbox{primary!12}{\textcolor{primary}{\small #1}}\hspace{2pt}
}
"""

_HEADER_TEXT_COLOR = "white"


class ModernResumeTemplate(ResumeTemplate):
    """Colored header band over a sidebar + main column layout."""

    @property
    def name(self) -> str:  # pragma: no cover
        return "Modern (Two Column)"

    # ------------------------------------------------------------------
    # public API
    # ------------------------------------------------------------------

    def build(self, data: ResumeData, palette: ColorPalette) -> Document:
        doc = self.create_document(_PACKAGES, _PREAMBLE_SETUP)
        self.define_palette_colors(doc, palette)
        doc.preamble.append(NoEscape(r"\colorlet{sidebar}{secondary!12}"))

        self._add_header(doc, data.personal_details, palette)

        sidebar: list[str] = []
        if data.skills:
            sidebar.extend(self._skill_lines(data.skills))
        if data.education:
            sidebar.extend(self._education_lines(data.education))

        main: list[str] = []
        if data.work_experience:
            main.extend(self._experience_lines(data.work_experience))

        if sidebar or main:
            self._add_body(doc, sidebar, main)
        return doc

    # ------------------------------------------------------------------
    # internal helpers
    # ------------------------------------------------------------------

    def _add_header(self, doc: Document, details: PersonalDetails, palette: ColorPalette) -> None:
        esc = self.escape_latex
        # White primaries would hide white text.
        text_color = "black" if palette.primary.upper() == "#FFFFFF" else _HEADER_TEXT_COLOR

        inner: list[str] = []
        picture = self.picture_path(details)
        if picture:
            inner.append(
                rf"\begin{{minipage}}[c]{{1.1in}}\includegraphics[width=1in]{{{picture}}}"
                r"\end{minipage}\hfill"
            )
            width = r"\dimexpr\linewidth-1.2in\relax"
        else:
            width = r"\linewidth"

        text = [rf"{{\huge\bfseries {esc(details.full_name)}}}\\[4pt]"]
        parts = self.contact_parts(details)
        if parts:
            text.append(rf"{{\small {CONTACT_SEPARATOR.join(parts)}}}")
        summary = details.summary.strip()
        if summary:
            text.append(rf"\\[6pt]{{\small {self.escape_multiline(summary)}}}")
        inner.append(
            rf"\begin{{minipage}}[c]{{{width}}}" + "\n".join(text) + r"\end{minipage}"
        )

        band = (
            r"\noindent\colorbox{primary}{\parbox{\dimexpr\textwidth-2\fboxsep\relax}{"
            rf"\color{{{text_color}}}"
            + "\n".join(inner)
            + r"}}\par\vspace{10pt}"
        )
        doc.append(NoEscape(band))

    def _add_body(self, doc: Document, sidebar: list[str], main: list[str]) -> None:
        lines = [
            r"\noindent",
            r"\colorbox{sidebar}{\begin{minipage}[t]{\dimexpr0.32\textwidth-2\fboxsep\relax}",
            r"\color{text}",
        ]
        lines.extend(sidebar)
        lines.append(r"\end{minipage}}\hfill")
        lines.append(r"\begin{minipage}[t]{0.64\textwidth}")
        lines.append(r"\color{text}")
        lines.extend(main)
        lines.append(r"\end{minipage}")
        doc.append(NoEscape("\n".join(lines)))

    def _skill_lines(self, skills: tuple[Skill, ...]) -> list[str]:
        esc = self.escape_latex
        chips = " ".join(rf"\modernSkill{{{esc(skill.name)}}}" for skill in skills)
        return [r"\modernSection{Skills}", chips, r"\par\vspace{10pt}"]

    def _education_lines(self, entries: tuple[Education, ...]) -> list[str]:
        esc = self.escape_latex
        lines = [r"\modernSection{Education}"]
        for entry in entries:
            rows = [
                rf"\textbf{{{esc(entry.degree)}}}",
                rf"{{\small\bfseries {esc(entry.institution)}}}",
                rf"{{\small {esc(entry.field_of_study)}}}",
            ]
            date_range = self.format_date_range(entry.start_date, entry.end_date)
            if date_range:
                rows.append(rf"{{\footnotesize\color{{text!75}} {date_range}}}")
            lines.append("\\\\\n".join(rows))
            lines.append(r"\par\vspace{6pt}")
        return lines

    def _experience_lines(self, entries: tuple[WorkExperience, ...]) -> list[str]:
        esc = self.escape_latex
        lines = [r"\modernSection{Work Experience}"]
        for entry in entries:
            date_range = self.format_date_range(entry.start_date, entry.end_date)
            lines.append(rf"{{\large {esc(entry.job_title)}}}\hfill{{\small {date_range}}}\\")
            lines.append(rf"{{\bfseries\color{{text!75}} {esc(entry.company)}}}\par")
            description = entry.description.strip()
            if description:
                lines.append(rf"\vspace{{2pt}}{{\small {self.escape_multiline(description)}}}\par")
            lines.append(r"\vspace{8pt}")
        return lines
