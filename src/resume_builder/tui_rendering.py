from __future__ import annotations

from typing import Any

from resume_builder.constants.catalog import get_palette, get_template_info
from resume_builder.models.resume import ResumeData
from resume_builder.templates.base import ResumeTemplate


def _date_range(start: str, end: str) -> str:
    if not start.strip():
        return ""
    end_str = ResumeTemplate.format_month(end) if end.strip() else "Present"
    return f"{ResumeTemplate.format_month(start)} - {end_str}"


def render_selection_summary(data: ResumeData) -> str:
    """One-line summary of the chosen template and palette."""
    template = get_template_info(data.selected_template)
    palette = get_palette(data.selected_color_palette)
    return f"**Template:** {template.name} · **Palette:** {palette.name} (`{palette.primary}`)"


def render_resume_markdown(data: ResumeData) -> str:
    """Render the draft the way the preview page shows it."""
    details = data.personal_details
    parts: list[str] = [f"# {details.full_name.strip() or 'Your Name'}", ""]

    contact = [
        v.strip()
        for v in (details.email, details.phone, details.address, details.linkedin)
        if v.strip()
    ]
    if contact:
        parts.append(" | ".join(contact))
        parts.append("")

    if details.summary.strip():
        parts.append(f"> {details.summary.strip()}")
        parts.append("")

    if data.education:
        parts.append("## Education")
        for edu in data.education:
            heading = ", ".join(x for x in (edu.degree, edu.field_of_study) if x.strip())
            parts.append(f"- **{heading or '(untitled)'}** - {edu.institution}")
            dates = _date_range(edu.start_date, edu.end_date)
            if dates:
                parts.append(f"  - {dates}")
        parts.append("")

    if data.work_experience:
        parts.append("## Work Experience")
        for job in data.work_experience:
            parts.append(f"- **{job.job_title or '(untitled)'}** at {job.company}")
            dates = _date_range(job.start_date, job.end_date)
            if dates:
                parts.append(f"  - {dates}")
            for line in job.description.splitlines():
                if line.strip():
                    parts.append(f"  - {line.strip()}")
        parts.append("")

    if data.skills:
        parts.append("## Skills")
        parts.append(", ".join(s.name for s in data.skills))
        parts.append("")

    parts.append("---")
    parts.append(render_selection_summary(data))
    return "\n".join(parts)


def render_snapshot_list(snapshots: list[dict[str, Any]]) -> str:
    """Render saved snapshots, newest first as returned by the service."""
    parts: list[str] = ["# Saved Resumes", ""]
    if not snapshots:
        parts.append("(No saved resumes yet)")
        return "\n".join(parts)

    for snap in snapshots:
        created = snap.get("created_at")
        stamp = created.strftime("%Y-%m-%d %H:%M") if created is not None else "?"
        parts.append(f"- **{snap.get('name')}** (#{snap.get('id')}) saved {stamp}")

    return "\n".join(parts)
