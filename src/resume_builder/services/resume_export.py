"""Resume export service.

Resolves the template and palette selected in a :class:`ResumeData`,
renders it with a pluggable LaTeX template, and compiles a fixed-size A4
PDF named after the person on the resume.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import TYPE_CHECKING

from resume_builder.config import get_latex_compiler
from resume_builder.constants.catalog import get_palette
from resume_builder.templates import get_template
from resume_builder.templates.base import PROFILE_PICTURE_STEM, decode_data_url

if TYPE_CHECKING:
    from pylatex import Document

    from resume_builder.models.resume import ResumeData

logger = logging.getLogger(__name__)

__all__ = [
    "build_resume_document",
    "export_filename",
    "generate_resume_pdf",
    "generate_resume_tex",
]

_WHITESPACE = re.compile(r"\s+")
_INVALID_FILENAME_CHARS = re.compile(r'[<>:"/\\|?*]')


def export_filename(full_name: str) -> str:
    """Return the PDF file name for a resume belonging to *full_name*.

    ``"Jane  Doe"`` becomes ``Jane_Doe_Resume.pdf``; a blank name gives
    ``Resume.pdf``.
    """
    cleaned = _INVALID_FILENAME_CHARS.sub("_", full_name.strip())
    cleaned = _WHITESPACE.sub("_", cleaned).strip("._")
    if not cleaned:
        return "Resume.pdf"
    return f"{cleaned}_Resume.pdf"


def build_resume_document(data: ResumeData) -> Document:
    """Render *data* with its selected template and palette.

    Unknown template or palette ids silently fall back to the defaults.
    """
    template = get_template(data.selected_template)
    palette = get_palette(data.selected_color_palette)
    return template.build(data, palette)


def generate_resume_tex(data: ResumeData) -> str:
    """Return the full ``.tex`` source for *data*."""
    return build_resume_document(data).dumps()


def _write_profile_picture(data: ResumeData, output_dir: Path) -> Path | None:
    """Decode a data-URL profile picture next to the ``.tex`` being compiled."""
    decoded = decode_data_url(data.personal_details.profile_picture)
    if decoded is None:
        return None
    ext, payload = decoded
    target = output_dir / f"{PROFILE_PICTURE_STEM}.{ext}"
    target.write_bytes(payload)
    return target


def generate_resume_pdf(
    data: ResumeData,
    output_dir: Path,
    *,
    compiler: str | None = None,
) -> Path:
    """Compile *data* into an A4 PDF inside *output_dir*.

    Requires *compiler* (``pdflatex`` by default, or the value of
    ``RESUME_BUILDER_LATEX_COMPILER``) to be installed on the system.

    Args:
        data: Resume to export.
        output_dir: Directory to write the ``.pdf`` into.
        compiler: LaTeX compiler to invoke.

    Returns:
        The ``Path`` of the generated ``.pdf``.

    Raises:
        pylatex.errors.CompilerError: If the compiler is not installed.
        subprocess.CalledProcessError: If compilation fails.
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    doc = build_resume_document(data)
    picture = _write_profile_picture(data, output_dir)

    filename = export_filename(data.personal_details.full_name)
    stem = output_dir / filename.removesuffix(".pdf")
    try:
        # PyLaTeX appends .pdf/.tex automatically
        doc.generate_pdf(
            str(stem),
            clean_tex=True,
            compiler=compiler or get_latex_compiler(),
        )
    except Exception:
        logger.exception("PDF export failed for %s", filename)
        raise
    finally:
        if picture is not None:
            picture.unlink(missing_ok=True)

    return Path(f"{stem}.pdf")
