"""Abstract base class for pluggable resume templates."""

from __future__ import annotations

import base64
import binascii
import re
from abc import ABC, abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING
from urllib.parse import quote

from pylatex import Document, NoEscape, Package

if TYPE_CHECKING:
    from resume_builder.models.resume import ColorPalette, PersonalDetails, ResumeData

__all__ = ["CONTACT_SEPARATOR", "PROFILE_PICTURE_STEM", "ResumeTemplate", "decode_data_url"]

# Characters that have special meaning in LaTeX.
_LATEX_SPECIAL = re.compile(r"[\\&%$#_{}~^]")
_LATEX_REPLACEMENTS = {
    "\\": r"\textbackslash{}",
    "~": r"\textasciitilde{}",
    "^": r"\textasciicircum{}",
}

# Characters left as-is when a URL is percent-encoded for \href.
_URL_SAFE = ":/?=#%@+,;!'()*[]"

_DATA_URL = re.compile(r"^data:image/(?P<ext>png|jpe?g);base64,(?P<payload>.+)$", re.DOTALL)

_MONTH_ABBR = [
    "",
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
]

# Palette fields exposed to LaTeX as xcolor names.
_PALETTE_COLORS = ("primary", "secondary", "accent", "background", "text")

# File name (without extension) a decoded data-URL picture is written to.
PROFILE_PICTURE_STEM = "profile-picture"

# Placed between contact fields on the header line.
CONTACT_SEPARATOR = r" \quad "


def decode_data_url(url: str) -> tuple[str, bytes] | None:
    """Split an image data URL into ``(extension, raw bytes)``.

    Returns ``None`` for anything that is not a base64 PNG/JPEG data URL.
    """
    match = _DATA_URL.match(url.strip())
    if not match:
        return None
    try:
        payload = base64.b64decode(match.group("payload"), validate=True)
    except (binascii.Error, ValueError):
        return None
    ext = "jpg" if match.group("ext") in ("jpg", "jpeg") else "png"
    return ext, payload


class ResumeTemplate(ABC):
    """Interface that every resume template must implement."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable template name shown in the UI."""

    @abstractmethod
    def build(self, data: ResumeData, palette: ColorPalette) -> Document:
        """Construct a PyLaTeX ``Document`` from *data* drawn in *palette*."""

    # ------------------------------------------------------------------
    # Shared helpers available to all templates
    # ------------------------------------------------------------------

    @staticmethod
    def create_document(extra_packages: list[Package], preamble: str) -> Document:
        """Return an A4 portrait document with colors and graphics available."""
        doc = Document(
            documentclass="article",
            document_options=["a4paper", "10pt"],
            geometry_options={"margin": "0.6in"},
            page_numbers=False,
            indent=False,
            lmodern=False,
            textcomp=False,
            microtype=False,
            fontenc=None,
            inputenc=None,
        )
        doc.packages = [p for p in doc.packages if "lastpage" not in p.dumps()]

        for pkg in (
            Package("xcolor"),
            Package("graphicx"),
            Package("hyperref", options=NoEscape("hidelinks")),
            *extra_packages,
        ):
            doc.packages.append(pkg)
        doc.preamble.append(NoEscape(preamble))
        return doc

    @staticmethod
    def define_palette_colors(doc: Document, palette: ColorPalette) -> None:
        r"""Declare ``primary``, ``secondary`` … as xcolor ``HTML`` colors."""
        lines = []
        for field_name in _PALETTE_COLORS:
            hex_value = getattr(palette, field_name).lstrip("#").upper()
            lines.append(rf"\definecolor{{{field_name}}}{{HTML}}{{{hex_value}}}")
        doc.preamble.append(NoEscape("\n".join(lines)))

    @staticmethod
    def escape_latex(text: str) -> str:
        r"""Escape LaTeX special characters in *text*.

        Handles: ``& % $ # _ { } ~ ^ \``
        """
        return _LATEX_SPECIAL.sub(
            lambda m: _LATEX_REPLACEMENTS.get(m.group(), "\\" + m.group()), text
        )

    @staticmethod
    def escape_url(url: str) -> str:
        r"""Make *url* safe as the target of ``\href``.

        Braces, backslashes and whitespace are percent-encoded; ``%`` and ``#``
        are backslash-escaped the way hyperref expects.
        """
        return quote(url, safe=_URL_SAFE).replace("%", r"\%").replace("#", r"\#")

    @classmethod
    def escape_multiline(cls, text: str) -> str:
        """Escape *text* and keep its non-blank lines as separate lines."""
        lines = [cls.escape_latex(line.strip()) for line in text.splitlines() if line.strip()]
        return r"\newline ".join(lines)

    @staticmethod
    def format_month(value: str) -> str:
        """Return ``May 2021`` for ``2021-05``; other input is returned unchanged."""
        parts = value.strip().split("-")
        if len(parts) >= 2 and parts[0].isdigit() and parts[1].isdigit():
            month = int(parts[1])
            if 1 <= month <= 12:
                return f"{_MONTH_ABBR[month]} {parts[0]}"
        return value.strip()

    @classmethod
    def format_date_range(cls, start: str, end: str) -> str:
        """Return ``Aug 2018 -- May 2021``.

        A blank start hides the range entirely; a blank end reads ``Present``.
        """
        if not start or not start.strip():
            return ""
        end_str = cls.format_month(end) if end and end.strip() else "Present"
        return f"{cls.escape_latex(cls.format_month(start))} -- {cls.escape_latex(end_str)}"

    @staticmethod
    def _strip_protocol(url: str) -> str:
        for prefix in ("https://", "http://"):
            if url.startswith(prefix):
                return url[len(prefix) :]
        return url

    @staticmethod
    def picture_path(details: PersonalDetails) -> str | None:
        """Return the path LaTeX should include for the profile picture.

        Data URLs map to :data:`PROFILE_PICTURE_STEM` (written beside the
        ``.tex`` on export); plain paths are used when the file exists.
        """
        picture = details.profile_picture.strip()
        if not picture:
            return None
        decoded = decode_data_url(picture)
        if decoded is not None:
            return f"{PROFILE_PICTURE_STEM}.{decoded[0]}"
        path = Path(picture).expanduser()
        if path.is_file():
            return path.resolve().as_posix()
        return None

    def contact_parts(self, details: PersonalDetails) -> list[str]:
        """Return escaped contact fields in display order, skipping blanks."""
        esc = self.escape_latex
        parts: list[str] = []
        for value in (details.email, details.phone, details.address):
            if value.strip():
                parts.append(esc(value.strip()))
        linkedin = details.linkedin.strip()
        if linkedin.startswith(("https://", "http://")):
            display = self._strip_protocol(linkedin)
            parts.append(rf"\href{{{self.escape_url(linkedin)}}}{{{esc(display)}}}")
        elif linkedin:
            parts.append(esc(linkedin))
        return parts
