"""Environment-driven settings.

Values are read on every call so tests can override them with
``monkeypatch.setenv``. A ``.env`` file in the working directory is loaded
once at import time.
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

# Load RESUME_BUILDER_* and DB_URL overrides from a local .env file.
load_dotenv()

DEFAULT_LATEX_COMPILER = "pdflatex"


def get_latex_compiler() -> str:
    """Return the LaTeX compiler used for PDF export."""
    return os.getenv("RESUME_BUILDER_LATEX_COMPILER") or DEFAULT_LATEX_COMPILER


def get_export_dir() -> Path:
    """Return the directory the terminal UI writes exported PDFs into."""
    env_root = os.getenv("RESUME_BUILDER_EXPORT_DIR")
    if env_root:
        return Path(env_root).expanduser().resolve()

    downloads = Path.home() / "Downloads"
    if downloads.is_dir():
        return downloads
    return Path.cwd()
