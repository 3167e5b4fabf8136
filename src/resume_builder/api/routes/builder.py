"""Wizard validation, preview rendering and PDF export routes."""

from __future__ import annotations

import shutil
import subprocess
import tempfile
from pathlib import Path
from typing import Annotated

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, status
from fastapi import Path as PathParam
from fastapi.responses import FileResponse, PlainTextResponse
from pylatex.errors import CompilerError

from resume_builder.api.dependencies import get_current_username, resume_from_payload
from resume_builder.api.schemas.builder import ValidationResponse
from resume_builder.api.schemas.resume import ResumePayload
from resume_builder.services.resume_export import (
    export_filename,
    generate_resume_pdf,
    generate_resume_tex,
)
from resume_builder.wizard.steps import WizardStep, next_step
from resume_builder.wizard.validation import validate_step

router = APIRouter(prefix="/builder", tags=["builder"])


def _parse_step(step: str) -> WizardStep:
    """Accept a step name (``personal``) or its 1-based number (``3``)."""
    try:
        if step.isdigit():
            return WizardStep(int(step))
        return WizardStep[step.upper()]
    except (KeyError, ValueError):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Unknown wizard step '{step}'",
        ) from None


@router.post("/validate/{step}", response_model=ValidationResponse)
def validate_builder_step(
    step: Annotated[str, PathParam(description="Step name or number")],
    resume: ResumePayload,
) -> ValidationResponse:
    """Validate a draft against one step's gate.

    A failed gate is still a 200 response with ``ok`` set to false.
    """
    wizard_step = _parse_step(step)
    result = validate_step(wizard_step, resume_from_payload(resume))
    following = next_step(wizard_step)
    return ValidationResponse(
        step=wizard_step.name.lower(),
        ok=result.ok,
        title=result.title,
        message=result.message,
        field_errors=dict(result.field_errors),
        next_route=following.route if result.ok and following is not None else None,
    )


@router.post("/render", response_class=PlainTextResponse)
def render_resume(resume: ResumePayload) -> PlainTextResponse:
    """Return the LaTeX source of the draft's selected template."""
    return PlainTextResponse(generate_resume_tex(resume_from_payload(resume)))


@router.post(
    "/export",
    responses={200: {"content": {"application/pdf": {}}}},
)
def export_resume(
    resume: ResumePayload,
    background_tasks: BackgroundTasks,
    current_username: Annotated[str, Depends(get_current_username)],
) -> FileResponse:
    """Compile the draft into a PDF and download it."""
    data = resume_from_payload(resume)

    tmp_dir = tempfile.mkdtemp()
    try:
        pdf_path = generate_resume_pdf(data, Path(tmp_dir))
    except (CompilerError, FileNotFoundError):
        shutil.rmtree(tmp_dir, ignore_errors=True)
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="LaTeX compiler not found. Please install pdflatex.",
        ) from None
    except subprocess.CalledProcessError:
        shutil.rmtree(tmp_dir, ignore_errors=True)
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="LaTeX compilation failed. Check that all required packages are installed.",
        ) from None
    except Exception:
        shutil.rmtree(tmp_dir, ignore_errors=True)
        raise

    background_tasks.add_task(shutil.rmtree, tmp_dir, True)
    return FileResponse(
        path=str(pdf_path),
        media_type="application/pdf",
        filename=export_filename(data.personal_details.full_name),
    )
