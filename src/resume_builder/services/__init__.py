"""Services"""

from resume_builder.services.auth import AuthSession, authenticate_user, create_user
from resume_builder.services.resume_export import (
    export_filename,
    generate_resume_pdf,
    generate_resume_tex,
)
from resume_builder.services.snapshots import (
    delete_snapshot,
    get_snapshot,
    list_snapshots,
    load_snapshot,
    save_snapshot,
)

__all__ = [
    "AuthSession",
    "authenticate_user",
    "create_user",
    "export_filename",
    "generate_resume_pdf",
    "generate_resume_tex",
    "delete_snapshot",
    "get_snapshot",
    "list_snapshots",
    "load_snapshot",
    "save_snapshot",
]
