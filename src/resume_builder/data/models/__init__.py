"""ORM models package for database tables.

This package provides SQLAlchemy ORM models representing database tables:
- User: Accounts that can save resumes
- ResumeSnapshot: Named, serialized copies of a resume draft

All models inherit from the shared Base declarative class defined in data.db.
"""

from resume_builder.data.db import Base
from resume_builder.data.models.resume_snapshot import ResumeSnapshot
from resume_builder.data.models.user import User

__all__ = ["Base", "ResumeSnapshot", "User"]
