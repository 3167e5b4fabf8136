"""Route handlers for the API."""

from resume_builder.api.routes import auth, builder, catalog, health, snapshots

__all__ = [
    "health",
    "auth",
    "catalog",
    "builder",
    "snapshots",
]
