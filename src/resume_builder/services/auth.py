"""Authentication helpers.

This module provides a minimal username/password authentication layer
backed by the users table. Passwords are stored as salted PBKDF2 hashes.
:class:`AuthSession` is the client-side session object that gates saving
and downloading.
"""

from __future__ import annotations

import hashlib
import hmac
import logging
import os

from resume_builder.data.db import get_session
from resume_builder.data.models import User

logger = logging.getLogger(__name__)

__all__ = [
    "AuthSession",
    "NotAuthenticatedError",
    "authenticate_user",
    "create_user",
]

_PBKDF2_ITERATIONS = 100_000
_SALT_BYTES = 16


class NotAuthenticatedError(Exception):
    """Raised when an action needs a signed-in user and there is none."""


def _hash_password(password: str) -> str:
    """Return a salted PBKDF2 hash for the given password.

    The result is stored as ``<salt_hex>:<hash_hex>``.
    """
    salt = os.urandom(_SALT_BYTES)
    derived = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, _PBKDF2_ITERATIONS)
    return f"{salt.hex()}:{derived.hex()}"


def _verify_password(password: str, stored_hash: str) -> bool:
    """Verify a password against a stored ``salt:hash`` string."""
    try:
        salt_hex, hash_hex = stored_hash.split(":", 1)
    except ValueError:
        return False

    try:
        salt = bytes.fromhex(salt_hex)
        expected = bytes.fromhex(hash_hex)
    except ValueError:
        return False

    candidate = hashlib.pbkdf2_hmac(
        "sha256",
        password.encode("utf-8"),
        salt,
        _PBKDF2_ITERATIONS,
    )
    return hmac.compare_digest(candidate, expected)


def create_user(username: str, password: str) -> tuple[bool, str | None]:
    """Create a new user account.

    Returns:
        Tuple of (success flag, error message). On success, error is None.
    """
    username_clean = username.strip()
    if not username_clean:
        return False, "Username cannot be empty."
    if not password:
        return False, "Password cannot be empty."

    try:
        with get_session() as session:
            existing = session.query(User).filter(User.username == username_clean).first()
            if existing is not None:
                return False, "Username already exists."

            user = User(username=username_clean, password_hash=_hash_password(password))
            session.add(user)
        return True, None
    except Exception as exc:
        logger.exception("Failed to create user %s", username_clean)
        return False, f"Failed to create user: {exc}"


def authenticate_user(username: str, password: str) -> tuple[bool, str | None]:
    """Authenticate a user by username and password.

    Returns:
        Tuple of (success flag, error message). On success, error is None.
    """
    username_clean = username.strip()
    if not username_clean or not password:
        return False, "Username and password are required."

    try:
        with get_session() as session:
            user = session.query(User).filter(User.username == username_clean).first()
            if user is None:
                return False, "Invalid username or password."

            if not _verify_password(password, user.password_hash):
                return False, "Invalid username or password."
    except Exception as exc:
        logger.exception("Authentication failed for %s", username_clean)
        return False, f"Authentication failed: {exc}"

    return True, None


class AuthSession:
    """The signed-in user of one client, or nobody.

    The session only records who is signed in; credentials are checked by
    :func:`authenticate_user` / :func:`create_user`.
    """

    def __init__(self) -> None:
        self._username: str | None = None

    @property
    def username(self) -> str | None:
        return self._username

    @property
    def is_authenticated(self) -> bool:
        return self._username is not None

    def sign_in(self, username: str, password: str) -> tuple[bool, str | None]:
        """Check credentials and start a session on success."""
        ok, error = authenticate_user(username, password)
        if ok:
            self._username = username.strip()
        return ok, error

    def sign_up(self, username: str, password: str) -> tuple[bool, str | None]:
        """Create an account and sign straight into it."""
        ok, error = create_user(username, password)
        if ok:
            self._username = username.strip()
        return ok, error

    def sign_out(self) -> None:
        self._username = None

    def require_user(self) -> str:
        """Return the signed-in username.

        Raises:
            NotAuthenticatedError: If nobody is signed in.
        """
        if self._username is None:
            raise NotAuthenticatedError("Please sign in first.")
        return self._username
