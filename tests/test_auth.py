"""Tests for account creation, authentication and the client session."""

from __future__ import annotations

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

import resume_builder.data.db as db_module
from resume_builder.data.models import Base, User
from resume_builder.services.auth import (
    AuthSession,
    NotAuthenticatedError,
    authenticate_user,
    create_user,
)


@pytest.fixture(scope="function")
def tmp_db(monkeypatch, tmp_path):
    """Create a temporary test database."""
    engine = create_engine(f"sqlite:///{tmp_path / 'test.db'}")
    Base.metadata.create_all(bind=engine)
    monkeypatch.setattr(db_module, "_engine", engine)
    monkeypatch.setattr(db_module, "_SessionLocal", sessionmaker(bind=engine))
    yield
    engine.dispose()


def test_create_and_authenticate(tmp_db):
    assert create_user("alice", "s3cret") == (True, None)
    assert authenticate_user("alice", "s3cret") == (True, None)
    assert authenticate_user(" alice ", "s3cret") == (True, None)


def test_password_is_hashed(tmp_db):
    create_user("alice", "s3cret")
    with db_module.get_session() as session:
        user = session.query(User).filter(User.username == "alice").one()
        assert user.password_hash != "s3cret"
        assert ":" in user.password_hash


def test_duplicate_username_rejected(tmp_db):
    create_user("alice", "one")
    assert create_user("alice", "two") == (False, "Username already exists.")


@pytest.mark.parametrize(
    ("username", "password", "message"),
    [
        ("", "pw", "Username cannot be empty."),
        ("   ", "pw", "Username cannot be empty."),
        ("bob", "", "Password cannot be empty."),
    ],
)
def test_create_rejects_blank_input(tmp_db, username, password, message):
    assert create_user(username, password) == (False, message)


def test_wrong_password_and_unknown_user(tmp_db):
    create_user("alice", "s3cret")
    assert authenticate_user("alice", "nope") == (False, "Invalid username or password.")
    assert authenticate_user("nobody", "s3cret") == (False, "Invalid username or password.")
    assert authenticate_user("", "") == (False, "Username and password are required.")


class TestAuthSession:
    def test_starts_signed_out(self):
        session = AuthSession()
        assert not session.is_authenticated
        assert session.username is None
        with pytest.raises(NotAuthenticatedError, match="sign in"):
            session.require_user()

    def test_sign_up_signs_in(self, tmp_db):
        session = AuthSession()
        ok, error = session.sign_up("alice", "s3cret")
        assert ok and error is None
        assert session.require_user() == "alice"

    def test_failed_sign_in_stays_signed_out(self, tmp_db):
        create_user("alice", "s3cret")
        session = AuthSession()
        ok, error = session.sign_in("alice", "wrong")
        assert not ok
        assert error == "Invalid username or password."
        assert not session.is_authenticated

    def test_sign_out(self, tmp_db):
        create_user("alice", "s3cret")
        session = AuthSession()
        session.sign_in("alice", "s3cret")
        session.sign_out()
        assert not session.is_authenticated
