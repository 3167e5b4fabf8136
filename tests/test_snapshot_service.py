"""Test suite for the resume snapshot service."""

from __future__ import annotations

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

import resume_builder.data.db as db_module
from resume_builder.data.models import Base, ResumeSnapshot, User
from resume_builder.models.resume import PersonalDetails, ResumeData, Skill
from resume_builder.services.snapshots import (
    delete_snapshot,
    get_snapshot,
    list_snapshots,
    load_snapshot,
    save_snapshot,
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


@pytest.fixture
def test_user(tmp_db):
    """Create a test user and return username."""
    with db_module.get_session() as s:
        u = User(username="testuser", password_hash="hash")
        s.add(u)
        s.commit()
        return "testuser"


@pytest.fixture
def resume() -> ResumeData:
    return ResumeData(
        selected_template="modern",
        personal_details=PersonalDetails(full_name="Jane Doe", email="jane@example.com"),
        skills=(Skill(id="s1", name="Python"),),
    )


def test_nonexistent_user_and_snapshot_handling(test_user, resume):
    assert save_snapshot("nonexistent", "x", resume) is None
    assert list_snapshots("nonexistent") is None
    assert get_snapshot("nonexistent", 1) is None
    assert load_snapshot("nonexistent", 1) is None
    assert delete_snapshot("nonexistent", 1) is False

    assert list_snapshots(test_user) == []
    assert get_snapshot(test_user, 999) is None
    assert load_snapshot(test_user, 999) is None
    assert delete_snapshot(test_user, 999) is False


def test_save_and_load_roundtrip(test_user, resume):
    saved = save_snapshot(test_user, "  Tech Resume ", resume)

    assert saved is not None
    assert saved["name"] == "Tech Resume"
    assert saved["data"]["personal_details"]["full_name"] == "Jane Doe"
    assert saved["created_at"] is not None

    assert load_snapshot(test_user, saved["id"]) == resume


def test_blank_name_gets_default(test_user, resume):
    assert save_snapshot(test_user, "   ", resume)["name"] == "My Resume"


def test_list_newest_first(test_user, resume):
    first = save_snapshot(test_user, "First", resume)
    second = save_snapshot(test_user, "Second", resume)

    listed = list_snapshots(test_user)
    assert [s["id"] for s in listed] == [second["id"], first["id"]]


def test_snapshots_are_isolated_per_user(test_user, resume):
    with db_module.get_session() as s:
        s.add(User(username="other", password_hash="hash"))
        s.commit()

    saved = save_snapshot(test_user, "Mine", resume)
    assert get_snapshot("other", saved["id"]) is None
    assert load_snapshot("other", saved["id"]) is None
    assert delete_snapshot("other", saved["id"]) is False
    assert list_snapshots("other") == []


def test_delete(test_user, resume):
    saved = save_snapshot(test_user, "Temp", resume)
    assert delete_snapshot(test_user, saved["id"]) is True
    assert get_snapshot(test_user, saved["id"]) is None
    assert list_snapshots(test_user) == []


def test_malformed_data_is_unavailable(test_user):
    with db_module.get_session() as s:
        user = s.query(User).filter(User.username == test_user).one()
        snapshot = ResumeSnapshot(user_id=user.id, name="Broken", data="{not json")
        s.add(snapshot)
        s.commit()
        snapshot_id = snapshot.id

    record = get_snapshot(test_user, snapshot_id)
    assert record is not None
    assert record["data"] is None
    assert load_snapshot(test_user, snapshot_id) is None


def test_wrong_shape_is_unavailable(test_user):
    with db_module.get_session() as s:
        user = s.query(User).filter(User.username == test_user).one()
        snapshot = ResumeSnapshot(user_id=user.id, name="Odd", data='{"education": 5}')
        s.add(snapshot)
        s.commit()
        snapshot_id = snapshot.id

    assert load_snapshot(test_user, snapshot_id) is None
