from datetime import date

import pytest
from sqlalchemy.exc import OperationalError

from liftlog.db import SessionLocal
from liftlog.errors import StorageError
from liftlog.repositories.session_repo import SessionRepository
from liftlog.schemas.session import SessionFields

def fields(**kw):
    base = {"performed_on": date(2026, 1, 5), "workout_slug": "row", "weight": 70, "set_reps": [10, 9]}
    base.update(kw)
    return SessionFields(**base)

def test_session_repo_create_and_get():
    db = SessionLocal()
    repo = SessionRepository(db)
    s = repo.create(fields())
    assert s.id and s.compact == "70 - 10/9"
    assert repo.get(s.id).set_reps == [10, 9, None, None, None, None]
    db.close()

def test_fetch_since_is_a_projection():
    db = SessionLocal()
    repo = SessionRepository(db)
    repo.create(fields(performed_on=date(2025, 12, 31)))
    repo.create(fields(performed_on=date(2026, 1, 2), workout_slug="push-ups", weight=None))
    rows = repo.fetch_since(date(2026, 1, 1))
    assert rows == [{"performed_on": date(2026, 1, 2), "workout_slug": "push-ups"}]
    db.close()

def test_fetch_series_only_weighted_rows():
    db = SessionLocal()
    repo = SessionRepository(db)
    repo.create(fields(performed_on=date(2026, 1, 7), weight=75))
    repo.create(fields(performed_on=date(2026, 1, 3), weight=None))
    repo.create(fields(performed_on=date(2026, 1, 2), weight=72))
    rows = repo.fetch_series("row", date(2026, 1, 1))
    assert [(r["performed_on"], r["weight"]) for r in rows] == [(date(2026, 1, 2), 72), (date(2026, 1, 7), 75)]
    db.close()

def test_update_recomputes_compact():
    db = SessionLocal()
    repo = SessionRepository(db)
    s = repo.create(fields())
    updated = repo.update(s.id, fields(weight=None))
    assert updated.compact == "- 10/9"
    assert repo.update("missing", fields()) is None
    db.close()

def test_delete():
    db = SessionLocal()
    repo = SessionRepository(db)
    s = repo.create(fields())
    assert repo.delete(s.id) is True
    assert repo.delete(s.id) is False
    db.close()

def test_storage_failure_surfaces_message(monkeypatch):
    db = SessionLocal()
    repo = SessionRepository(db)

    def boom(*a, **kw):
        raise OperationalError("SELECT", {}, Exception("connection refused"))
    monkeypatch.setattr(db, "execute", boom)
    with pytest.raises(StorageError) as exc:
        repo.fetch_since(date(2026, 1, 1))
    assert "connection refused" in exc.value.message
    db.close()
