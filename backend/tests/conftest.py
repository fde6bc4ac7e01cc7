"""
Point settings at a throwaway sqlite database and a known token secret.
Runs before any test module imports liftlog.
"""
import os
import tempfile
import time

_tmp = tempfile.mkdtemp(prefix="liftlog-tests-")
TEST_SECRET = "test-secret-not-for-prod"

os.environ["DB_URL"] = f"sqlite:///{os.path.join(_tmp, 'liftlog.db')}"
os.environ["AUTH_JWT_SECRET"] = TEST_SECRET
os.environ["PREFERENCES_PATH"] = os.path.join(_tmp, "preferences.json")
os.environ["TIMEZONE"] = "America/New_York"
os.environ.pop("OWNER_SUB", None)

import pytest
from jose import jwt

from liftlog import models  # noqa: F401  # registers tables on Base
from liftlog.db import Base, SessionLocal, engine
from liftlog.deps.context import get_preferences, get_today
from liftlog.main import app
from liftlog.preferences import MemoryStore, Preferences

Base.metadata.create_all(engine)


@pytest.fixture(autouse=True)
def clean_tables():
    with SessionLocal() as db:
        db.query(models.WorkoutSession).delete()
        db.commit()
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def make_token():
    def _make(sub="owner-1", *, expires_in=3600, aud="authenticated", secret=TEST_SECRET):
        now = int(time.time())
        claims = {"sub": sub, "iat": now, "exp": now + expires_in}
        if aud is not None:
            claims["aud"] = aud
        return jwt.encode(claims, secret, algorithm="HS256")
    return _make


@pytest.fixture
def auth_headers(make_token):
    return {"Authorization": f"Bearer {make_token()}"}


@pytest.fixture
def prefs():
    p = Preferences(MemoryStore())
    app.dependency_overrides[get_preferences] = lambda: p
    return p


@pytest.fixture
def fixed_today():
    def _set(day):
        app.dependency_overrides[get_today] = lambda: day
        return day
    return _set
