"""
Shared pytest fixtures.

Uses a throwaway SQLite file in a temporary directory, so no Postgres is
required and nothing is left in the working tree.
"""
import os
import shutil
import tempfile
from datetime import date

# Must be set before the app (config, database engine) is imported.
_TMP_DIR = tempfile.mkdtemp(prefix="wellness-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_TMP_DIR, 'test_wellness.db')}"
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ["APP_TIMEZONE"] = "UTC"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from app.core.deps import get_today  # noqa: E402
from app.db.base import Base, engine  # noqa: E402
from app.db.session import SessionLocal  # noqa: E402
from app.exercises.content import dump_content, parse_content  # noqa: E402
from app.exercises.models import Exercise  # noqa: E402
from app.main import app  # noqa: E402

TODAY = date(2026, 3, 10)


@pytest.fixture(scope="session", autouse=True)
def temp_database_dir():
    yield
    engine.dispose()
    shutil.rmtree(_TMP_DIR, ignore_errors=True)


@pytest.fixture(autouse=True)
def fresh_tables():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    app.dependency_overrides.clear()


@pytest.fixture()
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def set_today():
    """Pin the calendar day the API sees: set_today(date(...))."""
    def _set(day: date):
        app.dependency_overrides[get_today] = lambda: day
    _set(TODAY)
    return _set


def signup_and_login(client, username="calm_user", password="secret123"):
    """Create an account and return Authorization headers for it."""
    r = client.post(
        "/auth/signup",
        data={"email": f"{username}@example.com", "username": username, "password": password},
    )
    assert r.status_code == 201, r.text
    r = client.post("/auth/login", data={"email_or_username": username, "password": password})
    assert r.status_code == 200, r.text
    return {"Authorization": f"Bearer {r.json()['access_token']}"}


def add_exercise(db, title="Box Breathing", difficulty=1, xp_reward=10, content=None):
    content = content or {
        "type": "breathing",
        "instructions": ["In for 4", "Hold for 4", "Out for 4"],
        "rounds": 3,
    }
    exercise = Exercise(
        title=title,
        description=f"{title} description",
        category="Breathing",
        difficulty=difficulty,
        xp_reward=xp_reward,
        duration_minutes=5,
        content=dump_content(parse_content(content)),
    )
    db.add(exercise)
    db.commit()
    db.refresh(exercise)
    return exercise
