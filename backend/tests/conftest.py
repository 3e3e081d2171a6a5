import os

import pytest

# Use in-memory sqlite for tests; must be set before app modules are imported
os.environ["DATABASE_URL"] = "sqlite+pysqlite:///:memory:"

from fastapi.testclient import TestClient  # noqa: E402

from app.db import SessionLocal, get_db  # noqa: E402
from app.main import app  # noqa: E402
from app.models.daily_progress import DailyProgress  # noqa: E402
from app.models.progress import Progress  # noqa: E402


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(autouse=True)
def clean_tables():
    yield
    app.dependency_overrides.pop(get_db, None)
    session = SessionLocal()
    try:
        session.query(DailyProgress).delete()
        session.query(Progress).delete()
        session.commit()
    finally:
        session.close()
