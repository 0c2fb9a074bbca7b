# tests/conftest.py

import os

import pytest
from starlette.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy_utils import create_database, database_exists, drop_database
from unittest.mock import MagicMock

from eventbook.main import app
from eventbook.api import deps
from eventbook.core.config import settings
from eventbook.core.limiter import limiter
from eventbook.db.session import get_db
from eventbook.models import Base
from eventbook.schemas.token import TokenPayload


# --- Test Database Setup ---
TEST_DATABASE_URL = os.getenv("TEST_DATABASE_URL", "sqlite:///./eventbook_test.db")
engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False} if TEST_DATABASE_URL.startswith("sqlite") else {},
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    if database_exists(engine.url):
        drop_database(engine.url)
    create_database(engine.url)
    yield
    engine.dispose()
    drop_database(engine.url)


@pytest.fixture(scope="function")
def db_session():
    """A session on a freshly created schema. Services commit, so each test
    gets its own tables instead of a rolled-back transaction."""
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    yield session
    session.close()
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(autouse=True)
def email_settings(monkeypatch):
    """Every test starts in mock mode with the permissive response policy."""
    monkeypatch.setattr(settings, "RESEND_API_KEY", None)
    monkeypatch.setattr(settings, "ALLOW_RESPONSE_CHANGES", True)
    monkeypatch.setattr(settings, "APP_BASE_URL", "https://events.example.org")


# --- Mock Dependencies Setup ---
def override_get_current_staff_user():
    return TokenPayload(sub="staff_123", role="STAFF", exp=9999999999)


# --- Test Client Fixtures ---
@pytest.fixture(scope="function")
def test_client():
    """
    Provides a TestClient where the database and authentication are mocked.
    This is for INTEGRATION tests.
    """
    app.dependency_overrides[get_db] = lambda: MagicMock()
    app.dependency_overrides[deps.get_current_staff_user] = override_get_current_staff_user
    limiter.enabled = False

    with TestClient(app) as client:
        yield client

    limiter.enabled = True
    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def test_client_e2e(db_session):
    """
    Provides a TestClient that uses the test database and mocks staff auth.
    This is for E2E tests.
    """

    def override_get_db_e2e():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db_e2e
    app.dependency_overrides[deps.get_current_staff_user] = override_get_current_staff_user
    limiter.enabled = False

    with TestClient(app) as client:
        yield client

    limiter.enabled = True
    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def test_client_unauthenticated(db_session):
    """A TestClient with the real auth dependencies in place."""

    def override_get_db_e2e():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db_e2e
    limiter.enabled = False

    with TestClient(app) as client:
        yield client

    limiter.enabled = True
    app.dependency_overrides.clear()
