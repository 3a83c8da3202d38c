"""
Shared pytest fixtures for all tests.

Every test gets its own SQLite file under ``tmp_path``, a ``Database``
handle on it, and (for HTTP tests) an app built around that handle.
"""

import itertools

import pytest
from starlette.testclient import TestClient

from event_planner.config.settings import Settings
from event_planner.database import Database
from event_planner.models import User, UserRole
from event_planner.schemas.user import Requester
from event_planner.utils.security import hash_password
from main import create_app

DEFAULT_PASSWORD = "password123"


@pytest.fixture
def settings(tmp_path):
    """Settings pointing at a throwaway SQLite database."""
    return Settings(
        database_url=f"sqlite:///{tmp_path / 'test.db'}",
        secret_key="test-secret",
        refresh_secret_key="test-refresh-secret",
        log_level="WARNING",
        cors_origins=[],
    )


@pytest.fixture
def database(settings):
    db = Database(settings.database_url)
    db.create_all()
    yield db
    db.dispose()


@pytest.fixture
def session(database):
    """Session for service-level tests."""
    with database.session() as db:
        yield db


@pytest.fixture
def make_user(database):
    """Factory creating a stored user and returning its ``Requester``."""
    counter = itertools.count(1)

    def _make(role: UserRole = UserRole.USER, email: str = None, password: str = DEFAULT_PASSWORD) -> Requester:
        n = next(counter)
        with database.session() as db:
            user = User(
                name=f"User {n}",
                email=email or f"user{n}@test.com",
                hashed_password=hash_password(password),
                role=role.value,
            )
            db.add(user)
            db.commit()
            return Requester(id=user.id, role=user.role)

    return _make


@pytest.fixture
def app(settings, database):
    return create_app(settings, database=database)


@pytest.fixture
def client(app):
    """Starlette TestClient with full application."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def auth_headers(app, database):
    """Build a bearer header for a stored user."""

    def _headers(requester: Requester) -> dict:
        with database.session() as db:
            user = db.get(User, requester.id)
            token = app.state.credentials.issue(user)
        return {"Authorization": f"Bearer {token}"}

    return _headers
