# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
import os
from datetime import datetime, timedelta

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

# Set test environment before importing app
os.environ["DATABASE_URL"] = "sqlite:///./test.db"
os.environ["ENVIRONMENT"] = "testing"
os.environ["CRON_SECRET"] = "test-cron-secret"  # nosec - test-only secret  # noqa: S105
os.environ["SESSION_SWEEP_MINUTES"] = "0"
os.environ["COLLECTOR_INTERVAL_MINUTES"] = "0"

from linkhub import security
from linkhub.api.deps import get_session_store
from linkhub.database import get_db
from linkhub.main import app
from linkhub.models import Base, User
from linkhub.models.enums import UserRole, UserStatus
from linkhub.security import get_password_hash
from linkhub.services.session_store import SessionStore

# Test database setup
TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


class FakeClock:
    """Controllable clock for session expiry tests."""

    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2025, 1, 1, 12, 0, 0)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture(autouse=True)
def fast_password_hashing(monkeypatch):
    """Use the cheapest bcrypt cost factor in tests."""
    monkeypatch.setattr(security, "BCRYPT_ROUNDS", 4)


@pytest.fixture(scope="function")
def db_session():
    """Create a fresh database for each test."""
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def cron_headers() -> dict[str, str]:
    """Authorization header carrying the test cron secret."""
    return {"Authorization": f"Bearer {os.environ['CRON_SECRET']}"}


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def session_store() -> SessionStore:
    """An isolated session store per test."""
    return SessionStore()


@pytest.fixture(scope="function")
def client(db_session, session_store):
    """Create a test client with database and session store overrides."""

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_session_store] = lambda: session_store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def create_user(
    db_session,
    email: str = "user@example.com",
    password: str = "userpassword",
    role: UserRole = UserRole.USER,
    status: UserStatus = UserStatus.ACTIVE,
    name: str = "Test User",
) -> User:
    """Persist a user with a hashed password."""
    user = User(
        name=name,
        email=email,
        password_hash=get_password_hash(password),
        role=role,
        status=status,
    )
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def make_user(db_session):
    """Factory fixture for persisted users."""

    def factory(**kwargs) -> User:
        return create_user(db_session, **kwargs)

    return factory


@pytest.fixture
def test_user(db_session) -> User:
    """Create a regular test user."""
    return create_user(db_session, "test@example.com", "testpassword123")


@pytest.fixture
def admin_user(db_session) -> User:
    """Create an admin test user."""
    return create_user(
        db_session,
        "admin@example.com",
        "adminpassword123",
        role=UserRole.ADMIN,
        name="Admin",
    )


@pytest.fixture
def authenticated_client(client, test_user):
    """Create an authenticated test client."""
    response = client.post(
        "/api/v1/auth/login",
        json={"email": "test@example.com", "password": "testpassword123"},
    )
    assert response.status_code == 200
    return client


@pytest.fixture
def admin_client(client, admin_user):
    """Create an authenticated admin test client."""
    response = client.post(
        "/api/v1/auth/login",
        json={"email": "admin@example.com", "password": "adminpassword123"},
    )
    assert response.status_code == 200
    return client
