"""Test fixtures: a throwaway SQLite database per test and a TestClient wired to it."""

import os
from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, func, select
from sqlalchemy.orm import sessionmaker

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from garage_api.config import get_settings  # noqa: E402
from garage_api.domain.models.garage_auth import GarageAuth  # noqa: E402
from garage_api.domain.models.user import User  # noqa: E402
from garage_api.infrastructure.database import Base, get_db  # noqa: E402
from garage_api.infrastructure.repositories.garage_auth_repository import SQLAlchemyGarageAuthRepository  # noqa: E402
from garage_api.infrastructure.repositories.user_repository import SQLAlchemyUserRepository  # noqa: E402
from garage_api.main import app  # noqa: E402
from tests.helpers import PARENT_UID  # noqa: E402


@pytest.fixture
def session_factory(tmp_path):
    engine = create_engine(
        f"sqlite:///{tmp_path / 'garage_test.db'}",
        connect_args={"check_same_thread": False},
    )
    Base.metadata.create_all(engine)
    yield sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
    engine.dispose()


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def user_repo(db_session):
    return SQLAlchemyUserRepository(db_session, User)


@pytest.fixture
def auth_repo(db_session):
    return SQLAlchemyGarageAuthRepository(db_session, GarageAuth)


@pytest.fixture
def make_user(session_factory):
    """Insert a user row directly, bypassing the provisioning flow."""

    def _make_user(**overrides) -> User:
        now = datetime.now(timezone.utc)
        fields = {
            "user_uid": PARENT_UID,
            "garage_uid": "garage-uid-123",
            "garage_id": "GARAGE001",
            "garage_name": "Test Garage",
            "first_name": "Admin",
            "last_name": "User",
            "login_id": "admin.user@testgarage",
            "user_role": "Owner",
            "email": "admin@test.com",
            "phone_number": "+1234567890",
            "is_active": True,
            "created_at": now,
            "updated_at": now,
        }
        fields.update(overrides)
        with session_factory() as session:
            user = User(**fields)
            session.add(user)
            session.commit()
            return user

    return _make_user


@pytest.fixture
def parent(make_user):
    return make_user()


@pytest.fixture
def count_rows(session_factory):
    def _count(model) -> int:
        with session_factory() as session:
            return session.scalar(select(func.count()).select_from(model))

    return _count


@pytest.fixture
def client(session_factory):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def settings(monkeypatch):
    """The cached Settings instance; attributes patched through it are undone after the test."""
    settings = get_settings()

    class Patcher:
        def set(self, name, value):
            monkeypatch.setattr(settings, name, value)

    return Patcher()
