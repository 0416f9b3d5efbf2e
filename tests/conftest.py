# tests/conftest.py
from __future__ import annotations

import os
from collections.abc import Generator, Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

os.environ.setdefault("SECRET_KEY", "test-secret-key-for-huddle")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("AUTO_CREATE_TABLES", "false")
# Minimum bcrypt cost keeps the suite fast.
os.environ.setdefault("BCRYPT_ROUNDS", "4")

from huddle.core.settings import Settings, TokenSettings  # noqa: E402
from huddle.db.session import Base  # noqa: E402
from huddle.db.session import get_db as app_get_session  # noqa: E402
from huddle.main import app as fastapi_app  # noqa: E402
from huddle.services.auth import AuthResult, AuthService  # noqa: E402
from huddle.services.feed import FeedService  # noqa: E402

TEST_DB_URL = "sqlite://"

_TEST_SETTINGS_INSTANCE = Settings()  # type: ignore[call-arg]


@pytest.fixture()
def engine() -> Generator[Engine, None, None]:
    engine = create_engine(
        TEST_DB_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def db_session(engine: Engine) -> Iterator[Session]:
    SessionLocal = sessionmaker(
        bind=engine,
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
    )
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="session")
def app() -> FastAPI:
    return fastapi_app


@pytest.fixture(autouse=True)
def override_session_dependency(app: FastAPI, db_session: Session) -> Iterator[None]:
    def _get_session_override() -> Generator[Session, None, None]:
        yield db_session

    app.dependency_overrides[app_get_session] = _get_session_override
    try:
        yield
    finally:
        app.dependency_overrides.pop(app_get_session, None)


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app, base_url="http://test") as test_client:
        yield test_client


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    """Provide a Settings instance aligned with runtime configuration."""
    return _TEST_SETTINGS_INSTANCE


@pytest.fixture()
def token_settings(test_settings: Settings) -> TokenSettings:
    return test_settings.token_settings()


@pytest.fixture()
def auth_service(token_settings: TokenSettings) -> AuthService:
    return AuthService(token_settings)


@pytest.fixture()
def feed_service() -> FeedService:
    return FeedService()


@pytest.fixture()
def alice(db_session: Session, auth_service: AuthService) -> AuthResult:
    """Register and return the primary test user."""
    return auth_service.register(db_session, "alice", "a@x.com", "secret1")


@pytest.fixture()
def bob(db_session: Session, auth_service: AuthService) -> AuthResult:
    """Register and return a second test user."""
    return auth_service.register(db_session, "bob", "b@x.com", "hunter22")


@pytest.fixture()
def auth_token(alice: AuthResult) -> dict[str, str]:
    """Return authorization headers for the primary test user."""
    return {"Authorization": f"Bearer {alice.token}"}


@pytest.fixture()
def other_auth_token(bob: AuthResult) -> dict[str, str]:
    """Return authorization headers for the secondary test user."""
    return {"Authorization": f"Bearer {bob.token}"}
