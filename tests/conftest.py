"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from typing import Callable, Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import StaticPool, create_engine
from sqlalchemy.orm import Session, sessionmaker

from src.core.config import Settings, get_settings
from src.db.database import get_db
from src.db.schema import Base
from src.db.sql_repository import SQLRepository
from src.main import app

# Setup an in-memory SQLite database for testing
DATABASE_URL = "sqlite:///:memory:"
engine = create_engine(
    DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestingSessionLocal = sessionmaker(autoflush=False, bind=engine)

USER_TOKEN = "user-token"
ADMIN_TOKEN = "admin-token"


@pytest.fixture
def db_session_repo() -> Generator[Session, None, None]:
    """Connection to a test database. Tables are removed at teardown to make unit tests of repository independent of each other."""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        Base.metadata.drop_all(bind=engine)
        db.close()


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    """HTTP client against the app, wired to the in-memory database and to known tokens."""
    Base.metadata.create_all(bind=engine)

    def override_get_db() -> Generator[Session, None, None]:
        db = TestingSessionLocal()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_settings] = lambda: Settings(
        user_tokens=USER_TOKEN, admin_tokens=ADMIN_TOKEN
    )
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def store() -> Generator[Callable[[type[SQLRepository]], SQLRepository], None, None]:
    """Open a repository on a fresh session of the test database, to arrange records before an HTTP call and inspect them after."""
    sessions: list[Session] = []

    def _open(repository_cls: type[SQLRepository]) -> SQLRepository:
        db = TestingSessionLocal()
        sessions.append(db)
        return repository_cls(db)

    yield _open
    for db in sessions:
        db.close()


@pytest.fixture
def user_headers() -> dict[str, str]:
    return {"Authorization": f"Bearer {USER_TOKEN}"}


@pytest.fixture
def admin_headers() -> dict[str, str]:
    return {"Authorization": f"Bearer {ADMIN_TOKEN}"}
