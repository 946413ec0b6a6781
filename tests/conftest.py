"""Pytest configuration and fixtures."""

import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "flashdeck-test-secret-key-0123456789abcdef")
os.environ.setdefault("ENVIRONMENT", "test")

from collections.abc import Callable, Generator  # noqa: E402
from datetime import UTC, datetime  # noqa: E402
from typing import Any  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from flashdeck import models  # noqa: E402
from flashdeck.database import Base, get_db  # noqa: E402
from flashdeck.infrastructure.identity.auth.token_service import create_access_token  # noqa: E402
from flashdeck.main import app  # noqa: E402

# Test database URL (in-memory SQLite shared across threads)
TEST_DATABASE_URL = "sqlite://"

test_engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Create a fresh database session for each test."""
    Base.metadata.create_all(bind=test_engine)

    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def test_user(db_session: Session) -> models.User:
    user = models.User(email="learner@example.com")
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def other_user(db_session: Session) -> models.User:
    user = models.User(email="someone-else@example.com")
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def anonymous_client(db_session: Session) -> Generator[TestClient, Any, None]:
    """Test client with the database overridden but no credentials."""

    def override_get_db() -> Generator[Session, None, None]:
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def client(anonymous_client: TestClient, test_user: models.User) -> TestClient:
    """Test client authenticated as test_user."""
    anonymous_client.headers["Authorization"] = f"Bearer {create_access_token(test_user.id)}"
    return anonymous_client


@pytest.fixture
def make_flashcard(db_session: Session, test_user: models.User) -> Callable[..., models.Flashcard]:
    """Insert a flashcard row; due_at=None makes a never reviewed card."""

    def _make(
        front: str = "Front",
        back: str = "Back",
        due_at: datetime | None = None,
        interval_days: int = 0,
        ease_factor: float = 2.5,
        repetitions: int = 0,
        user: models.User | None = None,
    ) -> models.Flashcard:
        flashcard = models.Flashcard(
            user_id=(user or test_user).id,
            front=front,
            back=back,
            source="manual",
            interval_days=interval_days,
            ease_factor=ease_factor,
            repetitions=repetitions,
            due_at=due_at,
            last_reviewed_at=datetime.now(UTC) if due_at is not None else None,
        )
        db_session.add(flashcard)
        db_session.commit()
        db_session.refresh(flashcard)
        return flashcard

    return _make
