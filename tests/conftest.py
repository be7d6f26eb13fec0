"""Pytest configuration and fixtures."""

from collections.abc import Generator
from typing import Any

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from studyledger import models
from studyledger.config import get_settings
from studyledger.database import Base, get_db
from studyledger.main import app

# Test database URL (in-memory SQLite)
TEST_DATABASE_URL = "sqlite:///:memory:"

# One shared connection, so the request threads of TestClient see the same database
test_engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

# Create test session factory
TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Create a fresh database session for each test."""
    # Create all tables
    Base.metadata.create_all(bind=test_engine)

    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        # Drop all tables after test
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def client(db_session: Session) -> Generator[TestClient, Any, None]:
    """Create a test client with database session."""

    def override_get_db() -> Generator[Session, None, None]:
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def test_user(db_session: Session) -> models.User:
    """Create a learner."""
    user = models.User(email="learner@example.com")
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def auth_headers(test_user: models.User) -> dict[str, str]:
    """Identity header as forwarded by the upstream gateway."""
    return {get_settings().USER_ID_HEADER: str(test_user.id)}


@pytest.fixture
def test_items(db_session: Session) -> list[models.Item]:
    """Create catalog items."""
    items = [
        models.Item(id="kanji-1", label="一"),
        models.Item(id="kanji-2", label="二"),
        models.Item(id="kanji-3", label="三"),
    ]
    db_session.add_all(items)
    db_session.commit()
    return items


@pytest.fixture
def test_deck(db_session: Session, test_user: models.User) -> models.Deck:
    """Create a deck owned by the test user."""
    deck = models.Deck(id="deck-n5", user_id=test_user.id, name="JLPT N5")
    db_session.add(deck)
    db_session.commit()
    db_session.refresh(deck)
    return deck
