"""Fixtures for a file-backed SQLite database built the way the application builds it."""

from collections.abc import Generator
from pathlib import Path

import pytest
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from studyledger import models
from studyledger.config import Settings
from studyledger.database import Base, build_engine


@pytest.fixture
def file_engine(tmp_path: Path) -> Generator[Engine, None, None]:
    """Engine on a temporary database file, one pooled connection per session."""
    engine = build_engine(Settings(DATABASE_URL=f"sqlite:///{tmp_path / 'studyledger.db'}"))
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def session_factory(file_engine: Engine) -> sessionmaker[Session]:
    factory = sessionmaker(bind=file_engine, autoflush=False)
    with factory() as db:
        db.add(models.User(email="learner@example.com"))
        db.add_all(
            [
                models.Item(id="kanji-1", label="一"),
                models.Item(id="kanji-2", label="二"),
                models.Item(id="kanji-3", label="三"),
            ]
        )
        db.commit()
    return factory


@pytest.fixture
def learner_id(session_factory: sessionmaker[Session]) -> int:
    with session_factory() as db:
        return db.query(models.User).one().id
