"""Shared pytest fixtures for razzie tests."""

from pathlib import Path

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from razzie.db.schema import Base

CSV_HEADER = "year;title;studios;producers;winner"


@pytest.fixture
def engine():
    """Create an in-memory SQLite engine for testing."""
    engine = create_engine("sqlite:///:memory:", echo=False)
    Base.metadata.create_all(engine)
    return engine


@pytest.fixture
def session(engine):
    """Create a database session for testing."""
    Session = sessionmaker(bind=engine)
    session = Session()
    yield session
    session.close()


@pytest.fixture
def write_csv(tmp_path):
    """Write CSV lines (header included by default) and return the path."""

    def _write(lines: list[str], header: str | None = CSV_HEADER, name: str = "movies.csv") -> Path:
        path = tmp_path / name
        body = ([header] if header is not None else []) + lines
        path.write_text("\n".join(body) + "\n", encoding="utf-8")
        return path

    return _write
