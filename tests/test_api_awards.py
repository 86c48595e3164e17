"""Tests for awards API endpoint."""

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool

from razzie.config import Settings
from razzie.db import repo
from razzie.db.schema import Base
from razzie.models.domain import MovieEntity


def create_test_app_and_client():
    """Create app with test database and return (client, engine)."""
    from razzie.api.app import create_app, get_db_session

    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)

    app = create_app(Settings(load_csv_on_startup=False))

    def override_get_db():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_db_session] = override_get_db
    client = TestClient(app)

    return client, engine


def setup_test_data(engine, movies: list[tuple[int, str, bool]]) -> None:
    """Store (year, producers, winner) tuples as movies."""
    with Session(engine) as db_session:
        repo.replace_movies(
            db_session,
            [
                MovieEntity(year=year, title=f"Movie {i}", studios="Studio", producers=producers, winner=winner)
                for i, (year, producers, winner) in enumerate(movies)
            ],
        )
        db_session.commit()


class TestGetIntervalsEndpoint:
    """Test GET /awards/intervals."""

    def test_returns_200(self):
        """Returns 200 OK with min and max keys."""
        client, _ = create_test_app_and_client()

        response = client.get("/awards/intervals")

        assert response.status_code == 200
        data = response.json()
        assert "min" in data
        assert "max" in data

    def test_empty_database_returns_empty_lists(self):
        """No movies gives empty min and max."""
        client, _ = create_test_app_and_client()

        data = client.get("/awards/intervals").json()

        assert data == {"min": [], "max": []}

    def test_returns_min_and_max_producers(self):
        """Response lists producers at the extreme intervals."""
        client, engine = create_test_app_and_client()
        setup_test_data(
            engine,
            [
                (1990, "Joel Silver", True),
                (1991, "Joel Silver", True),
                (2002, "Matthew Vaughn", True),
                (2008, "Matthew Vaughn and Joel Silver", False),
                (2015, "Matthew Vaughn", True),
            ],
        )

        data = client.get("/awards/intervals").json()

        assert data == {
            "min": [
                {"producer": "Joel Silver", "interval": 1, "previousWin": 1990, "followingWin": 1991}
            ],
            "max": [
                {"producer": "Matthew Vaughn", "interval": 13, "previousWin": 2002, "followingWin": 2015}
            ],
        }

    def test_ties_returned_together(self):
        """Producers sharing the extreme interval are all listed."""
        client, engine = create_test_app_and_client()
        setup_test_data(
            engine,
            [
                (2000, "A, B", True),
                (2001, "A", True),
                (2001, "B", True),
            ],
        )

        data = client.get("/awards/intervals").json()

        assert [entry["producer"] for entry in data["min"]] == ["A", "B"]
        assert [entry["producer"] for entry in data["max"]] == ["A", "B"]


class TestHealthEndpoint:
    """Test GET /health."""

    def test_health(self):
        """Health check returns ok."""
        client, _ = create_test_app_and_client()
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}
