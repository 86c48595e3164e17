"""Repository pattern for database operations.

Encapsulates all SQLAlchemy queries, keeping domain logic pure.
Returns domain models (not SQLAlchemy entities) to external callers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from sqlalchemy import delete
from sqlalchemy.orm import Session

from razzie.db.schema import Movie
from razzie.models.domain import MovieEntity

if TYPE_CHECKING:
    from sqlalchemy.orm import Session as DbSession
else:
    DbSession = Session

# Re-export for external use
__all__ = ["DbSession"]


def _movie_to_entity(movie: Movie) -> MovieEntity:
    """Convert SQLAlchemy Movie to domain entity."""
    return MovieEntity(
        movie_id=movie.id,
        year=movie.year,
        title=movie.title,
        studios=movie.studios,
        producers=movie.producers,
        winner=movie.winner,
    )


def get_all_movies(session: DbSession) -> list[MovieEntity]:
    """Get all movies in load order."""
    movies = session.query(Movie).order_by(Movie.id).all()
    return [_movie_to_entity(m) for m in movies]


def get_winning_movies(session: DbSession) -> list[MovieEntity]:
    """Get movies that won the award, in load order."""
    movies = session.query(Movie).filter(Movie.winner.is_(True)).order_by(Movie.id).all()
    return [_movie_to_entity(m) for m in movies]


def count_movies(session: DbSession) -> int:
    """Count stored movies."""
    return session.query(Movie).count()


def replace_movies(session: DbSession, movies: Iterable[MovieEntity]) -> int:
    """Replace the stored movie list.

    Existing rows are deleted so that reloading the same CSV does not
    duplicate wins. Caller commits.

    Returns:
        Number of movies inserted.
    """
    session.execute(delete(Movie))
    rows = [
        Movie(
            year=m.year,
            title=m.title,
            studios=m.studios,
            producers=m.producers,
            winner=m.winner,
        )
        for m in movies
    ]
    session.add_all(rows)
    session.flush()
    return len(rows)
