"""Movies API endpoint.

GET /movie - List all loaded movies
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from razzie.api.app import get_db_session
from razzie.db import repo
from razzie.db.repo import DbSession
from razzie.models.domain import MovieEntity
from razzie.models.types import MovieDetail

router = APIRouter()


def _movie_to_detail(movie: MovieEntity) -> MovieDetail:
    """Convert MovieEntity to MovieDetail."""
    return MovieDetail(
        id=movie.movie_id,
        year=movie.year,
        title=movie.title,
        studios=movie.studios,
        producers=movie.producers,
        winner=movie.winner,
    )


@router.get("/movie", response_model=list[MovieDetail])
def list_movies(session: DbSession = Depends(get_db_session)) -> list[MovieDetail]:
    """List all movies in load order."""
    return [_movie_to_detail(m) for m in repo.get_all_movies(session)]
