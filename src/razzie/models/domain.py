"""Domain models for razzie.

Pure Python dataclasses representing domain entities.
These models are independent of SQLAlchemy and used throughout
the application for clean separation from the database layer.
"""

from __future__ import annotations

from dataclasses import dataclass


# ============================================================================
# Movie Domain
# ============================================================================


@dataclass(frozen=True)
class MovieEntity:
    """Domain model for a movie on the award list.

    producers is the raw credit text and may name several people.
    """

    year: int
    title: str
    studios: str
    producers: str
    winner: bool
    movie_id: int | None = None


# ============================================================================
# Producer Domain
# ============================================================================


@dataclass(frozen=True)
class ProducerWin:
    """One producer credited on one winning movie."""

    year: int
    producer: str
