"""CSV loader for the worst-picture movie list.

Expected layout (semicolon-delimited, header row first):

    year;title;studios;producers;winner
    1980;Can't Stop the Music;Associated Film Distribution;Allan Carr;yes

Cells are trimmed, blank rows are skipped, and a movie is a winner only
when its winner cell reads "yes" (any case).
"""

from __future__ import annotations

import csv
import logging
from pathlib import Path

from pydantic import BaseModel, ValidationError, field_validator

from razzie.db import repo
from razzie.db.repo import DbSession
from razzie.errors import CsvFormatError, CsvSourceError
from razzie.models.domain import MovieEntity

logger = logging.getLogger(__name__)

CSV_DELIMITER = ";"
REQUIRED_COLUMNS = ("year", "title", "studios", "producers")


class CsvRow(BaseModel):
    """One parsed data row."""

    year: int
    title: str
    studios: str = ""
    producers: str = ""
    winner: bool = False

    @field_validator("winner", mode="before")
    @classmethod
    def _parse_winner(cls, value: object) -> bool:
        if isinstance(value, str):
            return value.strip().lower() == "yes"
        return bool(value)


def _clean_row(row: dict[str | None, str | None]) -> dict[str, str]:
    # DictReader puts overflow cells under the None key
    return {key.strip(): (value or "").strip() for key, value in row.items() if key is not None}


def load_movies_csv(csv_path: Path) -> list[MovieEntity]:
    """Parse the movie CSV into domain entities.

    Args:
        csv_path: Path to the CSV file.

    Returns:
        Movies in file order.

    Raises:
        CsvSourceError: If the file cannot be opened.
        CsvFormatError: If the header is incomplete or a row is invalid.
    """
    csv_path = Path(csv_path)
    try:
        handle = csv_path.open("r", encoding="utf-8-sig", newline="")
    except OSError as e:
        raise CsvSourceError(f"Cannot open movie CSV {csv_path}: {e}") from e

    movies: list[MovieEntity] = []
    with handle:
        reader = csv.DictReader(handle, delimiter=CSV_DELIMITER)
        headers = {name.strip() for name in reader.fieldnames or [] if name}
        missing = [col for col in REQUIRED_COLUMNS if col not in headers]
        if missing:
            raise CsvFormatError(
                f"{csv_path}: missing required columns: {', '.join(missing)}"
            )

        for raw in reader:
            cells = _clean_row(raw)
            if not any(cells.values()):
                continue
            try:
                row = CsvRow(**cells)
            except ValidationError as e:
                raise CsvFormatError(
                    f"{csv_path}:{reader.line_num}: invalid row: {e.errors()[0]['msg']}"
                ) from e
            movies.append(
                MovieEntity(
                    year=row.year,
                    title=row.title,
                    studios=row.studios,
                    producers=row.producers,
                    winner=row.winner,
                )
            )

    return movies


def load_csv_into_db(session: DbSession, csv_path: Path) -> int:
    """Load the movie CSV, replacing any movies already stored.

    Caller commits.

    Returns:
        Number of movies saved.
    """
    movies = load_movies_csv(csv_path)
    saved = repo.replace_movies(session, movies)
    logger.info(f"CSV loaded: {saved} movies saved")
    return saved
