"""FastAPI application factory."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Generator

from fastapi import FastAPI, Request

from razzie.config import Settings, configure_logging, get_settings
from razzie.db.repo import DbSession
from razzie.db.session import get_db_session as db_session_scope
from razzie.db.session import get_session, init_db
from razzie.ingestion.csv_loader import load_csv_into_db

logger = logging.getLogger(__name__)


def get_db_session(request: Request) -> Generator[DbSession, None, None]:
    """Dependency to get database session.

    Yields:
        Database session that is automatically closed after request.
    """
    session = get_session(request.app.state.settings.database_path)
    try:
        yield session
    finally:
        session.close()


def load_movies_on_startup(settings: Settings) -> None:
    """Create the schema and load the movie CSV.

    Raises:
        ConfigurationError: If loading is enabled and CSV_PATH is unset.
        CsvSourceError: If the CSV cannot be opened.
        CsvFormatError: If the CSV is malformed.
    """
    init_db(settings.database_path)
    if not settings.load_csv_on_startup:
        logger.info("CSV loading disabled; serving existing database")
        return

    csv_path = settings.require_csv_path()
    with db_session_scope(settings.database_path) as session:
        load_csv_into_db(session, csv_path)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create FastAPI application.

    Args:
        settings: Optional settings; defaults to environment settings.

    Returns:
        Configured FastAPI application.
    """
    if settings is None:
        settings = get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        configure_logging(settings.log_level)
        load_movies_on_startup(settings)
        yield

    app = FastAPI(
        title="Razzie API",
        description="Worst-picture producers and their award intervals",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings

    # Include routes
    from razzie.api.routes import awards, movies

    app.include_router(movies.router)
    app.include_router(awards.router)

    # Health check endpoint
    @app.get("/health")
    def health_check():
        """Health check endpoint."""
        return {"status": "ok"}

    return app


# Default app instance
app = create_app()
