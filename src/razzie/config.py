"""Configuration for the razzie service.

Settings come from the environment and an optional .env file in the
working directory.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from razzie.errors import ConfigurationError

# Default database path
DEFAULT_DB_PATH = Path("data/razzie.db")


class Settings(BaseSettings):
    """Environment-driven settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    csv_path: Path | None = Field(default=None, alias="CSV_PATH")
    database_path: Path = Field(default=DEFAULT_DB_PATH, alias="RAZZIE_DB_PATH")
    load_csv_on_startup: bool = Field(default=True, alias="RAZZIE_LOAD_CSV_ON_STARTUP")
    log_level: str = Field(default="INFO", alias="RAZZIE_LOG_LEVEL")

    def require_csv_path(self) -> Path:
        """Return the configured CSV path.

        Raises:
            ConfigurationError: If CSV_PATH is not set.
        """
        if self.csv_path is None:
            raise ConfigurationError("CSV_PATH not defined on .env")
        return self.csv_path


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging for the service."""
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
