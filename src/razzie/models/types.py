"""Pydantic models for the razzie API.

Field names of ProducerInterval are part of the public JSON contract.
"""

from pydantic import BaseModel, ConfigDict, Field


class MovieDetail(BaseModel):
    """Movie details for API response."""

    id: int
    year: int
    title: str
    studios: str
    producers: str
    winner: bool


class ProducerInterval(BaseModel):
    """Gap between two consecutive wins of one producer."""

    model_config = ConfigDict(populate_by_name=True)

    producer: str
    interval: int
    previous_win: int = Field(alias="previousWin")
    following_win: int = Field(alias="followingWin")


class AwardIntervalResult(BaseModel):
    """Producers with the shortest and longest gaps between wins."""

    min: list[ProducerInterval]
    max: list[ProducerInterval]
