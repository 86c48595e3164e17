"""Database schema for razzie."""

from sqlalchemy import Boolean, Integer, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all models."""

    pass


class Movie(Base):
    """A movie nominated for the worst-picture award.

    producers holds the raw credit text exactly as loaded.
    """

    __tablename__ = "movies"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    year: Mapped[int] = mapped_column(Integer, nullable=False)
    title: Mapped[str] = mapped_column(String(512), nullable=False)
    studios: Mapped[str] = mapped_column(Text, nullable=False, default="")
    producers: Mapped[str] = mapped_column(Text, nullable=False, default="")
    winner: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False, index=True)
