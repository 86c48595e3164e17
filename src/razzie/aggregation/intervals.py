"""Producer award interval aggregation.

Computes, for every producer with two or more wins, the gaps between
consecutive wins and reports the producers at the smallest and largest
gap. Domain logic is pure - database operations go through repo.

Pipeline:
    winners -> producer wins -> years by producer -> intervals
            -> intervals by length -> (min bucket, max bucket)
"""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

from razzie.db import repo
from razzie.db.repo import DbSession
from razzie.models.domain import MovieEntity, ProducerWin
from razzie.models.types import AwardIntervalResult, ProducerInterval

logger = logging.getLogger(__name__)

# Only the exact token " and " separates names; "Anderson" stays whole.
AND_SEPARATOR = " and "


def summarize_award_intervals(session: DbSession) -> AwardIntervalResult:
    """Compute award intervals for the winners stored in the database.

    Args:
        session: Database session.

    Returns:
        AwardIntervalResult with the min and max interval buckets.
    """
    winners = repo.get_winning_movies(session)
    return compute_award_intervals(winners)


def compute_award_intervals(records: Sequence[MovieEntity] | None) -> AwardIntervalResult:
    """Compute min and max producer award intervals.

    Pure function - no database access. Input records are not modified.

    Args:
        records: Movies to consider; non-winners are ignored. None is
            treated as an empty list.

    Returns:
        AwardIntervalResult; both lists are empty when no producer won
        at least twice.
    """
    if not records:
        return AwardIntervalResult(min=[], max=[])

    winners = filter_winners(records)
    wins = get_movies_by_producers(winners)
    years_by_producer = group_years_by_producer(wins)
    intervals = get_producer_intervals(years_by_producer)
    buckets = group_by_interval(intervals)

    logger.debug(
        f"Award intervals: {len(winners)} winners, {len(years_by_producer)} producers, "
        f"{len(intervals)} intervals in {len(buckets)} buckets"
    )

    return get_min_and_max_grouped_intervals(buckets)


def filter_winners(records: Iterable[MovieEntity]) -> list[MovieEntity]:
    """Keep only award winners, in source order."""
    return [record for record in records if record.winner]


def split_producer_names(producers: str) -> list[str]:
    """Split a raw producer credit into individual names.

    " and " counts as a comma. Pieces are trimmed and empty pieces
    dropped; duplicates are kept.

    Example:
        >>> split_producer_names("Bob Cavallo, Joe Ruffalo and Steve Fargnoli")
        ['Bob Cavallo', 'Joe Ruffalo', 'Steve Fargnoli']
    """
    pieces = producers.replace(AND_SEPARATOR, ",").split(",")
    return [name.strip() for name in pieces if name.strip()]


def get_movies_by_producers(movies: Iterable[MovieEntity]) -> list[ProducerWin]:
    """Flatten movies into one ProducerWin per credited producer."""
    return [
        ProducerWin(year=movie.year, producer=name)
        for movie in movies
        for name in split_producer_names(movie.producers)
    ]


def _producer_key(name: str) -> str:
    return " ".join(name.split()).casefold()


def group_years_by_producer(wins: Iterable[ProducerWin]) -> dict[str, list[int]]:
    """Group win years by producer.

    Names are matched ignoring case and runs of whitespace; the first
    spelling seen is the one reported. Years keep insertion order and
    duplicates are preserved.

    Returns:
        Producer name -> years, in order of first appearance (dicts
        preserve insertion order).
    """
    display_names: dict[str, str] = {}
    years_by_producer: dict[str, list[int]] = {}
    for win in wins:
        key = _producer_key(win.producer)
        if key not in display_names:
            display_names[key] = win.producer
            years_by_producer[win.producer] = []
        years_by_producer[display_names[key]].append(win.year)
    return years_by_producer


def get_producer_intervals(years_by_producer: dict[str, list[int]]) -> list[ProducerInterval]:
    """Derive the interval between each pair of consecutive wins.

    Years are sorted per producer (stable); producers with fewer than
    two wins contribute nothing. Two wins in the same year give an
    interval of 0.
    """
    intervals: list[ProducerInterval] = []
    for producer, years in years_by_producer.items():
        if len(years) < 2:
            continue
        ordered = sorted(years)
        for previous_win, following_win in zip(ordered, ordered[1:]):
            intervals.append(
                ProducerInterval(
                    producer=producer,
                    interval=following_win - previous_win,
                    previous_win=previous_win,
                    following_win=following_win,
                )
            )
    return intervals


def group_by_interval(intervals: Iterable[ProducerInterval]) -> dict[int, list[ProducerInterval]]:
    """Bucket intervals by length, keeping input order within a bucket."""
    buckets: dict[int, list[ProducerInterval]] = {}
    for entry in intervals:
        buckets.setdefault(entry.interval, []).append(entry)
    return buckets


def get_min_and_max_grouped_intervals(
    buckets: dict[int, list[ProducerInterval]],
) -> AwardIntervalResult:
    """Select the buckets at the smallest and largest interval length.

    Keys are sorted numerically rather than read in dict order. Each side
    gets its own copies so min and max never share entries.
    """
    if not buckets:
        return AwardIntervalResult(min=[], max=[])

    keys = sorted(buckets)
    return AwardIntervalResult(
        min=[entry.model_copy() for entry in buckets[keys[0]]],
        max=[entry.model_copy() for entry in buckets[keys[-1]]],
    )
