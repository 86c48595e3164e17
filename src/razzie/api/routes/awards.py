"""Awards API endpoint.

GET /awards/intervals - Producers with the shortest and longest gap
between consecutive wins
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from razzie.aggregation.intervals import summarize_award_intervals
from razzie.api.app import get_db_session
from razzie.db.repo import DbSession
from razzie.models.types import AwardIntervalResult

router = APIRouter()


@router.get("/awards/intervals", response_model=AwardIntervalResult)
def get_intervals(session: DbSession = Depends(get_db_session)) -> AwardIntervalResult:
    """Get min and max producer award intervals.

    Args:
        session: Database session (injected).

    Returns:
        AwardIntervalResult serialized with previousWin/followingWin keys.
    """
    return summarize_award_intervals(session)
