"""Progress statistics over a window of workout sessions."""

import uuid
from datetime import datetime

from fastapi import APIRouter, Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.enums import WeightUnit
from app.db.session import get_db
from app.models.workout import WorkoutSession
from app.schemas.volume import VolumePointRead, VolumeStatsRead, VolumeStatsResponse
from app.services.preferences import get_preferred_unit
from app.services.volume_stats import summarize_sessions, volume_series

router = APIRouter()


@router.get("/volume", response_model=VolumeStatsResponse)
async def volume_stats(
    unit: WeightUnit | None = None,
    exercise_id: uuid.UUID | None = None,
    from_date: datetime | None = None,
    to_date: datetime | None = None,
    db: AsyncSession = Depends(get_db),
):
    """
    Chart figures for the selected window: total, average and max volume (with date),
    percent change from first to last session, days trained vs. days in range,
    plus the per-session series. Every session is re-expressed in ``unit``.
    """
    unit = unit or await get_preferred_unit(db)
    stmt = select(WorkoutSession).order_by(WorkoutSession.date)
    if exercise_id:
        stmt = stmt.where(WorkoutSession.exercise_id == exercise_id)
    result = await db.execute(stmt)
    sessions = result.scalars().all()

    stats = summarize_sessions(sessions, unit, start=from_date, end=to_date)
    series = volume_series(sessions, unit, start=from_date, end=to_date)
    return VolumeStatsResponse(
        stats=VolumeStatsRead.model_validate(stats),
        series=[VolumePointRead.model_validate(p) for p in series],
    )
