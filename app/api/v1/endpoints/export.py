"""Workout data export."""

import uuid
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.core.enums import WeightUnit
from app.db.session import get_db
from app.models.workout import WorkoutSession
from app.services.export import sessions_to_csv
from app.services.preferences import get_preferred_unit

router = APIRouter()


@router.get("/csv")
async def export_csv(
    unit: WeightUnit | None = None,
    exercise_id: uuid.UUID | None = None,
    db: AsyncSession = Depends(get_db),
):
    """All sessions (oldest first) as CSV, one row per set. Totals in ``unit`` (default: preferred)."""
    unit = unit or await get_preferred_unit(db)
    stmt = (
        select(WorkoutSession)
        .options(selectinload(WorkoutSession.sets), selectinload(WorkoutSession.exercise))
        .order_by(WorkoutSession.date)
    )
    if exercise_id:
        stmt = stmt.where(WorkoutSession.exercise_id == exercise_id)
    result = await db.execute(stmt)
    content = sessions_to_csv(result.scalars().all(), unit)
    filename = f"workouts-{datetime.now(timezone.utc):%Y%m%d}.csv"
    return Response(
        content=content,
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.get("/pdf")
async def export_pdf():
    """PDF export is not available yet."""
    raise HTTPException(status_code=501, detail="PDF export is not implemented")
