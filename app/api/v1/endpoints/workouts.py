"""Workout session CRUD endpoints. Totals are computed by the volume engine."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException
from loguru import logger
from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.core.constants import MAX_STORED_REPS, MAX_STORED_VOLUME
from app.core.enums import WeightUnit
from app.core.errors import InvalidReps, InvalidVolume
from app.db.session import get_db
from app.models.exercise import Exercise
from app.models.workout import WorkoutSession, WorkoutSet
from app.schemas.workout import WorkoutCreate, WorkoutRead, WorkoutSetCreate, WorkoutUpdate
from app.services.preferences import get_preferred_unit
from app.services.volume import SetEntry, calculate_set_volume, calculate_total_volume, normalize_volume

router = APIRouter()


def session_query() -> Select:
    """Sessions with sets and exercise eagerly loaded (no async lazy loads)."""
    return select(WorkoutSession).options(
        selectinload(WorkoutSession.sets),
        selectinload(WorkoutSession.exercise),
    )


async def _get_session_or_404(db: AsyncSession, session_id: uuid.UUID) -> WorkoutSession:
    result = await db.execute(
        session_query()
        .where(WorkoutSession.id == session_id)
        .execution_options(populate_existing=True)
    )
    session = result.scalar_one_or_none()
    if not session:
        raise HTTPException(status_code=404, detail="Workout session not found")
    return session


def _build_sets(payload_sets: list[WorkoutSetCreate], unit: WeightUnit) -> tuple[float, list[WorkoutSet]]:
    """Total volume in ``unit`` plus the set rows. Raises before anything is written."""
    entries = [
        SetEntry(weight=s.weight, reps=s.reps, unit=s.unit or unit, notes=s.notes)
        for s in payload_sets
    ]
    total = calculate_total_volume(entries, unit)
    if total > MAX_STORED_VOLUME:
        raise InvalidVolume(total)
    rows = []
    for index, entry in enumerate(entries, start=1):
        if entry.reps > MAX_STORED_REPS:
            raise InvalidReps(entry.reps)
        volume = normalize_volume(calculate_set_volume(entry.weight, entry.reps))
        if volume > MAX_STORED_VOLUME:
            raise InvalidVolume(volume)
        rows.append(
            WorkoutSet(
                set_number=index,
                weight=entry.weight,
                reps=entry.reps,
                unit=entry.unit,
                volume=volume,
                notes=entry.notes,
            )
        )
    return total, rows


@router.get("", response_model=list[WorkoutRead])
async def list_workouts(
    db: AsyncSession = Depends(get_db),
    skip: int = 0,
    limit: int = 50,
    from_date: datetime | None = None,
    to_date: datetime | None = None,
    exercise_id: uuid.UUID | None = None,
):
    """List workout sessions (newest first), optionally filtered by date range and exercise."""
    stmt = session_query()
    if from_date:
        stmt = stmt.where(WorkoutSession.date >= from_date)
    if to_date:
        stmt = stmt.where(WorkoutSession.date <= to_date)
    if exercise_id:
        stmt = stmt.where(WorkoutSession.exercise_id == exercise_id)
    stmt = stmt.order_by(WorkoutSession.date.desc()).offset(skip).limit(limit)
    result = await db.execute(stmt)
    return list(result.scalars().all())


@router.post("", response_model=WorkoutRead, status_code=201)
async def create_workout(
    payload: WorkoutCreate,
    db: AsyncSession = Depends(get_db),
):
    """Log a session. total_volume is stored in the user's preferred unit."""
    exercise = await db.get(Exercise, payload.exercise_id)
    if not exercise:
        raise HTTPException(status_code=404, detail="Exercise not found")

    unit = await get_preferred_unit(db)
    total, sets = _build_sets(payload.sets, unit)
    session = WorkoutSession(
        exercise_id=exercise.id,
        date=payload.date or datetime.now(timezone.utc),
        notes=payload.notes,
        total_volume=total,
        unit=unit,
        sets=sets,
    )
    db.add(session)
    await db.flush()
    logger.info(
        "Created workout session {} for exercise {}: {} sets, total volume {} {}",
        session.id,
        exercise.id,
        len(sets),
        total,
        unit.value,
    )
    return await _get_session_or_404(db, session.id)


@router.get("/{workout_id}", response_model=WorkoutRead)
async def get_workout(
    workout_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
):
    """Get a workout session with its sets."""
    return await _get_session_or_404(db, workout_id)


@router.patch("/{workout_id}", response_model=WorkoutRead)
async def update_workout(
    workout_id: uuid.UUID,
    payload: WorkoutUpdate,
    db: AsyncSession = Depends(get_db),
):
    """Update date/notes; when sets are given they replace the old ones and the total is recomputed."""
    session = await _get_session_or_404(db, workout_id)
    data = payload.model_dump(exclude_unset=True, exclude={"sets"})
    if data.get("date") is None:
        data.pop("date", None)
    for k, v in data.items():
        setattr(session, k, v)

    if payload.sets is not None:
        # Total stays in the unit the session was recorded in
        total, sets = _build_sets(payload.sets, session.unit)
        session.sets = sets
        session.total_volume = total
        logger.info(
            "Replaced sets of workout session {}: {} sets, total volume {} {}",
            session.id,
            len(sets),
            total,
            session.unit.value,
        )
    await db.flush()
    return await _get_session_or_404(db, workout_id)


@router.delete("/{workout_id}", status_code=204)
async def delete_workout(
    workout_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
):
    """Delete a workout session and its sets."""
    session = await _get_session_or_404(db, workout_id)
    await db.delete(session)
    return None
