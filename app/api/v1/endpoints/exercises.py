"""Exercise CRUD endpoints."""

import uuid

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.session import get_db
from app.models.exercise import Exercise
from app.models.workout import WorkoutSession
from app.schemas.exercise import ExerciseCreate, ExerciseRead, ExerciseUpdate
from app.schemas.workout import WorkoutRead
from app.api.v1.endpoints.workouts import session_query

router = APIRouter()


async def _get_exercise_or_404(db: AsyncSession, exercise_id: uuid.UUID) -> Exercise:
    result = await db.execute(select(Exercise).where(Exercise.id == exercise_id))
    exercise = result.scalar_one_or_none()
    if not exercise:
        raise HTTPException(status_code=404, detail="Exercise not found")
    return exercise


@router.get("", response_model=list[ExerciseRead])
async def list_exercises(
    db: AsyncSession = Depends(get_db),
    skip: int = 0,
    limit: int = 100,
):
    """List exercises by name with optional pagination."""
    result = await db.execute(select(Exercise).order_by(Exercise.name).offset(skip).limit(limit))
    return list(result.scalars().all())


@router.post("", response_model=ExerciseRead, status_code=201)
async def create_exercise(
    payload: ExerciseCreate,
    db: AsyncSession = Depends(get_db),
):
    """Create a new exercise."""
    exercise = Exercise(**payload.model_dump())
    db.add(exercise)
    await db.flush()
    await db.refresh(exercise)
    return exercise


@router.get("/{exercise_id}", response_model=ExerciseRead)
async def get_exercise(
    exercise_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
):
    """Get a single exercise by id."""
    return await _get_exercise_or_404(db, exercise_id)


@router.patch("/{exercise_id}", response_model=ExerciseRead)
async def update_exercise(
    exercise_id: uuid.UUID,
    payload: ExerciseUpdate,
    db: AsyncSession = Depends(get_db),
):
    """Update an exercise (partial)."""
    exercise = await _get_exercise_or_404(db, exercise_id)
    for k, v in payload.model_dump(exclude_unset=True).items():
        setattr(exercise, k, v)
    await db.flush()
    await db.refresh(exercise)
    return exercise


@router.delete("/{exercise_id}", status_code=204)
async def delete_exercise(
    exercise_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
):
    """Delete an exercise together with its workout sessions."""
    exercise = await _get_exercise_or_404(db, exercise_id)
    await db.delete(exercise)
    return None


@router.get("/{exercise_id}/workouts", response_model=list[WorkoutRead])
async def list_exercise_workouts(
    exercise_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
):
    """Workout sessions logged for one exercise, newest first."""
    await _get_exercise_or_404(db, exercise_id)
    result = await db.execute(
        session_query()
        .where(WorkoutSession.exercise_id == exercise_id)
        .order_by(WorkoutSession.date.desc())
    )
    return list(result.scalars().all())
