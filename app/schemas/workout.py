"""WorkoutSession and WorkoutSet schemas.

Weights and reps may arrive as numbers or numeric strings (form posts); they
are parsed here, once, by the volume engine's boundary parsers.
"""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.core.constants import MAX_SETS_PER_SESSION, MAX_STORED_WEIGHT, WEIGHT_PRECISION
from app.core.enums import WeightUnit
from app.core.errors import InvalidWeight
from app.services.volume import normalize_volume, parse_reps, parse_unit, parse_weight, round_value


class ExerciseRef(BaseModel):
    """Minimal exercise info for embedding in session responses (id + name only)."""

    id: UUID
    name: str

    model_config = ConfigDict(from_attributes=True)


class WorkoutSetCreate(BaseModel):
    weight: float
    reps: int
    unit: WeightUnit | None = None  # falls back to the session's unit
    notes: str | None = Field(None, max_length=500)

    @field_validator("weight", mode="before")
    @classmethod
    def _parse_weight(cls, value: Any) -> float:
        # Stored as Numeric(8, 2): round here so volumes are computed from the stored weight
        weight = round_value(parse_weight(value), WEIGHT_PRECISION)
        if weight > MAX_STORED_WEIGHT:
            raise InvalidWeight(value)
        return weight

    @field_validator("reps", mode="before")
    @classmethod
    def _parse_reps(cls, value: Any) -> int:
        return parse_reps(value)

    @field_validator("unit", mode="before")
    @classmethod
    def _parse_unit(cls, value: Any) -> WeightUnit | None:
        return None if value is None else parse_unit(value)


class WorkoutSetRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
    set_number: int
    weight: float
    reps: int
    unit: WeightUnit
    volume: float
    notes: str | None = None

    @field_validator("volume", mode="before")
    @classmethod
    def _normalize_volume(cls, value: Any) -> float:
        return normalize_volume(value)


class WorkoutCreate(BaseModel):
    exercise_id: UUID
    date: datetime | None = None  # defaults to now
    notes: str | None = None
    sets: list[WorkoutSetCreate] = Field(..., min_length=1, max_length=MAX_SETS_PER_SESSION)


class WorkoutUpdate(BaseModel):
    date: datetime | None = None
    notes: str | None = None
    # When present, replaces every set and recomputes total_volume
    sets: list[WorkoutSetCreate] | None = Field(None, min_length=1, max_length=MAX_SETS_PER_SESSION)


class WorkoutRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
    exercise_id: UUID
    date: datetime
    notes: str | None = None
    total_volume: float
    unit: WeightUnit
    created_at: datetime | None = None
    updated_at: datetime | None = None
    exercise: ExerciseRef | None = None
    sets: list[WorkoutSetRead] = []

    @field_validator("total_volume", mode="before")
    @classmethod
    def _normalize_total(cls, value: Any) -> float:
        return normalize_volume(value)
