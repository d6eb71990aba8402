"""Schemas for the volume calculator and statistics endpoints."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from app.core.enums import RoundingMethod, WeightUnit
from app.schemas.workout import WorkoutSetCreate


class VolumeCalculateRequest(BaseModel):
    """Unsaved sets being edited; sets without a unit are taken as target_unit."""

    sets: list[WorkoutSetCreate] = Field(default_factory=list)
    target_unit: WeightUnit | None = None  # defaults to the preferred unit
    precision: int | None = Field(None, ge=0, le=6)
    rounding_method: RoundingMethod | None = None


class VolumeCalculateResponse(BaseModel):
    total_volume: float
    unit: WeightUnit
    set_volumes: list[float]


class WeightConversionResponse(BaseModel):
    weight: float
    from_unit: WeightUnit
    to_unit: WeightUnit
    converted: float


class VolumePointRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    date: datetime
    volume: float


class VolumeStatsRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    unit: WeightUnit
    total_volume: float
    average_volume: float
    max_volume: float
    max_volume_date: datetime | None = None
    volume_change: float
    days_trained: int
    days_in_range: int


class VolumeStatsResponse(BaseModel):
    stats: VolumeStatsRead
    series: list[VolumePointRead]
