"""User preference schemas."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from app.core.enums import WeightUnit
from app.services.volume import parse_unit


class PreferencesUpdate(BaseModel):
    preferred_unit: WeightUnit | None = None
    dark_mode: bool | None = None

    @field_validator("preferred_unit", mode="before")
    @classmethod
    def _parse_unit(cls, value: Any) -> WeightUnit | None:
        return None if value is None else parse_unit(value)


class PreferencesRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    preferred_unit: WeightUnit
    dark_mode: bool
    updated_at: datetime | None = None
