"""Exercise schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ExerciseBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = Field(None, max_length=1000)


class ExerciseCreate(ExerciseBase):
    pass


class ExerciseUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = Field(None, max_length=1000)

    @field_validator("name")
    @classmethod
    def _name_not_null(cls, value: str | None) -> str:
        # name may be omitted, but the column is NOT NULL
        if value is None:
            raise ValueError("name cannot be null")
        return value


class ExerciseRead(ExerciseBase):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
    created_at: datetime | None = None
