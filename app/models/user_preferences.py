"""UserPreferences model - singleton row holding the unit totals are stored in."""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, Integer
from sqlalchemy.orm import Mapped, mapped_column

from app.core.enums import WeightUnit
from app.db.base import Base
from app.models.workout import weight_unit_column_type


class UserPreferences(Base):
    """Preferred unit and display settings.

    Singleton pattern: single row with id=USER_PREFERENCES_ID (no auth yet).
    """

    __tablename__ = "user_preferences"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    preferred_unit: Mapped[WeightUnit] = mapped_column(
        weight_unit_column_type(), nullable=False, default=WeightUnit.KG
    )
    dark_mode: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )
