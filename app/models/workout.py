"""WorkoutSession and WorkoutSet models."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from decimal import Decimal

from sqlalchemy import DateTime, Enum, ForeignKey, Index, Integer, Numeric, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.enums import WeightUnit
from app.db.base import Base


def weight_unit_column_type() -> Enum:
    """Stores the unit's value ("kg"/"lb"), not the member name."""
    return Enum(
        WeightUnit,
        name="weight_unit",
        values_callable=lambda members: [m.value for m in members],
    )


class WorkoutSession(Base):
    """One exercise performed on a date. total_volume is in ``unit`` with two implied decimals."""

    __tablename__ = "workout_sessions"
    __table_args__ = (
        Index("ix_workout_sessions_date", "date"),
        Index("ix_workout_sessions_exercise_id_date", "exercise_id", "date"),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    exercise_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("exercises.id", ondelete="CASCADE"), nullable=False
    )
    date: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    total_volume: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False, default=0)
    unit: Mapped[WeightUnit] = mapped_column(weight_unit_column_type(), nullable=False, default=WeightUnit.KG)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc)
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    exercise: Mapped["Exercise"] = relationship("Exercise", back_populates="sessions")
    sets: Mapped[list["WorkoutSet"]] = relationship(
        "WorkoutSet",
        back_populates="session",
        cascade="all, delete-orphan",
        order_by="WorkoutSet.set_number",
    )


class WorkoutSet(Base):
    """One set: weight x reps in its own unit. volume is weight * reps, normalized."""

    __tablename__ = "workout_sets"
    __table_args__ = (Index("ix_workout_sets_session_id", "session_id"),)

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    session_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("workout_sessions.id", ondelete="CASCADE"), nullable=False
    )
    set_number: Mapped[int] = mapped_column(Integer, nullable=False)  # 1-based, input order
    weight: Mapped[Decimal] = mapped_column(Numeric(8, 2), nullable=False)
    reps: Mapped[int] = mapped_column(Integer, nullable=False)
    unit: Mapped[WeightUnit] = mapped_column(weight_unit_column_type(), nullable=False, default=WeightUnit.KG)
    volume: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False, default=0)
    notes: Mapped[str | None] = mapped_column(String(500), nullable=True)

    session: Mapped["WorkoutSession"] = relationship("WorkoutSession", back_populates="sets")
