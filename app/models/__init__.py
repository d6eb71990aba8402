"""ORM models - import all so Base.metadata is complete for migrations."""

from app.models.exercise import Exercise
from app.models.user_preferences import UserPreferences
from app.models.workout import WorkoutSession, WorkoutSet

__all__ = [
    "Exercise",
    "UserPreferences",
    "WorkoutSession",
    "WorkoutSet",
]
