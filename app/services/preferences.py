"""Singleton user preferences (preferred unit) lookup."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import get_settings
from app.core.constants import USER_PREFERENCES_ID
from app.core.enums import WeightUnit
from app.models.user_preferences import UserPreferences


async def get_or_create_preferences(db: AsyncSession) -> UserPreferences:
    """Return the preferences row, creating it with configured defaults on first use."""
    result = await db.execute(select(UserPreferences).where(UserPreferences.id == USER_PREFERENCES_ID))
    prefs = result.scalar_one_or_none()
    if prefs is None:
        prefs = UserPreferences(
            id=USER_PREFERENCES_ID,
            preferred_unit=get_settings().default_unit,
            dark_mode=False,
        )
        db.add(prefs)
        await db.flush()
    return prefs


async def get_preferred_unit(db: AsyncSession) -> WeightUnit:
    prefs = await get_or_create_preferences(db)
    return prefs.preferred_unit
