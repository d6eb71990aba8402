"""User preferences (preferred unit for stored totals)."""

from fastapi import APIRouter, Depends
from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.session import get_db
from app.schemas.preferences import PreferencesRead, PreferencesUpdate
from app.services.preferences import get_or_create_preferences

router = APIRouter()


@router.get("", response_model=PreferencesRead)
async def get_preferences(db: AsyncSession = Depends(get_db)):
    """Current preferences (created with defaults on first access)."""
    return await get_or_create_preferences(db)


@router.put("", response_model=PreferencesRead)
async def update_preferences(
    payload: PreferencesUpdate,
    db: AsyncSession = Depends(get_db),
):
    """Change preferred unit / dark mode. Existing sessions keep the unit they were stored in."""
    prefs = await get_or_create_preferences(db)
    for k, v in payload.model_dump(exclude_unset=True, exclude_none=True).items():
        setattr(prefs, k, v)
    await db.flush()
    await db.refresh(prefs)
    logger.info("Preferences updated: unit={}, dark_mode={}", prefs.preferred_unit.value, prefs.dark_mode)
    return prefs
