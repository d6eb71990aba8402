"""Volume calculator tools: live totals for unsaved sets, weight conversion (no persistence)."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import get_settings
from app.core.enums import WeightUnit
from app.db.session import get_db
from app.schemas.volume import (
    VolumeCalculateRequest,
    VolumeCalculateResponse,
    WeightConversionResponse,
)
from app.services.preferences import get_preferred_unit
from app.services.volume import (
    SetEntry,
    VolumeOptions,
    calculate_total_volume,
    convert_weight,
    parse_unit,
    parse_weight,
    round_value,
    set_volumes,
)

router = APIRouter()


@router.post("/calculate", response_model=VolumeCalculateResponse)
async def calculate_volume(
    payload: VolumeCalculateRequest,
    db: AsyncSession = Depends(get_db),
):
    """
    Running total for sets still being edited, computed exactly like the stored total.
    Sets without a unit are taken to be in the target unit.
    """
    settings = get_settings()
    unit = payload.target_unit or await get_preferred_unit(db)
    options = VolumeOptions(
        precision=payload.precision if payload.precision is not None else settings.volume_precision,
        rounding_method=payload.rounding_method or settings.volume_rounding,
    )
    entries = [SetEntry(weight=s.weight, reps=s.reps, unit=s.unit or unit) for s in payload.sets]
    return VolumeCalculateResponse(
        total_volume=calculate_total_volume(entries, unit, options),
        unit=unit,
        set_volumes=set_volumes(entries, unit, options),
    )


@router.get("/convert", response_model=WeightConversionResponse)
async def convert(
    weight: str,
    from_unit: str = WeightUnit.KG.value,
    to_unit: str = WeightUnit.LB.value,
):
    """Convert a weight between kg and lb (rounded for display)."""
    value = parse_weight(weight)
    source, target = parse_unit(from_unit), parse_unit(to_unit)
    converted = convert_weight(value, source, target)
    return WeightConversionResponse(
        weight=value,
        from_unit=source,
        to_unit=target,
        converted=round_value(converted, get_settings().volume_precision),
    )
