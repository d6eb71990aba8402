"""Volume engine: unit conversion, set validation, volume aggregation and rounding.

Every volume figure the API stores, returns or exports goes through this module,
so a total shown while editing sets is the same number that gets persisted.

All functions are pure. Invalid input raises one of the errors in
``app.core.errors`` immediately; nothing is clamped or defaulted.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from decimal import ROUND_CEILING, ROUND_FLOOR, ROUND_HALF_UP, Decimal
from typing import Any

from app.core.constants import DEFAULT_VOLUME_PRECISION, LB_PER_KG
from app.core.enums import RoundingMethod, WeightUnit
from app.core.errors import InvalidReps, InvalidUnit, InvalidVolume, InvalidWeight

_DECIMAL_ROUNDING = {
    RoundingMethod.FLOOR: ROUND_FLOOR,
    RoundingMethod.CEIL: ROUND_CEILING,
    RoundingMethod.ROUND: ROUND_HALF_UP,  # half away from zero
}


@dataclass(frozen=True)
class VolumeOptions:
    """Decimal places and rounding method applied to a volume figure."""

    precision: int = DEFAULT_VOLUME_PRECISION
    rounding_method: RoundingMethod = RoundingMethod.ROUND

    def __post_init__(self) -> None:
        if isinstance(self.precision, bool) or not isinstance(self.precision, int) or self.precision < 0:
            raise ValueError(f"precision must be a non-negative integer, got {self.precision!r}")
        object.__setattr__(self, "rounding_method", RoundingMethod(self.rounding_method))


DEFAULT_OPTIONS = VolumeOptions()


@dataclass(frozen=True)
class SetEntry:
    """One logged set as the engine sees it."""

    weight: float
    reps: int
    unit: WeightUnit = WeightUnit.KG
    notes: str | None = None


# ---- Boundary parsing ----


def parse_unit(value: Any) -> WeightUnit:
    """Accept a WeightUnit or its string value ("kg" / "lb", any case)."""
    if isinstance(value, WeightUnit):
        return value
    if isinstance(value, str):
        try:
            return WeightUnit(value.strip().lower())
        except ValueError:
            pass
    raise InvalidUnit(value)


def parse_weight(value: Any) -> float:
    """Parse a weight from a number or numeric string. Must be finite and >= 0."""
    if value is None or isinstance(value, bool):
        raise InvalidWeight(value)
    try:
        if isinstance(value, str):
            weight = float(value.strip())
        elif isinstance(value, (int, float, Decimal)):
            weight = float(value)
        else:
            raise InvalidWeight(value)
    except (ValueError, OverflowError):
        raise InvalidWeight(value) from None
    if not math.isfinite(weight) or weight < 0:
        raise InvalidWeight(value)
    return weight


def parse_reps(value: Any) -> int:
    """Parse a rep count from an int, an integral float or a numeric string.

    Fractional counts ("2.5", 2.5) are rejected, "5" and 5.0 are accepted.
    Counts too large to multiply as a float are rejected too.
    """
    if value is None or isinstance(value, bool):
        raise InvalidReps(value)
    if isinstance(value, str):
        text = value.strip()
        try:
            value = int(text)
        except ValueError:
            try:
                value = float(text)
            except ValueError:
                raise InvalidReps(value) from None
    if isinstance(value, (float, Decimal)):
        if not math.isfinite(value) or value != int(value):
            raise InvalidReps(value)
        value = int(value)
    if not isinstance(value, int) or value < 0:
        raise InvalidReps(value)
    try:
        float(value)
    except OverflowError:
        raise InvalidReps(value) from None
    return value


def _field(set_: Any, name: str) -> Any:
    if isinstance(set_, Mapping):
        return set_.get(name)
    return getattr(set_, name, None)


# ---- Engine operations ----


def convert_weight(weight: float, from_unit: WeightUnit | str, to_unit: WeightUnit | str) -> float:
    """Convert a weight between kg and lb.

    Same unit returns the input untouched. No range checks: negative or
    non-finite weights are converted arithmetically like any other number.
    """
    source = parse_unit(from_unit)
    target = parse_unit(to_unit)
    if source == target:
        return weight
    if source is WeightUnit.KG:
        return weight * LB_PER_KG
    return weight / LB_PER_KG


def validate_set(set_: Any) -> None:
    """Raise InvalidWeight / InvalidReps if the set's weight or reps are unusable.

    ``set_`` is a mapping or any object with ``weight`` and ``reps`` attributes.
    """
    parse_weight(_field(set_, "weight"))
    parse_reps(_field(set_, "reps"))


def calculate_set_volume(weight: float | str, reps: int | str) -> float:
    """Volume of a single set (weight x reps) after validation."""
    validate_set({"weight": weight, "reps": reps})
    volume = parse_weight(weight) * float(parse_reps(reps))
    if not math.isfinite(volume):
        raise InvalidVolume(volume)
    return volume


def _converted_set_volume(set_: Any, target: WeightUnit) -> float:
    validate_set(set_)
    weight = convert_weight(parse_weight(_field(set_, "weight")), _field(set_, "unit"), target)
    # kg near float max overflows once expressed in lb
    if not math.isfinite(weight):
        raise InvalidVolume(weight)
    return calculate_set_volume(weight, _field(set_, "reps"))


def set_volumes(
    sets: Iterable[Any],
    target_unit: WeightUnit | str,
    options: VolumeOptions | None = None,
) -> list[float]:
    """Normalized volume of each set in ``target_unit``, in input order."""
    target = parse_unit(target_unit)
    volumes = []
    for set_ in sets:
        volumes.append(normalize_volume(_converted_set_volume(set_, target), options))
    return volumes


def calculate_total_volume(
    sets: Iterable[Any],
    target_unit: WeightUnit | str,
    options: VolumeOptions | None = None,
) -> float:
    """Sum of weight x reps over ``sets`` with every weight converted to ``target_unit``.

    Sets are summed in input order. The first invalid set aborts the whole
    calculation; the sum is normalized once at the end.
    """
    target = parse_unit(target_unit)
    total = 0.0
    for set_ in sets:
        total += _converted_set_volume(set_, target)
    return normalize_volume(total, options)


def round_value(value: float, precision: int, method: RoundingMethod | str = RoundingMethod.ROUND) -> float:
    """roundFn(value * 10**precision) / 10**precision, scaled in decimal.

    Works on the float's shortest repr so 1.005 is treated as 1.005 and not
    as 1.00499999... Negative zero comes back as 0.0.
    """
    scaled = Decimal(repr(float(value))).scaleb(precision)
    rounded = scaled.to_integral_value(rounding=_DECIMAL_ROUNDING[RoundingMethod(method)])
    return float(rounded.scaleb(-precision)) + 0.0


def normalize_volume(volume: float | str, options: VolumeOptions | None = None) -> float:
    """Coerce and round a volume figure to the configured precision."""
    options = options or DEFAULT_OPTIONS
    if volume is None or isinstance(volume, bool):
        raise InvalidVolume(volume)
    try:
        if isinstance(volume, str):
            value = float(volume.strip())
        elif isinstance(volume, (int, float, Decimal)):
            value = float(volume)
        else:
            raise InvalidVolume(volume)
    except (ValueError, OverflowError):
        raise InvalidVolume(volume) from None
    if not math.isfinite(value) or value < 0:
        raise InvalidVolume(volume)
    return round_value(value, options.precision, options.rounding_method)


def convert_volume(
    volume: float | str,
    from_unit: WeightUnit | str,
    to_unit: WeightUnit | str,
    options: VolumeOptions | None = None,
) -> float:
    """Re-express a stored volume in another unit (volume is linear in weight)."""
    normalized = normalize_volume(volume, options)
    return normalize_volume(convert_weight(normalized, from_unit, to_unit), options)
