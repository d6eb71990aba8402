"""Volume statistics over a window of workout sessions (progress chart figures)."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, datetime, time, timezone
from typing import Any

from app.core.constants import STATS_CHANGE_PRECISION
from app.core.enums import WeightUnit
from app.services.volume import convert_volume, normalize_volume, parse_unit, round_value

SECONDS_PER_DAY = 24 * 60 * 60


@dataclass(frozen=True)
class VolumePoint:
    date: datetime
    volume: float


@dataclass(frozen=True)
class VolumeStats:
    """Sum / average / max / percent change of session volumes in one unit."""

    unit: WeightUnit
    total_volume: float = 0.0
    average_volume: float = 0.0
    max_volume: float = 0.0
    max_volume_date: datetime | None = None
    volume_change: float = 0.0  # percent, last session vs first
    days_trained: int = 0
    days_in_range: int = 0


def as_utc(value: date | datetime) -> datetime:
    """Dates become midnight UTC; naive datetimes are taken as UTC."""
    if not isinstance(value, datetime):
        value = datetime.combine(value, time.min)
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value


def volume_series(
    sessions: Iterable[Any],
    unit: WeightUnit | str,
    start: date | datetime | None = None,
    end: date | datetime | None = None,
) -> list[VolumePoint]:
    """(date, volume) points sorted by date, each volume expressed in ``unit``.

    Sessions need ``date``, ``total_volume`` and ``unit``. Bounds are inclusive.
    """
    target = parse_unit(unit)
    lower = as_utc(start) if start is not None else None
    upper = as_utc(end) if end is not None else None
    points = []
    for session in sorted(sessions, key=lambda s: as_utc(s.date)):
        when = as_utc(session.date)
        if lower is not None and when < lower:
            continue
        if upper is not None and when > upper:
            continue
        volume = normalize_volume(session.total_volume)
        if parse_unit(session.unit) != target:
            volume = convert_volume(volume, session.unit, target)
        points.append(VolumePoint(date=when, volume=volume))
    return points


def summarize_sessions(
    sessions: Iterable[Any],
    unit: WeightUnit | str,
    start: date | datetime | None = None,
    end: date | datetime | None = None,
) -> VolumeStats:
    """Statistics for the sessions falling inside ``[start, end]``.

    Days in range counts calendar days between the bounds (inclusive); missing
    bounds default to the first and last session in the window.
    """
    target = parse_unit(unit)
    points = volume_series(sessions, target, start, end)
    if not points:
        return VolumeStats(unit=target)

    volumes = [p.volume for p in points]
    total = sum(volumes)
    # first session reaching the max wins
    peak = points[0]
    for point in points[1:]:
        if point.volume > peak.volume:
            peak = point

    first, last = volumes[0], volumes[-1]
    change = 0.0 if first == 0 else (last - first) / first * 100

    range_start = as_utc(start) if start is not None else points[0].date
    range_end = as_utc(end) if end is not None else points[-1].date
    span = (range_end - range_start).total_seconds()
    days_in_range = math.ceil(span / SECONDS_PER_DAY) + 1

    return VolumeStats(
        unit=target,
        total_volume=normalize_volume(total),
        average_volume=normalize_volume(total / len(volumes)),
        max_volume=peak.volume,
        max_volume_date=peak.date,
        volume_change=round_value(change, STATS_CHANGE_PRECISION),
        days_trained=len({p.date.date() for p in points}),
        days_in_range=days_in_range,
    )
