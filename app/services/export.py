"""CSV export of workout sessions."""

from __future__ import annotations

import csv
import io
from collections.abc import Iterable
from typing import Any

from app.core.enums import WeightUnit
from app.services.volume import convert_volume, normalize_volume, parse_unit

CSV_COLUMNS = [
    "date",
    "exercise",
    "set_number",
    "weight",
    "reps",
    "unit",
    "volume",
    "session_total",
    "total_unit",
]


def _session_rows(session: Any, unit: WeightUnit) -> list[list[Any]]:
    exercise = getattr(session, "exercise", None)
    exercise_name = exercise.name if exercise is not None else ""
    day = session.date.date().isoformat() if hasattr(session.date, "date") else str(session.date)
    total = convert_volume(session.total_volume, session.unit, unit)
    sets = sorted(session.sets, key=lambda s: s.set_number)
    if not sets:
        return [[day, exercise_name, "", "", "", "", "", total, unit.value]]
    return [
        [
            day,
            exercise_name,
            s.set_number,
            float(s.weight),
            s.reps,
            parse_unit(s.unit).value,
            normalize_volume(s.volume),
            total,
            unit.value,
        ]
        for s in sets
    ]


def sessions_to_csv(sessions: Iterable[Any], unit: WeightUnit | str) -> str:
    """One row per set; session totals are re-expressed in ``unit``."""
    target = parse_unit(unit)
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_COLUMNS)
    for session in sessions:
        writer.writerows(_session_rows(session, target))
    return buffer.getvalue()
