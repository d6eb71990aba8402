"""CSV export rendering."""

import csv
import io
from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal

from app.core.enums import WeightUnit
from app.services.export import CSV_COLUMNS, sessions_to_csv


@dataclass
class Exercise:
    name: str


@dataclass
class WorkoutSet:
    set_number: int
    weight: Decimal
    reps: int
    unit: WeightUnit
    volume: Decimal


@dataclass
class Session:
    date: datetime
    total_volume: Decimal
    unit: WeightUnit
    exercise: Exercise
    sets: list = field(default_factory=list)


def _rows(text):
    return list(csv.reader(io.StringIO(text)))


def test_header_and_rows():
    session = Session(
        date=datetime(2024, 5, 1, 9, tzinfo=timezone.utc),
        total_volume=Decimal("1050.00"),
        unit=WeightUnit.KG,
        exercise=Exercise("Squat"),
        sets=[
            WorkoutSet(2, Decimal("110.00"), 5, WeightUnit.KG, Decimal("550.00")),
            WorkoutSet(1, Decimal("100.00"), 5, WeightUnit.KG, Decimal("500.00")),
        ],
    )
    rows = _rows(sessions_to_csv([session], "kg"))
    assert rows[0] == CSV_COLUMNS
    assert rows[1] == ["2024-05-01", "Squat", "1", "100.0", "5", "kg", "500.0", "1050.0", "kg"]
    assert rows[2][2] == "2"
    assert len(rows) == 3


def test_totals_converted_to_requested_unit():
    session = Session(
        date=datetime(2024, 5, 2),
        total_volume=Decimal("100.00"),
        unit=WeightUnit.KG,
        exercise=Exercise("Row"),
        sets=[WorkoutSet(1, Decimal("100.00"), 1, WeightUnit.KG, Decimal("100.00"))],
    )
    rows = _rows(sessions_to_csv([session], WeightUnit.LB))
    assert rows[1][7] == "220.46"
    assert rows[1][8] == "lb"


def test_session_without_sets_still_listed():
    session = Session(datetime(2024, 5, 3), Decimal("0"), WeightUnit.KG, Exercise("Plank"))
    rows = _rows(sessions_to_csv([session], "kg"))
    assert rows[1][:3] == ["2024-05-03", "Plank", ""]
    assert rows[1][7] == "0.0"


def test_no_sessions_only_header():
    assert _rows(sessions_to_csv([], "kg")) == [CSV_COLUMNS]
