"""Workout session endpoints: totals computed by the volume engine."""

import uuid

import pytest

API = "/api/v1"


async def _set_unit(client, unit):
    response = await client.put(f"{API}/preferences", json={"preferred_unit": unit})
    assert response.status_code == 200


async def test_create_computes_total_in_preferred_unit(client, exercise, kg_sets):
    response = await client.post(
        f"{API}/workouts",
        json={"exercise_id": exercise["id"], "date": "2024-04-01T10:00:00Z", "sets": kg_sets},
    )
    assert response.status_code == 201
    body = response.json()
    assert body["total_volume"] == 1650.0
    assert body["unit"] == "kg"
    assert body["exercise"]["name"] == "Bench Press"
    assert [s["set_number"] for s in body["sets"]] == [1, 2, 3]
    assert [s["volume"] for s in body["sets"]] == [500.0, 550.0, 600.0]


async def test_mixed_units_converted_to_preferred(client, exercise):
    await _set_unit(client, "kg")
    response = await client.post(
        f"{API}/workouts",
        json={"exercise_id": exercise["id"], "sets": [{"weight": 220.462, "reps": 1, "unit": "lb"}]},
    )
    assert response.status_code == 201
    body = response.json()
    assert body["total_volume"] == 100.0
    assert body["sets"][0]["unit"] == "lb"
    assert body["sets"][0]["volume"] == 220.46


async def test_set_without_unit_inherits_preferred(client, exercise):
    await _set_unit(client, "lb")
    response = await client.post(
        f"{API}/workouts",
        json={"exercise_id": exercise["id"], "sets": [{"weight": "135", "reps": "10"}]},
    )
    assert response.status_code == 201
    body = response.json()
    assert body["unit"] == "lb"
    assert body["total_volume"] == 1350.0
    assert body["sets"][0]["unit"] == "lb"


@pytest.mark.parametrize(
    "bad_set, error",
    [
        ({"weight": -1, "reps": 5, "unit": "kg"}, "InvalidWeight"),
        ({"weight": 5, "reps": -1, "unit": "kg"}, "InvalidReps"),
        ({"weight": 5, "reps": 2.5, "unit": "kg"}, "InvalidReps"),
        ({"weight": "heavy", "reps": 5, "unit": "kg"}, "InvalidWeight"),
        ({"weight": 5, "reps": 5, "unit": "stone"}, "InvalidUnit"),
    ],
)
async def test_invalid_set_is_400_and_nothing_saved(client, exercise, kg_sets, bad_set, error):
    response = await client.post(
        f"{API}/workouts",
        json={"exercise_id": exercise["id"], "sets": [kg_sets[0], bad_set, kg_sets[1]]},
    )
    assert response.status_code == 400
    body = response.json()
    assert body["status"] == "fail"
    assert body["error"] == error

    listing = await client.get(f"{API}/workouts")
    assert listing.json() == []


@pytest.mark.parametrize(
    "bad_set, error",
    [
        ({"weight": 10, "reps": "1" + "0" * 400, "unit": "kg"}, "InvalidReps"),
        ({"weight": 0, "reps": 3_000_000_000, "unit": "kg"}, "InvalidReps"),
        ({"weight": 1_000_000, "reps": 1, "unit": "kg"}, "InvalidWeight"),
        ({"weight": 999_999.99, "reps": 1000, "unit": "kg"}, "InvalidVolume"),
    ],
)
async def test_values_beyond_column_capacity_are_400(client, exercise, bad_set, error):
    response = await client.post(
        f"{API}/workouts", json={"exercise_id": exercise["id"], "sets": [bad_set]}
    )
    assert response.status_code == 400
    assert response.json()["error"] == error
    assert (await client.get(f"{API}/workouts")).json() == []


async def test_weight_rounded_before_volume(client, exercise):
    await _set_unit(client, "kg")
    response = await client.post(
        f"{API}/workouts",
        json={"exercise_id": exercise["id"], "sets": [{"weight": 100.125, "reps": 5, "unit": "kg"}]},
    )
    assert response.status_code == 201
    body = response.json()
    assert body["sets"][0]["weight"] == 100.13
    assert body["sets"][0]["volume"] == 500.65
    assert body["total_volume"] == 500.65


async def test_missing_fields_stay_422(client, exercise):
    response = await client.post(f"{API}/workouts", json={"exercise_id": exercise["id"]})
    assert response.status_code == 422


async def test_unknown_exercise_is_404(client, kg_sets):
    response = await client.post(
        f"{API}/workouts", json={"exercise_id": str(uuid.uuid4()), "sets": kg_sets}
    )
    assert response.status_code == 404


async def test_update_replaces_sets_and_recomputes(client, exercise, kg_sets):
    created = (
        await client.post(f"{API}/workouts", json={"exercise_id": exercise["id"], "sets": kg_sets})
    ).json()

    response = await client.patch(
        f"{API}/workouts/{created['id']}",
        json={"notes": "deload", "sets": [{"weight": 60, "reps": 10, "unit": "kg"}]},
    )
    assert response.status_code == 200
    body = response.json()
    assert body["notes"] == "deload"
    assert body["total_volume"] == 600.0
    assert len(body["sets"]) == 1

    fetched = (await client.get(f"{API}/workouts/{created['id']}")).json()
    assert fetched["total_volume"] == 600.0
    assert len(fetched["sets"]) == 1


async def test_update_keeps_session_unit(client, exercise):
    await _set_unit(client, "kg")
    created = (
        await client.post(
            f"{API}/workouts",
            json={"exercise_id": exercise["id"], "sets": [{"weight": 100, "reps": 1}]},
        )
    ).json()
    await _set_unit(client, "lb")

    response = await client.patch(
        f"{API}/workouts/{created['id']}",
        json={"sets": [{"weight": 100, "reps": 2}]},
    )
    body = response.json()
    assert body["unit"] == "kg"
    assert body["total_volume"] == 200.0
    assert body["sets"][0]["unit"] == "kg"


async def test_invalid_update_leaves_session_untouched(client, exercise, kg_sets):
    created = (
        await client.post(f"{API}/workouts", json={"exercise_id": exercise["id"], "sets": kg_sets})
    ).json()
    response = await client.patch(
        f"{API}/workouts/{created['id']}",
        json={"sets": [{"weight": 10, "reps": 1, "unit": "kg"}, {"weight": -10, "reps": 1, "unit": "kg"}]},
    )
    assert response.status_code == 400

    fetched = (await client.get(f"{API}/workouts/{created['id']}")).json()
    assert fetched["total_volume"] == 1650.0
    assert len(fetched["sets"]) == 3


async def test_list_filters_by_date_and_exercise(client, exercise, kg_sets):
    other = (await client.post(f"{API}/exercises", json={"name": "Deadlift"})).json()
    for day, ex in [("2024-01-01", exercise), ("2024-02-01", exercise), ("2024-02-02", other)]:
        await client.post(
            f"{API}/workouts",
            json={"exercise_id": ex["id"], "date": f"{day}T08:00:00Z", "sets": kg_sets},
        )

    everything = (await client.get(f"{API}/workouts")).json()
    assert len(everything) == 3
    assert everything[0]["exercise_id"] == other["id"]  # newest first

    february = (await client.get(f"{API}/workouts", params={"from_date": "2024-01-15T00:00:00"})).json()
    assert len(february) == 2

    bench = (await client.get(f"{API}/exercises/{exercise['id']}/workouts")).json()
    assert len(bench) == 2


async def test_delete(client, exercise, kg_sets):
    created = (
        await client.post(f"{API}/workouts", json={"exercise_id": exercise["id"], "sets": kg_sets})
    ).json()
    assert (await client.delete(f"{API}/workouts/{created['id']}")).status_code == 204
    assert (await client.get(f"{API}/workouts/{created['id']}")).status_code == 404
