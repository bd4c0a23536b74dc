"""HTTP tests for the list and CRUD endpoints."""
import pytest


async def create_workouts(client, count: int) -> list[dict]:
    created = []
    for i in range(1, count + 1):
        response = await client.post("/workouts", json={"name": f"Workout {i}", "active": i != 3})
        assert response.status_code == 201
        created.append(response.json())
    return created


EXERCISE = {
    "name": "Archer Pull Up",
    "push_or_pull": "pull",
    "dynamic_or_static": "dynamic",
    "straight_or_bent": "bent",
    "upper_or_lower": "upper",
    "compound_or_isolation": "compound",
    "grip": "pronated",
    "grip_width": "wide",
}


class TestHealth:

    @pytest.mark.asyncio
    async def test_health_and_request_id(self, client):
        response = await client.get("/health", headers={"X-Request-ID": "abc-123"})

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
        assert response.headers["X-Request-ID"] == "abc-123"

    @pytest.mark.asyncio
    async def test_request_id_generated(self, client):
        response = await client.get("/health")

        assert response.headers.get("X-Request-ID")


class TestWorkoutPages:

    @pytest.mark.asyncio
    async def test_walk_forward_and_back(self, client):
        await create_workouts(client, 5)

        page1 = (await client.get("/workouts", params={"limit": 2})).json()
        assert [w["id"] for w in page1["items"]] == [1, 2]
        assert page1["next_cursor"] == 2
        assert page1["prev_cursor"] is None
        assert page1["has_next"] is True
        assert page1["has_previous"] is False

        page2 = (await client.get("/workouts", params={"limit": 2, "cursor": page1["next_cursor"]})).json()
        assert [w["id"] for w in page2["items"]] == [3, 4]
        assert page2["prev_cursor"] == 3

        back = (
            await client.get(
                "/workouts",
                params={"limit": 2, "cursor": page2["prev_cursor"], "direction": "backward"},
            )
        ).json()
        assert back["items"] == page1["items"]
        assert back["has_previous"] is False

    @pytest.mark.asyncio
    async def test_filter_by_active(self, client):
        await create_workouts(client, 4)

        response = await client.get("/workouts", params={"active": "false"})

        assert [w["name"] for w in response.json()["items"]] == ["Workout 3"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("params", [{"limit": 0}, {"limit": 101}, {"cursor": -1}, {"direction": "sideways"}])
    async def test_invalid_page_params(self, client, params):
        response = await client.get("/workouts", params=params)

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_update_and_delete(self, client):
        workout = (await create_workouts(client, 1))[0]

        response = await client.put(f"/workouts/{workout['id']}", json={"description": "Rings"})
        assert response.status_code == 200
        assert response.json()["description"] == "Rings"

        assert (await client.delete(f"/workouts/{workout['id']}")).status_code == 204

        missing = await client.get(f"/workouts/{workout['id']}")
        assert missing.status_code == 404
        assert missing.json()["errors"][0]["code"] == "NF_WORKOUT_001"

    @pytest.mark.asyncio
    async def test_clearing_required_field_is_rejected(self, client):
        workout = (await create_workouts(client, 1))[0]

        response = await client.put(f"/workouts/{workout['id']}", json={"name": None})

        assert response.status_code == 400
        assert response.json()["errors"][0]["code"] == "VAL_NAME_001"


class TestExerciseEndpoints:

    @pytest.mark.asyncio
    async def test_create_and_filter(self, client):
        assert (await client.post("/exercises", json=EXERCISE)).status_code == 201
        other = {**EXERCISE, "name": "Pseudo Planche Push Up", "push_or_pull": "push", "grip": "floor"}
        assert (await client.post("/exercises", json=other)).status_code == 201

        pulls = (await client.get("/exercises", params={"push_or_pull": "pull"})).json()
        both = (await client.get("/exercises", params=[("grip", "floor"), ("grip", "pronated")])).json()
        by_name = (await client.get("/exercises", params={"name": "planche"})).json()

        assert [e["name"] for e in pulls["items"]] == ["Archer Pull Up"]
        assert len(both["items"]) == 2
        assert [e["name"] for e in by_name["items"]] == ["Pseudo Planche Push Up"]

    @pytest.mark.asyncio
    async def test_unknown_enum_value_rejected(self, client):
        response = await client.get("/exercises", params={"grip": "sideways"})

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_duplicate_name_conflict(self, client):
        await client.post("/exercises", json=EXERCISE)

        response = await client.post("/exercises", json=EXERCISE)

        assert response.status_code == 409
        assert response.json()["errors"][0]["code"] == "CF_EXERCISE_001"

    @pytest.mark.asyncio
    async def test_update_exercise(self, client):
        created = (await client.post("/exercises", json=EXERCISE)).json()

        response = await client.put(f"/exercises/{created['id']}", json={"grip_width": "narrow"})

        assert response.status_code == 200
        assert response.json()["grip_width"] == "narrow"
        assert response.json()["grip"] == "pronated"


class TestLogGroupEndpoints:

    @pytest.mark.asyncio
    async def test_log_sets_for_a_day(self, client):
        group = (await client.post("/log-groups", json={"date": "2024-06-03", "notes": "felt strong"})).json()

        for set_number in (1, 2):
            response = await client.post(
                f"/log-groups/{group['id']}/logs",
                json={"set_number": set_number, "rep_number_or_seconds": 6, "weight": 10},
            )
            assert response.status_code == 201

        logs = (await client.get(f"/log-groups/{group['id']}/logs")).json()
        assert [log["set_number"] for log in logs] == [1, 2]

        assert (await client.delete(f"/log-groups/{group['id']}")).status_code == 204
        assert (await client.get(f"/log-groups/{group['id']}/logs")).status_code == 404

    @pytest.mark.asyncio
    async def test_date_range_filter(self, client):
        for day in ("2024-06-01", "2024-06-02", "2024-06-03"):
            await client.post("/log-groups", json={"date": day})

        response = await client.get("/log-groups", params={"date_from": "2024-06-02", "limit": 1})
        body = response.json()

        assert [g["date"] for g in body["items"]] == ["2024-06-02"]
        assert body["has_next"] is True

    @pytest.mark.asyncio
    async def test_inverted_date_range(self, client):
        response = await client.get(
            "/log-groups", params={"date_from": "2024-06-05", "date_to": "2024-06-01"}
        )

        assert response.status_code == 400
        assert response.json()["errors"][0]["code"] == "VAL_DATE_RANGE_001"


class TestWorkoutExerciseEndpoints:

    @pytest.mark.asyncio
    async def test_prescribe_and_list(self, client):
        workout = (await create_workouts(client, 1))[0]
        url = f"/workouts/{workout['id']}/exercises"

        for code, name in (("B1", "Dip"), ("A1", "Pull Up")):
            response = await client.post(
                url,
                json={
                    "name": name,
                    "code": code,
                    "sets_target": 4,
                    "reps_or_seconds_target": 6,
                    "equipments": ["dip_bar"] if code == "B1" else ["pull_up_bar"],
                    "bands": ["green"],
                },
            )
            assert response.status_code == 201

        listed = (await client.get(url)).json()

        assert [e["code"] for e in listed] == ["A1", "B1"]
        assert listed[0]["equipments"] == ["pull_up_bar"]
        assert listed[1]["bands"] == ["green"]

    @pytest.mark.asyncio
    async def test_update_and_delete(self, client):
        workout = (await create_workouts(client, 1))[0]
        url = f"/workouts/{workout['id']}/exercises"
        created = (
            await client.post(url, json={"name": "Row", "code": "A1", "sets_target": 3, "reps_or_seconds_target": 10})
        ).json()

        updated = await client.put(f"{url}/{created['id']}", json={"tempo": "2011", "emom": True})
        assert updated.status_code == 200
        assert (updated.json()["tempo"], updated.json()["emom"]) == ("2011", True)

        assert (await client.delete(f"{url}/{created['id']}")).status_code == 204
        missing = await client.get(f"{url}/{created['id']}")
        assert missing.status_code == 404
        assert missing.json()["errors"][0]["code"] == "NF_WORKOUT_EXERCISE_001"

    @pytest.mark.asyncio
    async def test_unknown_equipment_rejected(self, client):
        workout = (await create_workouts(client, 1))[0]

        response = await client.post(
            f"/workouts/{workout['id']}/exercises",
            json={"name": "Row", "code": "A1", "sets_target": 3, "reps_or_seconds_target": 10, "equipments": ["rope"]},
        )

        assert response.status_code == 422


class TestLoggedSetEndpoints:

    @pytest.mark.asyncio
    async def test_single_log_get_and_delete(self, client):
        group = (await client.post("/log-groups", json={"date": "2024-06-03"})).json()
        log = (
            await client.post(
                f"/log-groups/{group['id']}/logs", json={"set_number": 1, "rep_number_or_seconds": 5}
            )
        ).json()
        url = f"/log-groups/{group['id']}/logs/{log['id']}"

        assert (await client.get(url)).json()["set_number"] == 1
        assert (await client.delete(url)).status_code == 204

        missing = await client.get(url)
        assert missing.status_code == 404
        assert missing.json()["errors"][0]["code"] == "NF_WORKOUT_LOG_001"

    @pytest.mark.asyncio
    async def test_workout_with_logged_sets_cannot_be_deleted(self, client):
        workout = (await create_workouts(client, 1))[0]
        group = (await client.post("/log-groups", json={"date": "2024-06-03"})).json()
        await client.post(
            f"/log-groups/{group['id']}/logs",
            json={"workout_id": workout["id"], "set_number": 1, "rep_number_or_seconds": 5},
        )

        response = await client.delete(f"/workouts/{workout['id']}")

        assert response.status_code == 422
        assert response.json()["errors"][0]["code"] == "BR_WORKOUT_001"
        assert (await client.get(f"/workouts/{workout['id']}")).status_code == 200
