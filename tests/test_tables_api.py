"""Tests for the table service endpoints (/v1/tables/{table})."""

from backend import settings

from conftest import OTHER_USER_ID, TEST_USER_ID


def _insert(api, headers, table, values, user_id=TEST_USER_ID):
    response = api.post(f"/v1/tables/{table}", json={"values": values}, headers=headers(user_id))
    assert response.status_code == 201, response.text
    return response.json()["data"][0]


class TestAuth:
    def test_health_needs_no_credentials(self, api):
        response = api.get("/health")
        assert response.status_code == 200
        assert response.json() == {"ok": True}

    def test_missing_token_is_rejected(self, api):
        response = api.get("/v1/tables/goals", headers={"X-User-Id": TEST_USER_ID})
        assert response.status_code == 401

    def test_wrong_token_is_rejected(self, api):
        response = api.get(
            "/v1/tables/goals",
            headers={"X-User-Id": TEST_USER_ID, "X-Backend-Token": "nope"},
        )
        assert response.status_code == 401

    def test_missing_user_is_rejected(self, api, headers):
        response = api.get("/v1/tables/goals", headers={"X-Backend-Token": headers()["X-Backend-Token"]})
        assert response.status_code == 401

    def test_allow_list_blocks_other_accounts(self, api, headers, monkeypatch):
        monkeypatch.setenv("ALLOWED_EMAILS", TEST_USER_ID)
        settings.reset_settings()
        assert api.get("/v1/tables/goals", headers=headers()).status_code == 200
        assert api.get("/v1/tables/goals", headers=headers(OTHER_USER_ID)).status_code == 403


class TestInsert:
    def test_mood_entry_is_stored_for_caller(self, api, headers):
        row = _insert(api, headers, "mood_entries", {"mood_score": 7, "emotions": ["Calm", "Hopeful"]})
        assert row["mood_score"] == 7
        assert row["emotions"] == ["Calm", "Hopeful"]
        assert row["notes"] is None
        assert row["user_id"] == TEST_USER_ID
        assert row["id"]
        assert row["created_at"]

    def test_mood_score_out_of_range(self, api, headers):
        for score in (0, 11):
            response = api.post(
                "/v1/tables/mood_entries",
                json={"values": {"mood_score": score}},
                headers=headers(),
            )
            assert response.status_code == 422

    def test_unknown_table(self, api, headers):
        response = api.post("/v1/tables/habits", json={"values": {"name": "x"}}, headers=headers())
        assert response.status_code == 404

    def test_unknown_column(self, api, headers):
        response = api.post(
            "/v1/tables/goals",
            json={"values": {"title": "Walk", "priority": "high"}},
            headers=headers(),
        )
        assert response.status_code == 422

    def test_rows_for_another_user_are_forbidden(self, api, headers):
        response = api.post(
            "/v1/tables/goals",
            json={"values": {"title": "Walk", "user_id": OTHER_USER_ID}},
            headers=headers(),
        )
        assert response.status_code == 403

    def test_blank_journal_title_is_rejected(self, api, headers):
        response = api.post(
            "/v1/tables/journal_entries",
            json={"values": {"title": "   ", "content": "Today was fine."}},
            headers=headers(),
        )
        assert response.status_code == 422

    def test_new_goal_defaults(self, api, headers):
        row = _insert(api, headers, "goals", {"title": "Meditate 10 min"})
        assert row["is_completed"] is False
        assert row["completed_at"] is None
        assert row["target_date"] is None
        assert row["updated_at"] == row["created_at"]


class TestSelect:
    def test_order_and_limit(self, api, headers):
        for title in ("first", "second", "third"):
            _insert(api, headers, "goals", {"title": title})
        response = api.get(
            "/v1/tables/goals",
            params={"order": "created_at", "ascending": "false", "limit": 2},
            headers=headers(),
        )
        assert response.status_code == 200
        assert [row["title"] for row in response.json()["data"]] == ["third", "second"]

    def test_rows_are_scoped_to_caller(self, api, headers):
        _insert(api, headers, "goals", {"title": "mine"})
        _insert(api, headers, "goals", {"title": "theirs"}, user_id=OTHER_USER_ID)
        response = api.get("/v1/tables/goals", headers=headers())
        assert [row["title"] for row in response.json()["data"]] == ["mine"]

    def test_filtering_by_another_user_is_forbidden(self, api, headers):
        response = api.get("/v1/tables/goals", params={"user_id": OTHER_USER_ID}, headers=headers())
        assert response.status_code == 403

    def test_column_projection(self, api, headers):
        _insert(api, headers, "journal_entries", {"title": "Note", "content": "Body", "tags": ["Work"]})
        response = api.get("/v1/tables/journal_entries", params={"columns": "id,title"}, headers=headers())
        row = response.json()["data"][0]
        assert set(row) == {"id", "title"}

    def test_unknown_order_column(self, api, headers):
        response = api.get("/v1/tables/goals", params={"order": "priority"}, headers=headers())
        assert response.status_code == 400

    def test_boolean_filter(self, api, headers):
        done = _insert(api, headers, "goals", {"title": "done"})
        _insert(api, headers, "goals", {"title": "open"})
        api.patch(
            "/v1/tables/goals",
            params={"id": done["id"]},
            json={"values": {"is_completed": True}},
            headers=headers(),
        )
        response = api.get("/v1/tables/goals", params={"is_completed": "false"}, headers=headers())
        assert [row["title"] for row in response.json()["data"]] == ["open"]


class TestUpdate:
    def test_toggle_goal_completion(self, api, headers):
        goal = _insert(api, headers, "goals", {"title": "Journal daily"})
        completed_at = "2026-10-19T08:30:00.123456+00:00"

        response = api.patch(
            "/v1/tables/goals",
            params={"id": goal["id"]},
            json={"values": {"is_completed": True, "completed_at": completed_at}},
            headers=headers(),
        )
        assert response.status_code == 200
        row = response.json()["data"][0]
        assert row["is_completed"] is True
        assert row["completed_at"] == completed_at
        assert row["updated_at"] >= goal["updated_at"]

        response = api.patch(
            "/v1/tables/goals",
            params={"id": goal["id"]},
            json={"values": {"is_completed": False, "completed_at": None}},
            headers=headers(),
        )
        row = response.json()["data"][0]
        assert row["is_completed"] is False
        assert row["completed_at"] is None

    def test_mood_entries_are_immutable(self, api, headers):
        entry = _insert(api, headers, "mood_entries", {"mood_score": 4})
        response = api.patch(
            "/v1/tables/mood_entries",
            params={"id": entry["id"]},
            json={"values": {"mood_score": 9}},
            headers=headers(),
        )
        assert response.status_code == 405

    def test_empty_patch(self, api, headers):
        goal = _insert(api, headers, "goals", {"title": "Stretch"})
        response = api.patch(
            "/v1/tables/goals",
            params={"id": goal["id"]},
            json={"values": {}},
            headers=headers(),
        )
        assert response.status_code == 400

    def test_null_for_required_goal_columns_is_rejected(self, api, headers):
        goal = _insert(api, headers, "goals", {"title": "A"})
        for values in ({"title": None}, {"is_completed": None}):
            response = api.patch(
                "/v1/tables/goals",
                params={"id": goal["id"]},
                json={"values": values},
                headers=headers(),
            )
            assert response.status_code == 422

        row = api.get("/v1/tables/goals", params={"id": goal["id"]}, headers=headers()).json()["data"][0]
        assert row["title"] == "A"
        assert row["is_completed"] is False

    def test_patch_requires_a_filter(self, api, headers):
        _insert(api, headers, "goals", {"title": "one"})
        _insert(api, headers, "goals", {"title": "two"})
        response = api.patch(
            "/v1/tables/goals",
            json={"values": {"is_completed": True}},
            headers=headers(),
        )
        assert response.status_code == 400
        rows = api.get("/v1/tables/goals", params={"is_completed": "true"}, headers=headers()).json()["data"]
        assert rows == []

    def test_other_users_rows_are_untouched(self, api, headers):
        theirs = _insert(api, headers, "goals", {"title": "theirs"}, user_id=OTHER_USER_ID)
        response = api.patch(
            "/v1/tables/goals",
            params={"id": theirs["id"]},
            json={"values": {"is_completed": True}},
            headers=headers(),
        )
        assert response.json()["data"] == []


class TestDelete:
    def test_delete_requires_a_filter(self, api, headers):
        _insert(api, headers, "goals", {"title": "keep"})
        response = api.delete("/v1/tables/goals", headers=headers())
        assert response.status_code == 400

    def test_delete_by_id(self, api, headers):
        goal = _insert(api, headers, "goals", {"title": "drop"})
        response = api.delete("/v1/tables/goals", params={"id": goal["id"]}, headers=headers())
        assert [row["id"] for row in response.json()["data"]] == [goal["id"]]
        assert api.get("/v1/tables/goals", headers=headers()).json()["data"] == []

    def test_profiles_cannot_be_deleted(self, api, headers):
        response = api.delete("/v1/tables/profiles", params={"first_name": "Tess"}, headers=headers())
        assert response.status_code == 405


class TestProfiles:
    def test_upsert_and_single_select(self, api, headers):
        _insert(api, headers, "profiles", {"first_name": "Tess", "last_name": "Ter"})
        _insert(api, headers, "profiles", {"first_name": "Tessa"})
        response = api.get(
            "/v1/tables/profiles",
            params={"columns": "first_name,last_name", "single": "true"},
            headers=headers(),
        )
        assert response.json()["data"] == {"first_name": "Tessa", "last_name": "Ter"}

    def test_missing_profile_is_null(self, api, headers):
        response = api.get("/v1/tables/profiles", params={"single": "true"}, headers=headers())
        assert response.json()["data"] is None
