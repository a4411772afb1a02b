"""
Integration tests for the /view endpoints and the health router.
"""

import pytest

from api.deps import get_settings
from backend.settings import Settings

pytestmark = pytest.mark.integration


class TestReadView:
    def test_initial_view(self, client):
        response = client.get("/view")

        assert response.status_code == 200
        data = response.json()
        assert data["active_tab"] == "history"
        assert data["search_query"] == ""
        assert data["dialog_open"] is False
        assert data["form_context"] is None
        assert data["workout_count"] == 5
        assert len(data["exercises"]) == 10
        assert data["history_empty_state"] is None
        assert data["catalog_empty_state"] is None
        assert data["notifications"] == []


class TestTabs:
    def test_switch_to_catalog(self, client):
        response = client.put("/view/tab", json={"tab": "exercises"})

        assert response.status_code == 200
        assert response.json()["active_tab"] == "exercises"

    def test_unknown_tab_rejected(self, client):
        response = client.put("/view/tab", json={"tab": "settings"})

        assert response.status_code == 422


class TestSearch:
    def test_search_filters_catalog(self, client):
        data = client.put("/view/search", json={"query": "arm"}).json()

        assert data["search_query"] == "arm"
        assert [e["name"] for e in data["exercises"]] == [
            "Bicep Curls",
            "Tricep Extensions",
        ]

    def test_search_no_results(self, client):
        data = client.put("/view/search", json={"query": "zzz"}).json()

        assert data["exercises"] == []
        assert data["catalog_empty_state"]["title"] == (
            "No exercises found matching your search"
        )

    def test_empty_body_clears_search(self, client):
        client.put("/view/search", json={"query": "arm"})

        data = client.put("/view/search", json={}).json()

        assert data["search_query"] == ""
        assert len(data["exercises"]) == 10


class TestDialogAndForm:
    def test_open_and_close(self, client):
        opened = client.post("/view/dialog/open").json()
        assert opened["dialog_open"] is True
        assert opened["form_context"]["mode"] == "create"

        closed = client.post("/view/dialog/close").json()
        assert closed["dialog_open"] is False
        assert closed["form_context"] is None

    def test_form_cancel(self, client):
        client.post("/view/dialog/open")

        data = client.post("/view/form/complete", json={"cancelled": True}).json()

        assert data["dialog_open"] is False
        assert data["workout_count"] == 5

    def test_form_submit(self, client):
        client.post("/view/dialog/open")
        workout = {
            "id": "6",
            "name": "Morning Legs",
            "date": "2023-04-12",
            "exercises": [{"id": "6-e1", "name": "Squat", "sets": 5, "reps": 5}],
            "xp_gained": 80,
        }

        response = client.post("/view/form/complete", json={"workout": workout})

        assert response.status_code == 200
        data = response.json()
        assert data["workout_count"] == 6
        assert data["dialog_open"] is False

    def test_form_submit_in_edit_mode_updates(self, client):
        client.post("/workouts/1/edit")
        workout = {"id": "1", "name": "Chest Day (edited)", "date": "2023-04-10"}

        data = client.post("/view/form/complete", json={"workout": workout}).json()

        assert data["workout_count"] == 5
        assert data["month_buckets"][0]["workouts"][0]["name"] == "Chest Day (edited)"
        assert data["notifications"][0]["message"] == "Workout updated successfully"

    def test_form_submit_in_edit_mode_for_other_workout(self, client, view):
        client.post("/workouts/2/edit")
        workout = {"id": "3", "name": "Wrong Target", "date": "2023-04-07"}

        response = client.post("/view/form/complete", json={"workout": workout})

        assert response.status_code == 409
        assert response.json()["detail"]["notifications"] == [
            {"kind": "error", "message": "Failed to update workout"}
        ]
        assert view.workouts[2].name == "Leg Day"

    def test_form_submit_duplicate_conflict(self, client):
        workout = {"id": "1", "name": "Again", "date": "2023-04-12"}

        response = client.post("/view/form/complete", json={"workout": workout})

        assert response.status_code == 409

    def test_form_outcome_must_be_consistent(self, client):
        response = client.post("/view/form/complete", json={"cancelled": False})

        assert response.status_code == 422


class TestHealth:
    def test_health(self, client):
        assert client.get("/health").json() == {"status": "ok"}

    def test_reset_forbidden_in_production(self, client):
        from backend.main import app

        app.dependency_overrides[get_settings] = lambda: Settings(
            environment="production", _env_file=None
        )

        response = client.post("/debug/reset")

        assert response.status_code == 403

    def test_reset_outside_production(self, client):
        from backend.main import app

        app.dependency_overrides[get_settings] = lambda: Settings(
            environment="test", _env_file=None
        )

        response = client.post("/debug/reset")

        assert response.status_code == 200
        assert response.json() == {"status": "reset"}
