"""Tests for the HTTP API."""

import sqlite3

from core import config


def event_json(title, start, end):
    return {"title": title, "start": start, "end": end}


class TestAuth:
    def test_wrong_key_is_rejected(self, client):
        response = client.post(
            "/v1/schedule/parse", json={"text": "A 9:00-10:00 am"}, headers={"X-API-Key": "nope"}
        )
        assert response.status_code == 401
        assert response.json()["detail"]["code"] == "UNAUTHORIZED"

    def test_unconfigured_server_key(self, client, monkeypatch):
        monkeypatch.setattr(config, "PLANNER_API_KEY", "")
        response = client.post("/v1/schedule/parse", json={"text": "A 9:00-10:00 am"})
        assert response.status_code == 500
        assert response.json()["detail"]["code"] == "INTERNAL_ERROR"


class TestHealth:
    def test_healthy(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["database_available"] is True

    def test_missing_database(self, client, monkeypatch, tmp_path):
        monkeypatch.setattr(config, "DB_PATH", tmp_path / "missing.db")
        response = client.get("/health")
        assert response.status_code == 503
        assert response.json()["status"] == "unhealthy"


class TestSchedule:
    def test_parse(self, client):
        response = client.post(
            "/v1/schedule/parse",
            json={
                "text": "Meeting 9:00-10:00 am; bogus text; Party 11:00-1:00 am",
                "reference_date": "2025-03-10",
            },
        )
        assert response.status_code == 200
        body = response.json()
        assert body["events"] == [
            event_json("Meeting", "2025-03-10T09:00:00", "2025-03-10T10:00:00"),
            event_json("Party", "2025-03-10T11:00:00", "2025-03-11T01:00:00"),
        ]
        assert [e["raw_clause"] for e in body["errors"]] == ["bogus text"]
        assert body["layout"]["peak_overlap"] == 1

    def test_blank_text(self, client):
        response = client.post("/v1/schedule/parse", json={"text": "   "})
        assert response.status_code == 200
        assert response.json()["events"] == []
        assert response.json()["errors"] == []

    def test_repeat_tomorrow(self, client):
        response = client.post(
            "/v1/schedule/parse",
            json={"text": "Gym 6:00-7:00 am", "reference_date": "2025-03-10", "repeat_tomorrow": True},
        )
        assert response.json()["events"][0]["start"] == "2025-03-11T06:00:00"

    def test_input_too_large(self, client, monkeypatch):
        monkeypatch.setattr(config, "MAX_INPUT_LENGTH", 10)
        response = client.post("/v1/schedule/parse", json={"text": "Meeting 9:00-10:00 am"})
        assert response.status_code == 413
        assert response.json()["detail"]["code"] == "INPUT_TOO_LARGE"

    def test_request_is_logged(self, client, db_path):
        client.post(
            "/v1/schedule/parse",
            json={"text": "A 9:00-10:00 am; junk", "reference_date": "2025-03-10"},
        )
        conn = sqlite3.connect(db_path)
        try:
            row = conn.execute(
                "SELECT endpoint, status_code, clause_count, events_parsed, errors_reported "
                "FROM api_requests"
            ).fetchone()
            details = conn.execute(
                "SELECT detail_type, message FROM api_request_details"
            ).fetchall()
        finally:
            conn.close()
        assert row == ("/v1/schedule/parse", 200, 2, 1, 1)
        assert details == [("parse_error", "junk")]

    def test_density(self, client):
        response = client.post(
            "/v1/schedule/density",
            json={
                "events": [
                    event_json("A", "2025-03-10T09:00:00", "2025-03-10T10:00:00"),
                    event_json("B", "2025-03-10T10:00:00", "2025-03-10T11:00:00"),
                ]
            },
        )
        assert response.status_code == 200
        assert response.json() == {"peak_overlap": 2, "grid_height": 4900, "font_scale": 0.9}

    def test_density_rejects_backwards_event(self, client):
        response = client.post(
            "/v1/schedule/density",
            json={"events": [event_json("A", "2025-03-10T10:00:00", "2025-03-10T09:00:00")]},
        )
        assert response.status_code == 422
        assert response.json()["detail"]["code"] == "VALIDATION_ERROR"


class TestLifeGrid:
    def test_week_grid(self, client):
        response = client.post(
            "/v1/life-grid",
            json={
                "birthdate": "2000-01-01",
                "lifespan": "healthy",
                "unit": "week",
                "now": "2020-01-01T00:00:00",
            },
        )
        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "ok"
        grid = body["grid"]
        assert (grid["rows"], grid["columns"], grid["elapsed_units"]) == (80, 52, 1043)
        assert len(grid["elapsed"]) == grid["total_units"]
        assert grid["elapsed"][0] is True
        assert grid["elapsed"][4159] is False
        assert body["progress"]["lifespan_exceeded"] is False

    def test_missing_lifespan_is_a_prompt(self, client):
        response = client.post("/v1/life-grid", json={"birthdate": "2000-01-01"})
        assert response.status_code == 200
        assert response.json()["status"] == "missing_lifespan"
        assert response.json()["grid"] is None

    def test_future_birthdate_is_a_prompt(self, client):
        response = client.post(
            "/v1/life-grid",
            json={"birthdate": "2999-01-01", "lifespan": "healthy"},
        )
        assert response.status_code == 200
        assert response.json()["status"] == "invalid_birthdate"
        assert "past" in response.json()["message"]

    def test_lifespan_exceeded(self, client):
        response = client.post(
            "/v1/life-grid",
            json={"birthdate": "1900-01-01", "lifespan": "unhealthy", "now": "2020-01-01T00:00:00"},
        )
        assert response.json()["status"] == "lifespan_exceeded"

    def test_death_date_past_calendar_end_is_a_prompt(self, client):
        response = client.post(
            "/v1/life-grid",
            json={"birthdate": "9950-01-01", "lifespan": "healthy", "now": "9999-01-01T00:00:00"},
        )
        assert response.status_code == 200
        assert response.json()["status"] == "invalid_birthdate"

    def test_bad_unit(self, client):
        response = client.post(
            "/v1/life-grid",
            json={"birthdate": "2000-01-01", "lifespan": "healthy", "unit": "month"},
        )
        assert response.status_code == 400
        assert response.json()["detail"]["code"] == "INVALID_REQUEST"


class TestTimeline:
    def test_scroll_offset_with_grid_height(self, client):
        response = client.post(
            "/v1/scroll-offset",
            json={"now": "2025-03-10T12:00:00", "grid_height": 4800, "viewport_height": 600},
        )
        assert response.status_code == 200
        assert response.json() == {"offset": 2100.0, "grid_height": 4800.0}

    def test_scroll_offset_from_events(self, client):
        response = client.post(
            "/v1/scroll-offset",
            json={
                "now": "2025-03-10T12:00:00",
                "viewport_height": 600,
                "events": [event_json("A", "2025-03-10T09:00:00", "2025-03-10T10:00:00")],
            },
        )
        # peak overlap 1 -> 4850px grid
        assert response.json()["offset"] == 4850 / 2 - 300

    def test_refresh(self, client):
        response = client.post(
            "/v1/refresh",
            json={
                "now": "2020-01-01T09:30:00",
                "events": [event_json("A", "2020-01-01T09:00:00", "2020-01-01T10:00:00")],
                "birthdate": "2000-01-01",
                "lifespan": "healthy",
                "viewport_height": 600,
                "lock_to_now": True,
            },
        )
        assert response.status_code == 200
        body = response.json()
        assert body["statuses"][0]["is_current"] is True
        assert body["statuses"][0]["progress_percent"] == 50.0
        assert body["life"]["status"] == "ok"
        assert body["scroll_offset"] is not None

    def test_refresh_reuses_snapshot_progress(self, client, monkeypatch):
        from api.routes import life

        def fail(*args, **kwargs):
            raise AssertionError("progress recomputed")

        monkeypatch.setattr(life, "life_progress", fail)
        response = client.post(
            "/v1/refresh",
            json={"now": "2020-01-01T00:00:00", "birthdate": "2000-01-01", "lifespan": "healthy"},
        )
        assert response.status_code == 200
        assert response.json()["life"]["progress"]["elapsed_units"] == 1043

    def test_refresh_without_life(self, client):
        response = client.post("/v1/refresh", json={"now": "2020-01-01T09:30:00"})
        assert response.status_code == 200
        assert response.json()["life"] is None
        assert response.json()["scroll_offset"] is None
