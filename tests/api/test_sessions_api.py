"""API tests: the JSON adapter over sessions, reports and dashboards."""

import datetime

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session

from drivingschool.db.session import get_db
from drivingschool.main import app

START = (datetime.datetime.now() + datetime.timedelta(days=2)).replace(hour=9, minute=0, second=0, microsecond=0)


@pytest.fixture()
def client(engine):
    def _get_db():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_db] = _get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def _payload(instructor_id: int, trainee_id=None, session_type: str = "Practical", hours: int = 1) -> dict:
    return {
        "session_type": session_type,
        "start_datetime": START.isoformat(),
        "end_datetime": (START + datetime.timedelta(hours=hours)).isoformat(),
        "instructor_id": instructor_id,
        "trainee_id": trainee_id,
    }


class TestSessionsAPI:
    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_create_practical(self, client, make_instructor, make_trainee):
        instructor = make_instructor()
        trainee = make_trainee()

        response = client.post("/api/v1/sessions", json={"session": _payload(instructor.id, trainee.id)})

        assert response.status_code == 201
        body = response.json()
        assert body["status"] == "Scheduled"
        assert body["trainee_name"] == "Maria Georgiou"
        assert body["duration_hours"] == 1.0

    def test_create_theoretical_with_roster(self, client, make_instructor, make_trainee):
        instructor = make_instructor()
        ids = [make_trainee(first_name=name).id for name in ("A", "B")]

        response = client.post("/api/v1/sessions", json={
            "session": _payload(instructor.id, session_type="Theoretical", hours=2),
            "trainee_ids": ids,
        })
        assert response.status_code == 201
        session_id = response.json()["id"]

        enrollment = client.get(f"/api/v1/sessions/{session_id}/enrollment")
        assert enrollment.json() == sorted(ids)

    def test_invalid_create_returns_400(self, client, make_instructor):
        instructor = make_instructor()

        response = client.post("/api/v1/sessions", json={"session": _payload(instructor.id, None)})

        assert response.status_code == 400
        assert "trainee" in response.json()["detail"]

    def test_unknown_instructor_returns_404(self, client, make_trainee):
        trainee = make_trainee()
        response = client.post("/api/v1/sessions", json={"session": _payload(999, trainee.id)})
        assert response.status_code == 404

    def test_lifecycle(self, client, make_instructor, make_trainee):
        instructor = make_instructor()
        trainee = make_trainee()
        session_id = client.post("/api/v1/sessions",
                                 json={"session": _payload(instructor.id, trainee.id)}).json()["id"]

        assert client.post(f"/api/v1/sessions/{session_id}/feedback", json={"feedback": "Early"}).status_code == 400
        assert client.put(f"/api/v1/sessions/{session_id}/status", json={"status": "Completed"}).status_code == 200

        response = client.post(f"/api/v1/sessions/{session_id}/feedback", json={"feedback": "Good lane discipline"})
        assert response.status_code == 200
        assert response.json()["instructor_feedback"] == "Good lane discipline"

        assert client.get("/api/v1/sessions", params={"status": "Completed"}).json()[0]["id"] == session_id
        assert client.get("/api/v1/sessions/statistics").json()["completed_sessions"] == 1

        assert client.delete(f"/api/v1/sessions/{session_id}").status_code == 204
        assert client.get(f"/api/v1/sessions/{session_id}").status_code == 404

    def test_update(self, client, make_instructor, make_trainee):
        instructor = make_instructor()
        trainee = make_trainee()
        session_id = client.post("/api/v1/sessions",
                                 json={"session": _payload(instructor.id, trainee.id)}).json()["id"]

        new_end = (START + datetime.timedelta(hours=2)).isoformat()
        response = client.put(f"/api/v1/sessions/{session_id}", json={"session": {"end_datetime": new_end}})

        assert response.status_code == 200
        assert response.json()["duration_hours"] == 2.0


class TestReportsAndDashboardAPI:
    def test_list_reports(self, client):
        keys = {r["report_type"] for r in client.get("/api/v1/reports").json()}
        assert keys == {"above-average-sessions", "top-instructors", "most-active-instructors", "behind-schedule"}

    def test_run_report(self, client):
        response = client.get("/api/v1/reports/behind-schedule", params={"as_of": "2026-03-02"})
        assert response.status_code == 200
        assert response.json()["as_of"] == "2026-03-02"
        assert response.json()["rows"] == []

    def test_unknown_report_is_422(self, client):
        assert client.get("/api/v1/reports/nope").status_code == 422

    def test_admin_dashboard(self, client, make_trainee):
        make_trainee()
        response = client.get("/api/v1/dashboard/admin")
        assert response.status_code == 200
        assert response.json()["total_trainees"] == 1

    def test_trainee_dashboard_requires_identity(self, client):
        assert client.get("/api/v1/dashboard/trainee").status_code == 400

    def test_trainee_dashboard(self, client, make_trainee):
        trainee = make_trainee()
        response = client.get("/api/v1/dashboard/trainee", params={"identity": trainee.id})
        assert response.status_code == 200
        assert response.json()["trainee_id"] == trainee.id
