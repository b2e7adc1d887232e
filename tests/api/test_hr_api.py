from __future__ import annotations

from datetime import datetime

import pytest

from src.attendance_payroll.attendance_payroll.container import build_services
from src.attendance_payroll.attendance_payroll.employees.model import Employee
from src.attendance_payroll.attendance_payroll.main import create_app
from tests.fakes import InMemoryAllocations, InMemoryAttendance, InMemoryEmployees, InMemoryRules, InMemoryShifts, entry

NOW = datetime(2025, 3, 10, 12, 0)


@pytest.fixture()
def client(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    attendance = InMemoryAttendance([entry("1", "2025-03-03", "09:40", "18:00")])
    container = build_services(
        employees_repo=InMemoryEmployees({"1": Employee(emp_code="1", name="A", department="Ops", shift_id=1, monthly_salary=31000)}),
        shifts_repo=InMemoryShifts(),
        attendance_repo=attendance,
        rules_repo=InMemoryRules(),
        allocations_repo=InMemoryAllocations(),
        clock=lambda: NOW,
    )
    app = create_app(container)
    return app.test_client()


def test_monthly_attendance_defaults_to_current_month(client):
    resp = client.get("/api/hr/monthly-attendance")
    assert resp.status_code == 200
    data = resp.get_json()
    assert data["month"] == "2025-03"
    assert data["daysInMonth"] == 31
    row = data["employees"][0]
    assert row["lateCount"] == 1
    assert row["days"][2]["category"] == "LATE_ONLY"
    assert row["days"][20]["isFuture"] is True


def test_monthly_attendance_bad_month(client):
    resp = client.get("/api/hr/monthly-attendance?month=2025-3")
    assert resp.status_code == 400
    assert "YYYY-MM" in resp.get_json()["error"]


def test_post_correction_then_reload(client):
    resp = client.post(
        "/api/hr/monthly-attendance",
        json={"empCode": "1", "date": "2025-03-03", "checkInTime": "09:40", "checkOutTime": "18:00", "lateExcused": True},
    )
    assert resp.status_code == 200
    assert resp.get_json() == {"success": True}

    row = client.get("/api/hr/monthly-attendance?month=2025-03").get_json()["employees"][0]
    assert row["lateCount"] == 0
    assert row["days"][2]["lateExcused"] is True


def test_post_requires_emp_code_and_date(client):
    resp = client.post("/api/hr/monthly-attendance", json={"date": "2025-03-03"})
    assert resp.status_code == 400


def test_post_unknown_employee(client):
    resp = client.post("/api/hr/monthly-attendance", json={"empCode": "404", "date": "2025-03-03"})
    assert resp.status_code == 404


def test_leaves_endpoint(client):
    resp = client.get("/api/hr/leaves?year=2025&empCode=1")
    assert resp.status_code == 200
    data = resp.get_json()
    assert data["year"] == 2025
    assert data["paidLeaves"][0]["q1"]["allocated"] == 6

    assert client.get("/api/hr/leaves?year=abc").status_code == 400
    assert client.get("/api/hr/leaves?empCode=404").status_code == 404


def test_post_rejects_non_object_body(client):
    resp = client.post("/api/hr/monthly-attendance", json=["1", "2025-03-03"])
    assert resp.status_code == 400
    assert resp.get_json() == {"error": "JSON object expected"}
