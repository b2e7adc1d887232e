import pytest

from src.attendance_payroll.attendance_payroll.core.exceptions import NotFoundError, ValidationError
from src.attendance_payroll.attendance_payroll.employees.model import Employee
from src.attendance_payroll.attendance_payroll.leaves.service import PaidLeaveService
from tests.fakes import InMemoryAllocations, InMemoryAttendance, InMemoryEmployees, entry


def _service(entries=(), overrides=None):
    employees = InMemoryEmployees(
        {
            "7": Employee(emp_code="7", name="Seven", department="Ops"),
            "8": Employee(emp_code="8", name="Eight", department="Ops"),
        }
    )
    return PaidLeaveService(InMemoryAttendance(entries), InMemoryAllocations(overrides or {}), employees)


def test_carry_forward_q1_to_q2_and_q3_to_q4():
    entries = [
        entry("7", "2025-02-03", status="Paid Leave"),
        entry("7", "2025-02-04", status="PL"),
        entry("7", "2025-05-05", status="Paid Leave"),
        entry("7", "2025-05-06", status="Absent"),
    ]
    year = _service(entries).year_summary("7", 2025)

    q1, q2, q3, q4 = year.quarters
    assert (q1.taken, q1.allocated, q1.remaining) == (2, 6, 4)
    assert q1.dates == ("2025-02-03", "2025-02-04")
    assert (q2.taken, q2.allocated, q2.remaining) == (1, 10, 9)
    assert (q3.allocated, q4.allocated) == (6, 12)


def test_no_carry_into_q3_or_next_year():
    entries = [entry("7", "2024-12-01", status="Paid Leave")]
    year = _service(entries).year_summary("7", 2025)
    assert year.quarter(3).allocated == 6
    assert year.quarter(1).allocated == 6
    assert year.quarter(1).taken == 0


def test_allocation_override():
    year = _service(overrides={("7", 2025): {1: 3}}).year_summary("7", 2025)
    assert year.quarter(1).allocated == 3
    assert year.quarter(2).allocated == 9


def test_ensure_available():
    entries = [entry("7", f"2025-07-{d:02d}", status="Paid Leave") for d in range(1, 7)]
    svc = _service(entries)
    with pytest.raises(ValidationError):
        svc.ensure_available("7", "2025-08-01")
    svc.ensure_available("7", "2025-10-01")
    svc.ensure_available("8", "2025-08-01")


def test_list_year_json():
    svc = _service([entry("8", "2025-03-03", status="Paid Leave")])
    rows = [y.to_dict() for y in svc.list_year(2025)]
    assert [r["empCode"] for r in rows] == ["7", "8"]
    assert rows[1]["q1"] == {"taken": 1, "allocated": 6, "remaining": 5, "dates": ["2025-03-03"]}
    assert rows[1]["employeeName"] == "Eight"
    assert rows[1]["totalTaken"] == 1

    with pytest.raises(NotFoundError):
        svc.list_year(2025, emp_code="404")
