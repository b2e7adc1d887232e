from datetime import datetime

import pytest

from src.attendance_payroll.attendance_payroll.attendance.service import AttendanceService, DayCorrection
from src.attendance_payroll.attendance_payroll.core.exceptions import NotFoundError, ValidationError
from src.attendance_payroll.attendance_payroll.employees.model import Employee
from src.attendance_payroll.attendance_payroll.leaves.service import PaidLeaveService
from tests.fakes import InMemoryAllocations, InMemoryAttendance, InMemoryEmployees, InMemoryShifts, entry


def _service(entries=()):
    attendance = InMemoryAttendance(entries)
    employees = InMemoryEmployees(
        {
            "1": Employee(emp_code="1", name="Day", department="Ops", shift_id=1),
            "2": Employee(emp_code="2", name="Night", department="Security", shift_code="– S2 (21:00–06:00)"),
        }
    )
    leaves = PaidLeaveService(attendance, InMemoryAllocations(), employees)
    return AttendanceService(attendance, employees, InMemoryShifts(), leaves=leaves), attendance


def test_update_recomputes_late_and_applies_legacy_excusal():
    svc, attendance = _service()
    svc.update_day(
        DayCorrection(emp_code="1", date="2025-03-10", check_in_time="09:30", check_out_time="18:00", violation_excused=True)
    )
    stored = attendance.get_for_employee_and_date("1", "2025-03-10")
    assert stored.status == "Present"
    assert stored.check_in == datetime(2025, 3, 10, 9, 30)
    assert stored.late_excused is True
    assert stored.early_excused is False
    assert stored.excused is True
    assert stored.shift == "D1"


def test_explicit_flag_wins_over_violation_excused():
    svc, attendance = _service()
    svc.update_day(
        DayCorrection(
            emp_code="1",
            date="2025-03-10",
            check_in_time="09:30",
            check_out_time="18:00",
            late_excused=False,
            violation_excused=True,
        )
    )
    stored = attendance.get_for_employee_and_date("1", "2025-03-10")
    assert stored.late_excused is False
    assert stored.excused is False


def test_flags_default_to_false_when_nothing_sent():
    svc, attendance = _service()
    svc.update_day(DayCorrection(emp_code="1", date="2025-03-10", check_in_time="09:30", check_out_time="18:00"))
    stored = attendance.get_for_employee_and_date("1", "2025-03-10")
    assert stored.late_excused is False
    assert stored.early_excused is False


def test_night_checkout_moves_to_next_day():
    svc, attendance = _service()
    svc.update_day(DayCorrection(emp_code="2", date="2025-03-10", check_in_time="21:00", check_out_time="05:50"))
    stored = attendance.get_for_employee_and_date("2", "2025-03-10")
    assert stored.check_out == datetime(2025, 3, 11, 5, 50)
    assert stored.shift == "S2"


def test_default_status_without_punches_is_absent():
    svc, attendance = _service()
    svc.update_day(DayCorrection(emp_code="1", date="2025-03-10", reason="no show"))
    stored = attendance.get_for_employee_and_date("1", "2025-03-10")
    assert stored.status == "Absent"
    assert stored.reason == "no show"


def test_status_abbreviation_is_normalized():
    svc, attendance = _service()
    svc.update_day(DayCorrection(emp_code="1", date="2025-03-10", status="wfh"))
    assert attendance.get_for_employee_and_date("1", "2025-03-10").status == "Work From Home"


def test_invalid_input():
    svc, _ = _service()
    with pytest.raises(ValidationError):
        svc.update_day(DayCorrection(emp_code="", date="2025-03-10"))
    with pytest.raises(ValidationError):
        svc.update_day(DayCorrection(emp_code="1", date="10/03/2025"))
    with pytest.raises(ValidationError):
        svc.update_day(DayCorrection(emp_code="1", date="2025-03-10", status="vacation?"))
    with pytest.raises(ValidationError):
        svc.update_day(DayCorrection(emp_code="1", date="2025-03-10", check_in_time="9am"))
    with pytest.raises(NotFoundError):
        svc.update_day(DayCorrection(emp_code="404", date="2025-03-10"))


def test_paid_leave_refused_when_quarter_used_up():
    used = [entry("1", f"2025-01-{d:02d}", status="Paid Leave") for d in (6, 7, 8, 9, 10, 13)]
    svc, attendance = _service(used)
    with pytest.raises(ValidationError):
        svc.update_day(DayCorrection(emp_code="1", date="2025-02-03", status="Paid Leave"))
    assert attendance.get_for_employee_and_date("1", "2025-02-03") is None

    # Re-saving an existing paid leave day does not consume quota.
    svc.update_day(DayCorrection(emp_code="1", date="2025-01-06", status="PL", reason="family"))
    assert attendance.get_for_employee_and_date("1", "2025-01-06").reason == "family"
