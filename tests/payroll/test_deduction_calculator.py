from datetime import datetime

import pytest

from src.attendance_payroll.attendance_payroll.attendance.model import AttendanceDay
from src.attendance_payroll.attendance_payroll.core.enums import AttendanceStatus
from src.attendance_payroll.attendance_payroll.payroll.calculator.standard_calculator import StandardDeductionCalculator
from src.attendance_payroll.attendance_payroll.payroll.policy import AbsentConfig, SalaryConfig, ViolationRules


def test_first_two_violations_are_free():
    calc = StandardDeductionCalculator()
    assert calc.violation_charge(1, 120).total == 0
    assert calc.violation_charge(2, 120).total == 0


def test_every_third_violation_is_a_full_day():
    calc = StandardDeductionCalculator()
    assert calc.violation_charge(3, 5).full_days == 1.0
    assert calc.violation_charge(6, 5).full_days == 1.0
    assert calc.violation_charge(6, 5).fine_days == 0.0


def test_other_violations_fined_per_minute_with_cap():
    calc = StandardDeductionCalculator()
    assert calc.violation_charge(4, 10).fine_days == pytest.approx(0.07)
    assert calc.violation_charge(5, 500).fine_days == 1.0


def test_missing_punch_weights():
    calc = StandardDeductionCalculator(ViolationRules(absent=AbsentConfig(both_missing_days=1.0, partial_punch_days=0.5)))
    none = AttendanceDay(date="2025-03-10", status=AttendanceStatus.ABSENT)
    partial = AttendanceDay(date="2025-03-10", status=AttendanceStatus.PRESENT, check_in=datetime(2025, 3, 10, 9, 0))
    assert calc.missing_punch_days(none) == 1.0
    assert calc.missing_punch_days(partial) == 0.5


def test_status_weights():
    calc = StandardDeductionCalculator()
    assert calc.status_days(AttendanceStatus.LEAVE_WITHOUT_INFORM) == 1.5
    assert calc.status_days(AttendanceStatus.UNPAID_LEAVE) == 1.0
    assert calc.status_days(AttendanceStatus.HALF_DAY) == 0.5
    assert calc.status_days(AttendanceStatus.PAID_LEAVE) == 0.0
    assert calc.status_days(AttendanceStatus.PRESENT) == 0.0


def test_per_day_rate_uses_month_length_unless_configured():
    assert StandardDeductionCalculator().per_day_rate(31000, 31) == 1000
    fixed = StandardDeductionCalculator(ViolationRules(salary=SalaryConfig(days_per_month=30)))
    assert fixed.per_day_rate(30000, 31) == 1000
    assert StandardDeductionCalculator().per_day_rate(0, 31) == 0.0
