from __future__ import annotations

from typing import Optional

from .base import DeductionCalculator, ViolationCharge
from ..policy import ViolationRules
from ...attendance.model import AttendanceDay
from ...core.enums import AttendanceStatus

NO_CHARGE = ViolationCharge()


class StandardDeductionCalculator(DeductionCalculator):
    """Standard rule: first violations free, every Nth violation a full day, the rest fined per minute."""

    def __init__(self, rules: Optional[ViolationRules] = None):
        self._rules = rules or ViolationRules()

    def violation_charge(self, violation_number: int, violation_minutes: int) -> ViolationCharge:
        cfg = self._rules.violation
        if violation_number <= cfg.free_violations:
            return NO_CHARGE
        if violation_number % cfg.milestone_interval == 0:
            return ViolationCharge(full_days=1.0)
        fine = min(max(violation_minutes, 0) * cfg.per_minute_rate, cfg.max_per_minute_fine)
        return ViolationCharge(fine_days=fine)

    def missing_punch_days(self, day: AttendanceDay) -> float:
        if day.punch_count == 0:
            return self._rules.absent.both_missing_days
        if day.punch_count == 1:
            return self._rules.absent.partial_punch_days
        return 0.0

    def status_days(self, status: Optional[AttendanceStatus]) -> float:
        leave = self._rules.leave
        return {
            AttendanceStatus.UNPAID_LEAVE: leave.unpaid_leave_days,
            AttendanceStatus.SICK_LEAVE: leave.sick_leave_days,
            AttendanceStatus.HALF_DAY: leave.half_day_days,
            AttendanceStatus.PAID_LEAVE: leave.paid_leave_days,
            AttendanceStatus.LEAVE_WITHOUT_INFORM: self._rules.absent.leave_without_inform_days,
        }.get(status, 0.0)

    def per_day_rate(self, monthly_salary: float, days_in_month: int) -> float:
        divisor = self._rules.salary.days_per_month or days_in_month
        if monthly_salary <= 0 or divisor <= 0:
            return 0.0
        return monthly_salary / divisor
