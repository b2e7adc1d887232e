"""Fold a month of classified days into counters and salary figures."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, time
from typing import Iterable, Optional

from ..attendance.classifier import classify_day
from ..attendance.excusal import resolve_excusal
from ..attendance.gate import is_upcoming_day
from ..attendance.model import AttendanceDay
from ..attendance.status import EXEMPT_FROM_PUNCH_RULES
from ..common.datetime_utils import days_in_month as calendar_days, parse_month
from ..core.constants import DAY_CUTOFF
from ..core.enums import AttendanceStatus
from .calculator.base import DeductionCalculator
from .calculator.standard_calculator import StandardDeductionCalculator
from .model import MonthlyTotals

_UNPAID_STATUSES = (AttendanceStatus.UNPAID_LEAVE, AttendanceStatus.SICK_LEAVE)


@dataclass
class _Tally:
    late_count: int = 0
    early_count: int = 0
    total_late_minutes: int = 0
    total_early_minutes: int = 0
    violation_days: int = 0
    violation_full_days: float = 0.0
    per_minute_fine_days: float = 0.0
    missing_punch_days: float = 0.0
    unpaid_leave_days: float = 0.0
    paid_leave_days: float = 0.0
    leave_without_inform_days: float = 0.0
    half_days: float = 0.0


class MonthlyAggregator:
    def __init__(self, calculator: Optional[DeductionCalculator] = None, *, cutoff: time = DAY_CUTOFF):
        self._calculator = calculator or StandardDeductionCalculator()
        self._cutoff = cutoff

    def aggregate(
        self,
        days: Iterable[AttendanceDay],
        *,
        month: str,
        monthly_salary: float,
        now: datetime,
        days_in_month: Optional[int] = None,
    ) -> MonthlyTotals:
        if days_in_month is None:
            days_in_month = calendar_days(*parse_month(month))

        t = _Tally()
        for day in days:
            if is_upcoming_day(day.date, month, now=now, cutoff=self._cutoff):
                continue
            self._count_day(t, day)

        calc = self._calculator
        absent_days = t.missing_punch_days + t.leave_without_inform_days
        deduct_days = round(
            t.violation_full_days
            + t.per_minute_fine_days
            + t.unpaid_leave_days
            + t.paid_leave_days
            + absent_days
            + t.half_days,
            3,
        )
        salary = float(monthly_salary or 0)
        per_day = calc.per_day_rate(salary, days_in_month)
        amount = round(per_day * deduct_days, 2)

        return MonthlyTotals(
            late_count=t.late_count,
            early_count=t.early_count,
            total_late_minutes=t.total_late_minutes,
            total_early_minutes=t.total_early_minutes,
            violation_days=t.violation_days,
            violation_full_days=round(t.violation_full_days, 3),
            per_minute_fine_days=round(t.per_minute_fine_days, 3),
            missing_punch_days=round(t.missing_punch_days, 3),
            unpaid_leave_days=round(t.unpaid_leave_days, 3),
            paid_leave_days=round(t.paid_leave_days, 3),
            absent_days=round(absent_days, 3),
            half_days=round(t.half_days, 3),
            salary_deduct_days=deduct_days,
            per_day_salary=round(per_day, 2),
            salary_deduct_amount=amount,
            net_salary=round(salary - amount, 2),
        )

    def _count_day(self, t: _Tally, day: AttendanceDay) -> None:
        calc = self._calculator
        classification = classify_day(day)
        excusal = resolve_excusal(day)
        status = day.status

        has_late = classification.has_late_violation
        has_early = classification.has_early_violation
        if has_late:
            t.late_count += 1
            t.total_late_minutes += day.late_minutes
        if has_early:
            t.early_count += 1
            t.total_early_minutes += day.early_minutes

        if (has_late or has_early) and day.has_both_punches and status not in EXEMPT_FROM_PUNCH_RULES:
            t.violation_days += 1
            # Only the unexcused side is fined.
            minutes = (day.late_minutes if has_late else 0) + (day.early_minutes if has_early else 0)
            charge = calc.violation_charge(t.violation_days, minutes)
            t.violation_full_days += charge.full_days
            t.per_minute_fine_days += charge.fine_days

        missing_punch = day.punch_count < 2
        if (
            missing_punch
            and status not in EXEMPT_FROM_PUNCH_RULES
            and status != AttendanceStatus.LEAVE_WITHOUT_INFORM
            and not excusal.any
            and not day.weekend_off
        ):
            t.missing_punch_days += calc.missing_punch_days(day)

        if status in _UNPAID_STATUSES:
            t.unpaid_leave_days += calc.status_days(status)
        elif status == AttendanceStatus.LEAVE_WITHOUT_INFORM:
            t.leave_without_inform_days += calc.status_days(status)
        elif status == AttendanceStatus.PAID_LEAVE:
            t.paid_leave_days += calc.status_days(status)
        elif status == AttendanceStatus.HALF_DAY:
            t.half_days += calc.status_days(status)
