from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..attendance.model import AttendanceDay
from ..attendance.presenter import day_to_dict


@dataclass(frozen=True)
class MonthlyTotals:
    """Counters and salary figures of one employee-month."""

    late_count: int = 0
    early_count: int = 0
    total_late_minutes: int = 0
    total_early_minutes: int = 0
    # Number of days carrying an unexcused violation on a working day.
    violation_days: int = 0
    violation_full_days: float = 0.0
    per_minute_fine_days: float = 0.0
    missing_punch_days: float = 0.0
    unpaid_leave_days: float = 0.0
    paid_leave_days: float = 0.0
    absent_days: float = 0.0
    half_days: float = 0.0
    salary_deduct_days: float = 0.0
    per_day_salary: float = 0.0
    salary_deduct_amount: float = 0.0
    net_salary: float = 0.0

    @property
    def violation_deduct_days(self) -> float:
        return round(self.violation_full_days + self.per_minute_fine_days, 3)


@dataclass(frozen=True)
class MonthlyEmployeeRecord:
    emp_code: str
    name: str
    department: str
    designation: str
    shift: str
    monthly_salary: float
    totals: MonthlyTotals
    days: list[AttendanceDay] = field(default_factory=list)
    shift_id: Optional[int] = None

    def to_dict(self) -> dict:
        t = self.totals
        return {
            "empCode": self.emp_code,
            "name": self.name,
            "department": self.department,
            "designation": self.designation,
            "shift": self.shift,
            "shiftId": self.shift_id,
            "monthlySalary": self.monthly_salary,
            "lateCount": t.late_count,
            "earlyCount": t.early_count,
            "totalLateMinutes": t.total_late_minutes,
            "totalEarlyMinutes": t.total_early_minutes,
            "violationDays": t.violation_days,
            "violationFullDays": t.violation_full_days,
            "perMinuteFineDays": t.per_minute_fine_days,
            "violationDeductDays": t.violation_deduct_days,
            "missingPunchDays": t.missing_punch_days,
            "unpaidLeaveDays": t.unpaid_leave_days,
            "paidLeaveDays": t.paid_leave_days,
            "absentDays": t.absent_days,
            "halfDays": t.half_days,
            "salaryDeductDays": t.salary_deduct_days,
            "perDaySalary": t.per_day_salary,
            "salaryDeductAmount": t.salary_deduct_amount,
            "netSalary": t.net_salary,
            "days": [day_to_dict(d) for d in self.days],
        }


@dataclass(frozen=True)
class MonthlyReport:
    month: str
    days_in_month: int
    employees: list[MonthlyEmployeeRecord]

    def to_dict(self) -> dict:
        return {
            "month": self.month,
            "daysInMonth": self.days_in_month,
            "employees": [e.to_dict() for e in self.employees],
        }
